"""
constants.py: Centralized configuration for game and window settings.
"""

# -------- Window & Frame Config --------
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 640
RENDER_FPS = 60                 # One simulation tick per rendered frame
WINDOW_TITLE = "Flappy Piggies"

# -------- Player Config --------
PLAYER_X = 120                  # Fixed player X position (left edge)
PLAYER_SIZE = 52                # Player box is square
HITBOX_MARGIN_LEFT = 8
HITBOX_MARGIN_TOP = 6
HITBOX_MARGIN_RIGHT = 8
HITBOX_MARGIN_BOTTOM = 6

# -------- Pillar Config --------
PILLAR_WIDTH = 60
PILLAR_GAP = 190                # Gap height on a tall enough playfield
PILLAR_MAX_GAP_RATIO = 0.4      # Gap never takes more of the playfield than this
PILLAR_MARGIN = 100             # Minimum distance of the gap from the screen edges
PILLAR_SPEED = 2.2              # Horizontal speed (pixels/tick)
PILLAR_SPACING = 300            # Distance from the right edge before the next spawn

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.2                   # Added to velocity every tick
FLAP_IMPULSE = -4.3             # Velocity after a flap
MAX_FALL_VELOCITY = 10.0        # Clamping for stability
PRECISION = 4                   # Decimal places kept after each step

# -------- Background Config --------
BACKGROUND_SPEED = 0.3
