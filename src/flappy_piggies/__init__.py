"""
Flappy Piggies: a one-button arcade game built on pygame.

The simulation core (physics, pillars, collisions, state machine) runs
without a display; `game_client` wires it to a pygame window.
"""

import logging

# Create logger for the package
logger = logging.getLogger('flappy_piggies')

# Don't add handlers here - let the application configure logging

__version__ = "0.1.0"

__all__ = ['logger', '__version__']
