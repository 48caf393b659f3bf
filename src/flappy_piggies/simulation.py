"""
simulation.py: The per-frame simulation loop and the Home/Playing/GameOver state machine.
"""

import copy
import logging
import random
from enum import Enum
from typing import Iterable, List, Optional

from .data_models import AudioSettings, GameConfig, GameState, Player, Snapshot, Viewport
from .input import InputEvent, Intent, IntentQueue
from .obstacles import ObstacleManager
from .physics_core import PhysicsCore

log = logging.getLogger(__name__)


class Cue(Enum):
    """Fire-and-forget instructions for the audio player."""
    FLAP = "flap"
    GAME_OVER = "game_over"
    INTRO_MUSIC = "intro_music"
    GAME_MUSIC = "game_music"
    STOP_MUSIC = "stop_music"


class Simulation:
    """
    Owns all mutable game state. Input handlers push intents into `intents`;
    `tick()` applies them and then advances the world by one frame.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 viewport: Optional[Viewport] = None,
                 rng: Optional[random.Random] = None,
                 audio: Optional[AudioSettings] = None):
        self.config = (config or GameConfig()).validate()
        self.viewport = viewport or Viewport()
        self.physics = PhysicsCore(self.config)
        self.pillars = ObstacleManager(self.config, rng or random.Random())
        self.audio = audio or AudioSettings()

        self.state = GameState.HOME
        self.score = 0
        self.tick_count = 0
        self.player = Player(x=self.config.player_x, size=self.config.player_size)
        self.physics.respawn(self.player, self.viewport)

        self.intents = IntentQueue()
        self._cues: List[Cue] = []
        if self.audio.music_on:
            self._cues.append(Cue.INTRO_MUSIC)

    @property
    def obstacles(self):
        return self.pillars.obstacles

    # ----------------- Intents -----------------

    def submit(self, events: Iterable[InputEvent]):
        self.intents.extend(events)

    def apply(self, event: InputEvent):
        """Applies one intent immediately. Intents invalid in the current state are ignored."""
        intent = event.intent

        if intent == Intent.FLAP:
            if self.state == GameState.PLAYING:
                self.player.velocity = self.physics.flap()
                if self.audio.sound_on:
                    self._cues.append(Cue.FLAP)
        elif intent == Intent.START:
            if self.state == GameState.HOME:
                self._start_run()
        elif intent == Intent.RESTART:
            if self.state == GameState.GAME_OVER:
                self._start_run()
        elif intent == Intent.GO_HOME:
            if self.state == GameState.GAME_OVER:
                self._enter(GameState.HOME)
                if self.audio.music_on:
                    self._cues.append(Cue.INTRO_MUSIC)
        elif intent == Intent.TOGGLE_MUSIC:
            if self.state != GameState.PLAYING:
                self.audio.music_on = not self.audio.music_on
                self._cues.append(Cue.INTRO_MUSIC if self.audio.music_on else Cue.STOP_MUSIC)
        elif intent == Intent.TOGGLE_SOUND:
            if self.state != GameState.PLAYING:
                self.audio.sound_on = not self.audio.sound_on

    # ----------------- State machine -----------------

    def _enter(self, state: GameState):
        log.info("State %s -> %s (score %d)", self.state.value, state.value, self.score)
        self.state = state

    def _start_run(self):
        self.reset()
        self._enter(GameState.PLAYING)
        self._cues.append(Cue.GAME_MUSIC if self.audio.music_on else Cue.STOP_MUSIC)

    def _game_over(self):
        if self.state != GameState.PLAYING:
            return
        self._enter(GameState.GAME_OVER)
        self._cues.append(Cue.STOP_MUSIC)
        if self.audio.sound_on:
            self._cues.append(Cue.GAME_OVER)

    def reset(self):
        """Puts the player back in the middle and clears the run."""
        self.physics.respawn(self.player, self.viewport)
        self.pillars.clear()
        self.score = 0

    # ----------------- Tick -----------------

    def tick(self):
        """
        The main simulation step: queued intents first, then the world.
        Nothing but intents can change state outside of PLAYING.
        """
        self.tick_count += 1

        for event in self.intents.drain():
            self.apply(event)

        if self.state != GameState.PLAYING:
            return

        # 1. Player
        self.physics.step_player(self.player)

        # 2. Spawn and move pillars
        self.pillars.spawn_if_due(self.viewport)
        self.pillars.advance()

        # 3. Score
        self.score += self.pillars.mark_passed(self.player.x)

        self.pillars.retire()

        # 4. Collisions
        if self.physics.check_collision(self.player, self.pillars.obstacles, self.viewport):
            self._game_over()

    def resize(self, width: float, height: float):
        if width <= 0 or height <= 0:
            log.debug("Ignoring resize to %sx%s", width, height)
            return
        self.viewport.width = width
        self.viewport.height = height

    def drain_cues(self) -> List[Cue]:
        cues, self._cues = self._cues, []
        return cues

    def snapshot(self) -> Snapshot:
        return Snapshot(
            state=self.state,
            score=self.score,
            player=copy.copy(self.player),
            obstacles=tuple(copy.copy(o) for o in self.pillars.obstacles),
            viewport=copy.copy(self.viewport),
            audio=copy.copy(self.audio),
        )
