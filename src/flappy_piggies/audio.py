"""
audio.py: Best-effort playback of simulation cues through pygame.mixer.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pygame

from .simulation import Cue

log = logging.getLogger(__name__)

AUDIO_DIR = Path("audio")
AUDIO_EXTENSIONS = (".mp3", ".ogg", ".wav")
SOUND_NAMES = ("flap", "gameover")
MUSIC_NAMES = ("intro", "game")


class AudioPlayer:
    """
    Plays sound effects and background tracks. Every failure (no mixer,
    missing file, unsupported codec) is logged and otherwise ignored.
    """

    def __init__(self, audio_dir: Union[str, Path] = AUDIO_DIR):
        self.audio_dir = Path(audio_dir)
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.tracks: Dict[str, Path] = {}
        self.current_track: Optional[str] = None
        self.enabled = self._init_mixer()
        if self.enabled:
            self._load()

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            log.warning("Audio disabled, mixer unavailable: %s", e)
            return False
        return True

    def _find(self, name: str) -> Optional[Path]:
        for ext in AUDIO_EXTENSIONS:
            path = self.audio_dir / f"{name}{ext}"
            if path.is_file():
                return path
        log.warning("Audio file '%s' not found in %s", name, self.audio_dir)
        return None

    def _load(self):
        for name in SOUND_NAMES:
            path = self._find(name)
            if path is None:
                continue
            try:
                self.sounds[name] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as e:
                log.warning("Could not load sound %s: %s", path, e)

        for name in MUSIC_NAMES:
            path = self._find(name)
            if path is not None:
                self.tracks[name] = path

    def play_sound(self, name: str):
        sound = self.sounds.get(name)
        if not self.enabled or sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as e:
            log.warning("Could not play sound %s: %s", name, e)

    def play_music(self, name: str):
        """Switches the looping background track, restarting it from the beginning."""
        if not self.enabled:
            return
        self.stop_music()
        path = self.tracks.get(name)
        if path is None:
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops=-1)
            self.current_track = name
        except pygame.error as e:
            log.warning("Could not play music %s: %s", path, e)

    def stop_music(self):
        if not self.enabled:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            log.warning("Could not stop music: %s", e)
        self.current_track = None

    def handle(self, cue: Cue):
        if cue == Cue.FLAP:
            self.play_sound("flap")
        elif cue == Cue.GAME_OVER:
            self.play_sound("gameover")
        elif cue == Cue.INTRO_MUSIC:
            self.play_music("intro")
        elif cue == Cue.GAME_MUSIC:
            self.play_music("game")
        elif cue == Cue.STOP_MUSIC:
            self.stop_music()

    def handle_all(self, cues: Iterable[Cue]):
        for cue in cues:
            self.handle(cue)
