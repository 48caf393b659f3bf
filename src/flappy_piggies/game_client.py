#!/usr/bin/env python3
"""
game_client.py

The pygame window: event pump, frame clock, and wiring between the
simulation, the renderer and the audio player.
"""

import argparse
import logging
import random
from typing import Optional

import pygame

from .audio import AUDIO_DIR, AudioPlayer
from .constants import RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from .data_models import AudioSettings, Viewport
from .input import translate_key, translate_pointer
from .renderer import Renderer
from .simulation import Simulation

log = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 seed: Optional[int] = None, muted: bool = False, audio_dir=AUDIO_DIR):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        self.sim = Simulation(
            viewport=Viewport(width, height),
            rng=random.Random(seed),
            audio=AudioSettings(music_on=not muted, sound_on=not muted),
        )
        self.renderer = Renderer(self.screen)
        self.audio = AudioPlayer(audio_dir)
        self.clock = pygame.time.Clock()
        self.running = False

    def run(self):
        """The main client execution loop."""
        log.info("Starting %s at %dx%d", WINDOW_TITLE, self.sim.viewport.width, self.sim.viewport.height)
        self.running = True
        while self.running:
            self.clock.tick(RENDER_FPS)

            self._handle_events()
            self.sim.tick()
            self.audio.handle_all(self.sim.drain_cues())

            self.renderer.draw(self.sim.snapshot())
            pygame.display.flip()

        log.info("Quitting, last score %d", self.sim.score)
        pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    continue
                intent = translate_key(event.key)
                if intent is not None:
                    self.sim.intents.push(intent)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.sim.submit(translate_pointer(event.pos, self.sim.state, self.sim.viewport))
            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.renderer.screen = self.screen
                self.sim.resize(event.w, event.h)


def main(argv=None):
    parser = argparse.ArgumentParser(description=WINDOW_TITLE)
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed for pillar gap placement")
    parser.add_argument("--mute", action="store_true", help="Start with music and sound off")
    parser.add_argument("--audio-dir", default=str(AUDIO_DIR))
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    client = FlappyClient(args.width, args.height, seed=args.seed,
                          muted=args.mute, audio_dir=args.audio_dir)
    client.run()


if __name__ == "__main__":
    main()
