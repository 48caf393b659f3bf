"""
input.py: Turns pointer and key events into intents for the simulation.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from .data_models import GameState, Viewport


class Intent(Enum):
    FLAP = "flap"
    START = "start"
    RESTART = "restart"
    GO_HOME = "go_home"
    TOGGLE_MUSIC = "toggle_music"
    TOGGLE_SOUND = "toggle_sound"


@dataclass(frozen=True)
class InputEvent:
    intent: Intent
    pos: Optional[Tuple[int, int]] = None


# (width, height) of each button
BUTTON_SIZES = {
    "start": (220, 60),
    "restart": (220, 60),
    "home": (220, 60),
    "music": (160, 45),
    "sound": (160, 45),
}

BUTTON_INTENTS = {
    "start": Intent.START,
    "restart": Intent.RESTART,
    "home": Intent.GO_HOME,
    "music": Intent.TOGGLE_MUSIC,
    "sound": Intent.TOGGLE_SOUND,
}


@dataclass(frozen=True)
class ButtonLayout:
    """The buttons visible for one state, positioned around the viewport centre."""
    buttons: Dict[str, pygame.Rect]

    @classmethod
    def for_state(cls, state: GameState, viewport: Viewport) -> "ButtonLayout":
        cx = int(viewport.width / 2)
        cy = int(viewport.height / 2)

        if state == GameState.HOME:
            origins = {
                "start": (cx - 110, cy - 20),
                "music": (cx - 180, cy + 60),
                "sound": (cx + 20, cy + 60),
            }
        elif state == GameState.GAME_OVER:
            origins = {
                "restart": (cx - 240, cy),
                "home": (cx + 20, cy),
                "music": (cx - 180, cy + 80),
                "sound": (cx + 20, cy + 80),
            }
        else:
            origins = {}

        return cls({
            name: pygame.Rect(origin, BUTTON_SIZES[name])
            for name, origin in origins.items()
        })

    def hit(self, pos: Tuple[int, int]) -> List[str]:
        return [name for name, rect in self.buttons.items() if rect.collidepoint(pos)]


def translate_pointer(pos: Tuple[int, int], state: GameState,
                      viewport: Viewport) -> List[InputEvent]:
    """
    Button intents under the pointer, followed by a flap.
    A press always flaps; the flap only has an effect while playing.
    """
    layout = ButtonLayout.for_state(state, viewport)
    events = [InputEvent(BUTTON_INTENTS[name], pos) for name in layout.hit(pos)]
    events.append(InputEvent(Intent.FLAP, pos))
    return events


def translate_key(key: int) -> Optional[InputEvent]:
    if key == pygame.K_SPACE:
        return InputEvent(Intent.FLAP)
    return None


class IntentQueue:
    """FIFO of intents collected between two ticks."""

    def __init__(self):
        self._events = deque()

    def push(self, event: InputEvent):
        self._events.append(event)

    def extend(self, events: Iterable[InputEvent]):
        self._events.extend(events)

    def drain(self) -> List[InputEvent]:
        events = list(self._events)
        self._events.clear()
        return events

    def __len__(self) -> int:
        return len(self._events)
