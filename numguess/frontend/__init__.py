"""
Frontend Module - Input surfaces that drive a SessionController.

Wiring is explicit: a bootstrap builds the controller, then subscribes
named UI elements to controller operations on an ActionDispatcher.
"""

from .bindings import (
    ActionDispatcher,
    bind_controller,
    GUESS_FIELD,
    NEW_GAME_BUTTON,
    GIVE_UP_BUTTON,
)
from .terminal import TerminalFrontend

__all__ = [
    "ActionDispatcher",
    "bind_controller",
    "GUESS_FIELD",
    "NEW_GAME_BUTTON",
    "GIVE_UP_BUTTON",
    "TerminalFrontend",
]
