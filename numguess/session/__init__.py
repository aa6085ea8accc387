"""
Session Module - Input validation, display state and game lifecycle.

The controller is the only owner of the active GameSession. Front-ends
call its operations and render the DisplayState it returns.
"""

from .controller import SessionController
from .display import ControllerState, DisplayState, Labels
from .errors import (
    AlreadyFinished,
    EmptyInput,
    InputError,
    MalformedInput,
    NotStarted,
    OutOfRangeInput,
)
from .manager import GameManager, ManagedGame

__all__ = [
    "SessionController",
    "ControllerState",
    "DisplayState",
    "Labels",
    "InputError",
    "EmptyInput",
    "MalformedInput",
    "OutOfRangeInput",
    "AlreadyFinished",
    "NotStarted",
    "GameManager",
    "ManagedGame",
]
