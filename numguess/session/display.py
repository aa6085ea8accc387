"""
Display State - What a front-end renders after every operation.

Plain strings, booleans and integers only. Front-ends never receive a
reference into the controller or the session.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class ControllerState(Enum):
    """Lifecycle of the controller."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass(frozen=True)
class Labels:
    """Static label text for the input surface."""
    title: str = "Guess the Number"
    prompt: str = "Your guess?"
    submit: str = "Submit"
    new_game: str = "New Game"


@dataclass(frozen=True)
class DisplayState:
    """Immutable snapshot of everything the presentation layer shows."""
    top_message: str
    prompt_message: str
    status_message: str
    attempts_count: int
    finished: bool
    state: ControllerState = ControllerState.NOT_STARTED
    upper_bound: int | None = None
    labels: Labels = field(default_factory=Labels)
