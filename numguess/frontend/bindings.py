"""
Bindings - Explicit event subscription between UI elements and handlers.

Handlers are plain synchronous callables. They receive the raw value the
element produced (or nothing) and return whatever the operation returns.
"""

from __future__ import annotations
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..session.controller import SessionController

GUESS_FIELD = "guess_field"
NEW_GAME_BUTTON = "new_game_button"
GIVE_UP_BUTTON = "give_up_button"

_NO_VALUE = object()


class ActionDispatcher:
    """
    Routes named UI element events to their subscribed handler.

    Usage:
        dispatcher = ActionDispatcher()
        dispatcher.subscribe("guess_field", controller.submit_guess)
        display = dispatcher.dispatch("guess_field", "42")
    """

    def __init__(self):
        self._handlers: dict[str, Callable[..., Any]] = {}

    def subscribe(self, element: str, handler: Callable[..., Any]):
        if element in self._handlers:
            raise ValueError(f"Element already bound: {element}")
        self._handlers[element] = handler

    def unsubscribe(self, element: str):
        self._handlers.pop(element, None)

    def is_bound(self, element: str) -> bool:
        return element in self._handlers

    def dispatch(self, element: str, value: Any = _NO_VALUE) -> Any:
        """
        Invoke the handler bound to element.

        Raises:
            KeyError: if nothing is bound to element
        """
        handler = self._handlers[element]
        if value is _NO_VALUE:
            return handler()
        return handler(value)


def bind_controller(
    dispatcher: ActionDispatcher,
    controller: SessionController,
    upper_bound: int,
) -> ActionDispatcher:
    """Subscribe the standard game elements to controller operations."""
    dispatcher.subscribe(GUESS_FIELD, controller.submit_guess)
    dispatcher.subscribe(
        NEW_GAME_BUTTON, lambda: controller.request_new_game(upper_bound)
    )
    dispatcher.subscribe(GIVE_UP_BUTTON, controller.reveal_secret)
    return dispatcher
