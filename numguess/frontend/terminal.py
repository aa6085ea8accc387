"""
Terminal Frontend - Line-oriented play on stdin/stdout.

Commands:
    <number>   Submit a guess
    :new       Start a new game
    :give-up   Reveal the secret
    :quit      Leave (EOF works too)
"""

from __future__ import annotations
from typing import TextIO, TYPE_CHECKING
import sys

from ..session.display import DisplayState
from .bindings import (
    ActionDispatcher,
    bind_controller,
    GUESS_FIELD,
    NEW_GAME_BUTTON,
    GIVE_UP_BUTTON,
)

if TYPE_CHECKING:
    from ..session.controller import SessionController

COMMANDS = {
    ":new": NEW_GAME_BUTTON,
    ":give-up": GIVE_UP_BUTTON,
}
QUIT_COMMANDS = {":quit", ":q"}


class TerminalFrontend:
    """
    Renders DisplayState snapshots as text and feeds typed lines back in.

    Usage:
        frontend = TerminalFrontend(SessionController(), upper_bound=100)
        frontend.run()
    """

    def __init__(
        self,
        controller: SessionController,
        upper_bound: int,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.controller = controller
        self.upper_bound = upper_bound
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.dispatcher = bind_controller(ActionDispatcher(), controller, upper_bound)

    def run(self) -> int:
        """Play until :quit or EOF. Returns the process exit code."""
        labels = self.controller.labels
        self._write(labels.title)
        self._write(f"Type a number and press Enter to {labels.submit.lower()}. "
                    f"Commands: :new, :give-up, :quit")
        self.render(self.controller.initialize(self.upper_bound))

        while True:
            self.stdout.write(f"{labels.prompt} ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self._write("")
                break
            if not self.handle_line(line):
                break
        return 0

    def handle_line(self, line: str) -> bool:
        """Process one line of input. Returns False when the user quits."""
        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            self._write("Bye!")
            return False

        element = COMMANDS.get(command)
        if element == GIVE_UP_BUTTON:
            secret = self.dispatcher.dispatch(GIVE_UP_BUTTON)
            self._write(f"The number was {secret}. Type :new to play again.")
        elif element == NEW_GAME_BUTTON:
            self._write(f"--- {self.controller.labels.new_game} ---")
            self.render(self.dispatcher.dispatch(NEW_GAME_BUTTON))
        else:
            self.render(self.dispatcher.dispatch(GUESS_FIELD, line))
        return True

    def render(self, display: DisplayState):
        if display.status_message:
            self._write(display.status_message)
            return
        if display.finished:
            self._write(f"{display.top_message} "
                        f"You got it in {display.attempts_count} attempt(s).")
            self._write("Type :new to play again.")
        else:
            self._write(display.top_message)

    def _write(self, text: str):
        self.stdout.write(text + "\n")
