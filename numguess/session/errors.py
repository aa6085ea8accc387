"""
Input Errors - Recoverable problems with a submitted guess.

None of these escape the controller. Each carries a machine code and the
user-facing text shown in the status line.
"""


class InputError(Exception):
    """Base class for rejected guesses. State is never mutated."""

    code = "INPUT_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyInput(InputError):
    code = "EMPTY_INPUT"

    def __init__(self):
        super().__init__("Please input a guess.")


class MalformedInput(InputError):
    code = "MALFORMED_INPUT"

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("Please input a whole number.")


class OutOfRangeInput(InputError):
    code = "OUT_OF_RANGE_INPUT"

    def __init__(self, value: int | str, upper_bound: int):
        # raw text when the digits were too many to convert
        self.value = value
        self.upper_bound = upper_bound
        super().__init__(f"Please input a number between 1 and {upper_bound}.")


class AlreadyFinished(InputError):
    code = "ALREADY_FINISHED"

    def __init__(self):
        super().__init__("Game already won — start a new game.")


class NotStarted(InputError):
    code = "NOT_STARTED"

    def __init__(self):
        super().__init__("Start a new game first.")
