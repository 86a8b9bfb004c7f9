"""Errors raised while loading participants or drawing winners.

Every error is terminal for the invocation. ``str(err)`` is the message shown
to the user and ``exit_code`` is what the process exits with.
"""


class DrawError(Exception):
    exit_code = 1


class UsageError(DrawError):
    """Bad command line arguments."""


class SourceUnavailable(DrawError, OSError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Error: Could not open file '{path}'. Please check the file path."
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class EmptyParticipantPool(DrawError, ValueError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Error: The file '{path}' contains no valid nicknames.")


class InvalidWinnerCount(DrawError, ValueError):
    def __init__(self, value=None):
        self.value = value
        super().__init__("Error: Number of winners must be a positive integer.")


class InsufficientParticipants(DrawError, ValueError):
    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Error: Cannot select {requested} winners from only {available} participants.\n"
            "Please reduce the number of winners or add more participants to the file."
        )
