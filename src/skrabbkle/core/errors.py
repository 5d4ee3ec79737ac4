"""Error taxonomy for SkraBBKle.

None of these is fatal to the process: configuration errors mean "no board
produced", format errors are re-prompted, illegal moves are reported back to
the acting player, and resource errors degrade to an empty dictionary.
"""


class SkrabbkleError(Exception):
    """Base class for all game errors."""


class ConfigurationError(SkrabbkleError):
    """Raised when a board file or config file is malformed."""

    def __init__(self, source: str, details: str = ""):
        self.source = source
        self.details = details
        super().__init__(f"invalid configuration in {source}: {details}")


class InputFormatError(SkrabbkleError):
    """Raised when a move string does not follow the move notation."""

    def __init__(self, text: str, details: str = ""):
        self.text = text
        self.details = details
        super().__init__(f"illegal move format {text!r}: {details}")


class IllegalMoveError(SkrabbkleError):
    """Raised when a well-formed move is rejected by the rack or the board."""

    def __init__(self, move: str, reason: str):
        self.move = move
        self.reason = reason
        super().__init__(f"illegal move {move}: {reason}")


class ResourceError(SkrabbkleError):
    """Raised when an external resource such as the word list is unreadable."""

    def __init__(self, path: str, details: str = ""):
        self.path = path
        self.details = details
        super().__init__(f"cannot read {path}: {details}")
