"""
Dice Notation - Errors

Parsing is all-or-nothing: any malformed piece of notation raises
NotationError before a single die is rolled. Evaluation has no error path.
"""


class NotationError(ValueError):
    """
    Raised when dice notation cannot be parsed.

    Attributes:
        token: The offending piece of notation
    """

    def __init__(self, message: str, token: str = "") -> None:
        super().__init__(message)
        self.token = token
