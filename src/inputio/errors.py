"""
Input Errors

Exceptions raised by the mapping layer and the input manager.
"""

from typing import Optional


class InputIOError(Exception):
    """Base class for all input.io errors."""


class InputTypeError(InputIOError, TypeError):
    """Raised when an argument has the wrong shape (e.g. a mapping that is not a dict)."""


class ValidationError(InputIOError, ValueError):
    """
    Raised when a mapping or query is well-formed but invalid.

    Attributes:
        action: The action being validated, if any
        token: The input name that failed to resolve, if any
    """

    def __init__(self, message: str, action: Optional[str] = None, token: Optional[str] = None):
        super().__init__(message)
        self.action = action
        self.token = token
