"""Custom exceptions for the targeting context."""

from pathlib import Path
from typing import Optional, Sequence


class InvalidRoleError(KeyError):
    """
    Exception raised when a role name is not present in the role dictionary.

    Recoverable: callers should re-prompt with one of available_roles.

    Attributes:
        role: The requested role name
        available_roles: Role names the dictionary does define
    """

    def __init__(self, role: str, available_roles: Sequence[str] = ()):
        self.role = role
        self.available_roles = tuple(available_roles)

        message = f"Unknown role: {role!r}"
        if self.available_roles:
            message += f" (available: {', '.join(self.available_roles)})"
        self.message = message

        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message and add quotes
        return self.message


class KeywordDataError(ValueError):
    """
    Exception raised when the keyword data file is missing required structure.

    Attributes:
        message: Error description
        data_path: Path to the offending data file, if loaded from disk
    """

    def __init__(self, message: str, data_path: Optional[Path] = None):
        self.message = message
        self.data_path = data_path

        parts = [message]
        if data_path:
            parts.append(f"\nData file: {data_path}")

        super().__init__("\n".join(parts))
