"""Command-line token syntax per platform family.

Option prefixes and help spellings are data, selected once from the host's
OS family, so the argument loop never branches on the platform itself.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass


class UnrecognizedOptionError(ValueError):
    """Raised for a token that looks like an option but is not one we know."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Option not recognized: {token}")
        self.token = token


class TokenKind(enum.Enum):
    EMPTY = "empty"
    HELP = "help"
    PATH = "path"


@dataclass(frozen=True)
class OptionSyntax:
    """Recognized option prefixes and help spellings (lower case)."""

    prefixes: tuple[str, ...]
    help_spellings: frozenset[str]

    def classify(self, token: str) -> TokenKind:
        """Classify one raw command-line token.

        Matching is case-insensitive. Raises ``UnrecognizedOptionError`` when
        ``token`` starts with an option prefix but is not a help spelling.
        """
        if not token:
            return TokenKind.EMPTY
        word = token.lower()
        if word in self.help_spellings:
            return TokenKind.HELP
        if word.startswith(self.prefixes):
            raise UnrecognizedOptionError(token)
        return TokenKind.PATH


POSIX_SYNTAX = OptionSyntax(
    prefixes=("-",),
    help_spellings=frozenset({"?", "-?", "/?", "-h", "-help"}),
)

WINDOWS_SYNTAX = OptionSyntax(
    prefixes=("-", "/"),
    help_spellings=POSIX_SYNTAX.help_spellings | {"/h", "/help"},
)


def syntax_for_platform(os_name: str | None = None) -> OptionSyntax:
    """Return the option syntax for ``os_name`` (defaults to ``os.name``)."""
    if os_name is None:
        os_name = os.name
    return WINDOWS_SYNTAX if os_name == "nt" else POSIX_SYNTAX


__all__ = [
    "UnrecognizedOptionError",
    "TokenKind",
    "OptionSyntax",
    "POSIX_SYNTAX",
    "WINDOWS_SYNTAX",
    "syntax_for_platform",
]
