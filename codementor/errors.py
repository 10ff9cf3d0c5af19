#!/usr/bin/env python3
"""
Exception types for CodeMentor.
"""

from typing import Iterable


class CodeMentorError(Exception):
    """Base class for all CodeMentor errors"""


class InvalidSelector(CodeMentorError, KeyError):
    """Unknown difficulty or topic key (raised only with strict selection)"""

    def __init__(self, kind: str, key: str, choices: Iterable[str] = ()):
        self.kind = kind
        self.key = key
        self.choices = list(choices)
        super().__init__(kind, key)

    def __str__(self) -> str:
        message = f"Unknown {self.kind}: '{self.key}'"
        if self.choices:
            message += f" (choose from: {', '.join(self.choices)})"
        return message


class CatalogError(CodeMentorError, ValueError):
    """Malformed exercise/tutorial catalog"""
