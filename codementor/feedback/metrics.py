#!/usr/bin/env python3
"""
Static metric extraction for submitted code.
Counts are lexical: no parsing, just pattern matches over the raw text.
"""

import re
from dataclasses import dataclass

FUNCTION_PATTERN = re.compile(r'function\s+\w+', re.ASCII)
VARIABLE_PATTERN = re.compile(r'(?:let|const|var)\s+\w+', re.ASCII)


@dataclass(frozen=True)
class CodeMetrics:
    """Simple counts extracted from a code snippet"""
    line_count: int
    function_count: int
    variable_count: int


def is_blank(text: str) -> bool:
    """True when there is nothing to analyze (empty or whitespace only)"""
    return not text or not text.strip()


def extract_metrics(text: str) -> CodeMetrics:
    """
    Compute line, function, and variable-declaration counts.

    An empty string still counts as one line.
    """
    return CodeMetrics(
        line_count=len(text.split('\n')),
        function_count=len(FUNCTION_PATTERN.findall(text)),
        variable_count=len(VARIABLE_PATTERN.findall(text)),
    )
