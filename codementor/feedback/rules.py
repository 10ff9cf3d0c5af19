#!/usr/bin/env python3
"""
Heuristic rule tables for analysis and debugging.

Both tables are closed and ordered. Analysis rules all fire when they match
(pure append, in definition order). Bug rules are first-match-wins: the
first signature found in the text produces the only finding in the report.
Adding coverage means adding an entry here, not new analysis machinery.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union


# =============================================================================
# SIGNATURES - literal substrings or simple lexical patterns
# =============================================================================

@dataclass(frozen=True)
class SubstringSignature:
    """Matches when a literal substring appears in the text"""
    needle: str

    def search(self, text: str) -> Optional[str]:
        """Return the matched text, or None"""
        return self.needle if self.needle in text else None


@dataclass(frozen=True)
class PatternSignature:
    """Matches a simple regular pattern anywhere in the text"""
    pattern: re.Pattern

    def search(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        return match.group(0) if match else None


Signature = Union[SubstringSignature, PatternSignature]


# =============================================================================
# ANALYSIS RULES - algorithm recognition remarks
# =============================================================================

@dataclass(frozen=True)
class AlgorithmRule:
    """Signature -> canned complexity/optimization remark"""
    name: str
    signature: Signature
    remark: str

    def matches(self, text: str) -> bool:
        return self.signature.search(text) is not None

    def render(self) -> str:
        return f"💡 Algorithm Analysis:\n{self.remark}\n\n"


ALGORITHM_RULES: Tuple[AlgorithmRule, ...] = (
    AlgorithmRule(
        name='recursive_fibonacci',
        signature=SubstringSignature('fibonacci'),
        remark=(
            "This is a recursive Fibonacci implementation with O(2^n) time complexity. "
            "Consider using dynamic programming for better performance."
        ),
    ),
    AlgorithmRule(
        name='bubble_sort',
        signature=SubstringSignature('bubbleSort'),
        remark=(
            "This looks like a bubble sort with O(n^2) time complexity. "
            "For larger inputs prefer the built-in Array.prototype.sort() or a merge sort (O(n log n))."
        ),
    ),
    AlgorithmRule(
        name='binary_search',
        signature=SubstringSignature('binarySearch'),
        remark=(
            "Binary search runs in O(log n) time but only works on sorted input. "
            "Make sure the array is sorted and that the loop bounds cannot skip the last element."
        ),
    ),
)


# =============================================================================
# BUG RULES - known defect patterns with diagnosis and fix
# =============================================================================

@dataclass(frozen=True)
class BugFinding:
    """Diagnosis produced by the first matching bug rule"""
    rule: str
    label: str
    issue: str
    problem: str
    fix: str
    corrected_code: str

    def render(self) -> str:
        return (
            f"🚨 {self.label}:\n\n"
            f"Issue: {self.issue}\n"
            f"Problem: {self.problem}\n"
            f"Fix: {self.fix}\n\n"
            f"✅ Corrected Code:\n{self.corrected_code}"
        )


@dataclass(frozen=True)
class BugRule:
    """
    Signature -> (diagnosis, fix).

    `issue` may reference the matched text as {match}. `corrected` is either a
    canned listing or a function that rewrites the submitted code.
    """
    name: str
    signature: Signature
    label: str
    issue: str
    problem: str
    fix: str
    corrected: Union[str, Callable[[str], str]]

    def diagnose(self, text: str) -> Optional[BugFinding]:
        """Return a finding if this rule's signature is in the text"""
        matched = self.signature.search(text)
        if matched is None:
            return None

        corrected_code = self.corrected(text) if callable(self.corrected) else self.corrected
        return BugFinding(
            rule=self.name,
            label=self.label,
            issue=self.issue.format(match=matched),
            problem=self.problem,
            fix=self.fix,
            corrected_code=corrected_code,
        )


CALCULATE_AVERAGE_FIXED = (
    "function calculateAverage(numbers) {\n"
    "    let sum = 0;\n"
    "    for (let i = 0; i < numbers.length; i++) {\n"
    "        sum += numbers[i];\n"
    "    }\n"
    "    return sum / numbers.length;\n"
    "}"
)

NAN_COMPARISON = re.compile(r'([\w$.\[\]]+)\s*={2,3}\s*NaN\b')
LENGTH_CALL = re.compile(r'\.length\s*\(\s*\)')


def _rewrite_nan_comparison(text: str) -> str:
    return NAN_COMPARISON.sub(lambda m: f"Number.isNaN({m.group(1)})", text)


def _rewrite_length_call(text: str) -> str:
    return LENGTH_CALL.sub('.length', text)


BUG_RULES: Tuple[BugRule, ...] = (
    BugRule(
        name='off_by_one_loop',
        signature=SubstringSignature('i <= numbers.length'),
        label="Array Index Error Detected",
        issue="Loop condition 'i <= numbers.length' will cause array out-of-bounds error.",
        problem="Arrays are zero-indexed, so valid indices are 0 to length-1.",
        fix="Change to 'i < numbers.length'",
        corrected=CALCULATE_AVERAGE_FIXED,
    ),
    BugRule(
        name='nan_comparison',
        signature=PatternSignature(NAN_COMPARISON),
        label="NaN Comparison Detected",
        issue="Comparison '{match}' is always false.",
        problem="NaN is the only value that is not equal to itself, so == and === never match it.",
        fix="Use Number.isNaN(value) instead of comparing against NaN",
        corrected=_rewrite_nan_comparison,
    ),
    BugRule(
        name='length_called_as_method',
        signature=PatternSignature(LENGTH_CALL),
        label="Property Called as Function",
        issue="'{match}' calls length as if it were a method.",
        problem="length is a property on arrays and strings; calling it throws a TypeError.",
        fix="Drop the parentheses: use '.length'",
        corrected=_rewrite_length_call,
    ),
)
