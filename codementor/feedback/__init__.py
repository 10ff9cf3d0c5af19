"""Heuristic code feedback: metrics, rule tables, and report composition."""

from .metrics import CodeMetrics, extract_metrics, is_blank
from .rules import (
    ALGORITHM_RULES,
    BUG_RULES,
    AlgorithmRule,
    BugFinding,
    BugRule,
    PatternSignature,
    SubstringSignature,
)
from .engine import (
    ANALYZE_PROMPT,
    BEST_PRACTICES_FOOTER,
    DEBUG_PROMPT,
    DEBUGGING_TIPS,
    FeedbackEngine,
    analyze,
    debug,
)

__all__ = [
    "CodeMetrics",
    "extract_metrics",
    "is_blank",
    "ALGORITHM_RULES",
    "BUG_RULES",
    "AlgorithmRule",
    "BugFinding",
    "BugRule",
    "PatternSignature",
    "SubstringSignature",
    "ANALYZE_PROMPT",
    "BEST_PRACTICES_FOOTER",
    "DEBUG_PROMPT",
    "DEBUGGING_TIPS",
    "FeedbackEngine",
    "analyze",
    "debug",
]
