#!/usr/bin/env python3
"""
FeedbackEngine - composes analysis and debug reports from the rule tables.
"""

import logging
from typing import List, Optional, Sequence

from .metrics import CodeMetrics, extract_metrics, is_blank
from .rules import ALGORITHM_RULES, BUG_RULES, AlgorithmRule, BugFinding, BugRule

logger = logging.getLogger(__name__)

ANALYZE_PROMPT = "Please enter some code to analyze."
DEBUG_PROMPT = "Please enter some code to debug."

BEST_PRACTICES_FOOTER = (
    "🎯 Best Practices:\n"
    "• Use meaningful variable names\n"
    "• Add proper error handling\n"
    "• Consider edge cases\n"
    "• Optimize for readability"
)

DEBUG_REPORT_HEADER = "🐛 Bug Detection Report\n\n"

DEBUGGING_TIPS = (
    "🔍 Debugging Tips:\n"
    "• Use console.log() to trace values\n"
    "• Check array bounds and null values\n"
    "• Verify function parameters\n"
    "• Test with different inputs"
)


def render_metrics_header(metrics: CodeMetrics) -> str:
    """Fixed-format report header"""
    return (
        "📊 Code Analysis Report\n\n"
        "Code Metrics:\n"
        f"• Lines of code: {metrics.line_count}\n"
        f"• Functions defined: {metrics.function_count}\n"
        f"• Variables declared: {metrics.variable_count}\n\n"
    )


class FeedbackEngine:
    """Runs the analysis and bug rule tables against submitted code"""

    def __init__(
        self,
        algorithm_rules: Sequence[AlgorithmRule] = ALGORITHM_RULES,
        bug_rules: Sequence[BugRule] = BUG_RULES,
    ):
        self.algorithm_rules = tuple(algorithm_rules)
        self.bug_rules = tuple(bug_rules)

    def matching_rules(self, text: str) -> List[AlgorithmRule]:
        """All analysis rules whose signature is in the text, in rule order"""
        return [rule for rule in self.algorithm_rules if rule.matches(text)]

    def find_bug(self, text: str) -> Optional[BugFinding]:
        """First matching bug rule wins; later rules are not evaluated"""
        for rule in self.bug_rules:
            finding = rule.diagnose(text)
            if finding is not None:
                logger.debug("Bug rule '%s' matched", rule.name)
                return finding
        return None

    def analyze(self, text: str) -> str:
        """
        Build an analysis report.

        Sections are always header -> algorithm remarks -> best practices.
        """
        if is_blank(text):
            return ANALYZE_PROMPT

        metrics = extract_metrics(text)
        report = render_metrics_header(metrics)

        for rule in self.matching_rules(text):
            logger.debug("Analysis rule '%s' matched", rule.name)
            report += rule.render()

        report += BEST_PRACTICES_FOOTER
        return report

    def debug(self, text: str) -> str:
        """Build a debug report for the first known bug, or generic tips"""
        if is_blank(text):
            return DEBUG_PROMPT

        report = DEBUG_REPORT_HEADER
        finding = self.find_bug(text)
        if finding:
            report += finding.render()
        else:
            report += DEBUGGING_TIPS
        return report


_default_engine = FeedbackEngine()


def analyze(text: str) -> str:
    """Analyze code with the default rule tables"""
    return _default_engine.analyze(text)


def debug(text: str) -> str:
    """Debug code with the default rule tables"""
    return _default_engine.debug(text)
