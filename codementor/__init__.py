"""
CodeMentor - Heuristic Code Feedback & Practice Coach

A terminal learning tool that gives pattern-based feedback on code snippets,
detects common bugs, serves leveled exercises, and walks through tutorials.
"""

__version__ = "0.1.0"

from .feedback import FeedbackEngine, analyze, debug

__all__ = ["FeedbackEngine", "analyze", "debug", "__version__"]
