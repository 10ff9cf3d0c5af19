#!/usr/bin/env python3
"""
Tests for metric extraction and the heuristic rule engine.
"""

import re

import pytest

from codementor import analyze, debug
from codementor.feedback import (
    ANALYZE_PROMPT,
    BEST_PRACTICES_FOOTER,
    BUG_RULES,
    DEBUG_PROMPT,
    DEBUGGING_TIPS,
    AlgorithmRule,
    BugRule,
    FeedbackEngine,
    PatternSignature,
    SubstringSignature,
    extract_metrics,
    is_blank,
)

FIB_CODE = """function fibonacci(n) {
    if (n <= 1) return n;
    return fibonacci(n - 1) + fibonacci(n - 2);
}

console.log(fibonacci(10));"""

AVERAGE_CODE = """function calculateAverage(numbers) {
    let sum = 0;
    for (let i = 0; i <= numbers.length; i++) {
        sum += numbers[i];
    }
    return sum / numbers.length;
}"""

FIB_REMARK = "recursive Fibonacci implementation with O(2^n) time complexity"


class TestMetrics:
    """Tests for extract_metrics"""

    def test_example_snippet(self):
        """Test counts for a two-line snippet"""
        metrics = extract_metrics("function a(){}\nlet x=1;")
        assert metrics.line_count == 2
        assert metrics.function_count == 1
        assert metrics.variable_count == 1

    def test_empty_string_is_one_line(self):
        """Test that an empty string still yields one line"""
        metrics = extract_metrics("")
        assert metrics.line_count == 1
        assert metrics.function_count == 0
        assert metrics.variable_count == 0

    def test_trailing_newline_counts_a_segment(self):
        """Test line count is the number of newline-delimited segments"""
        assert extract_metrics("a\nb\n").line_count == 3

    def test_declaration_keywords(self):
        """Test let, const and var all count as declarations"""
        code = "let a = 1;\nconst b = 2;\nvar c = 3;\nletter = 4;"
        assert extract_metrics(code).variable_count == 3

    def test_function_requires_name(self):
        """Test anonymous functions are not counted"""
        code = "const f = function () {};\nfunction named() {}"
        metrics = extract_metrics(code)
        assert metrics.function_count == 1
        assert metrics.variable_count == 1

    def test_names_are_ascii_identifiers(self):
        """Test non-ASCII names are not counted, matching JavaScript's \\w"""
        metrics = extract_metrics("function é() {}\nlet ñ = 1;\nlet n = 2;")
        assert metrics.function_count == 0
        assert metrics.variable_count == 1

    def test_is_blank(self):
        """Test blank detection"""
        assert is_blank("") == True
        assert is_blank("   \n\t ") == True
        assert is_blank(" x ") == False


class TestAnalyze:
    """Tests for analysis reports"""

    @pytest.mark.parametrize('text', ["", " ", "\n\n", "\t  \n"])
    def test_blank_input_prompt(self, text):
        """Test blank input returns the exact prompt"""
        assert analyze(text) == ANALYZE_PROMPT
        assert ANALYZE_PROMPT == "Please enter some code to analyze."

    def test_report_header_and_footer(self):
        """Test metrics header and the always-present footer"""
        report = analyze("function a(){}\nlet x=1;")
        assert report.startswith("📊 Code Analysis Report\n\nCode Metrics:\n")
        assert "• Lines of code: 2\n" in report
        assert "• Functions defined: 1\n" in report
        assert "• Variables declared: 1\n" in report
        assert report.endswith(BEST_PRACTICES_FOOTER)

    def test_fibonacci_remark_present(self):
        """Test the Fibonacci rule fires on the signature"""
        report = analyze(FIB_CODE)
        assert FIB_REMARK in report
        assert "💡 Algorithm Analysis:" in report

    def test_fibonacci_remark_absent_changes_nothing_else(self):
        """Test removing the remark is the only difference without the signature"""
        with_sig = analyze("let fibonacci = 1;")
        without_sig = analyze("let fibonaccx = 1;")
        assert FIB_REMARK not in without_sig
        remark_block = (
            "💡 Algorithm Analysis:\n"
            "This is a recursive Fibonacci implementation with O(2^n) time complexity. "
            "Consider using dynamic programming for better performance.\n\n"
        )
        assert remark_block in with_sig
        assert with_sig.replace(remark_block, '') == without_sig

    def test_section_order(self):
        """Test header -> remarks -> footer ordering"""
        report = analyze(FIB_CODE)
        header = report.index("📊 Code Analysis Report")
        remark = report.index("💡 Algorithm Analysis:")
        footer = report.index("🎯 Best Practices:")
        assert header < remark < footer

    def test_multiple_remarks_in_rule_order(self):
        """Test all matching remarks are appended in definition order"""
        code = "function binarySearch(a) {}\nfunction bubbleSort(a) {}\n// fibonacci"
        report = analyze(code)
        assert report.count("💡 Algorithm Analysis:") == 3
        fib = report.index("Fibonacci")
        bubble = report.index("bubble sort")
        binary = report.index("Binary search")
        assert fib < bubble < binary

    def test_no_rules_only_header_and_footer(self):
        """Test plain code gets no algorithm section"""
        report = analyze("let x = 1;")
        assert "💡" not in report
        assert report.endswith(BEST_PRACTICES_FOOTER)


class TestDebug:
    """Tests for debug reports"""

    @pytest.mark.parametrize('text', ["", "   ", "\n"])
    def test_blank_input_prompt(self, text):
        """Test blank input returns the exact prompt"""
        assert debug(text) == DEBUG_PROMPT
        assert DEBUG_PROMPT == "Please enter some code to debug."

    def test_off_by_one_detected(self):
        """Test the off-by-one signature produces diagnosis and corrected code"""
        report = debug(AVERAGE_CODE)
        assert report.startswith("🐛 Bug Detection Report\n\n")
        assert "🚨 Array Index Error Detected:" in report
        assert "Issue: Loop condition 'i <= numbers.length' will cause array out-of-bounds error." in report
        assert "Problem: Arrays are zero-indexed, so valid indices are 0 to length-1." in report
        assert "Fix: Change to 'i < numbers.length'" in report
        assert "✅ Corrected Code:\nfunction calculateAverage(numbers) {" in report
        assert "for (let i = 0; i < numbers.length; i++)" in report
        assert DEBUGGING_TIPS not in report

    def test_no_signature_returns_tips_verbatim(self):
        """Test unmatched code gets the generic tips block"""
        report = debug("let total = a + b;")
        assert report == "🐛 Bug Detection Report\n\n" + DEBUGGING_TIPS
        assert DEBUGGING_TIPS == (
            "🔍 Debugging Tips:\n"
            "• Use console.log() to trace values\n"
            "• Check array bounds and null values\n"
            "• Verify function parameters\n"
            "• Test with different inputs"
        )

    def test_first_match_wins(self):
        """Test only the first matching signature is reported"""
        code = AVERAGE_CODE + "\nif (sum === NaN) { return 0; }"
        report = debug(code)
        assert report.count("🚨") == 1
        assert "Array Index Error" in report
        assert "NaN Comparison" not in report

    def test_nan_comparison_rewrites_code(self):
        """Test NaN comparisons are rewritten to Number.isNaN"""
        report = debug("if (value === NaN) {\n    reset();\n}")
        assert "🚨 NaN Comparison Detected:" in report
        assert "Comparison 'value === NaN' is always false." in report
        assert "if (Number.isNaN(value)) {" in report

    def test_length_call_rewrites_code(self):
        """Test .length() is rewritten to the property"""
        report = debug("for (let i = 0; i < items.length(); i++) {}")
        assert "Property Called as Function" in report
        assert "i < items.length; i++" in report
        assert "items.length()" not in report.split("✅ Corrected Code:\n")[1]

    def test_strict_inequality_not_flagged(self):
        """Test !== NaN is outside the closed rule table"""
        assert DEBUGGING_TIPS in debug("if (x !== NaN) {}")


class TestFeedbackEngine:
    """Tests for custom rule tables"""

    def test_custom_rule_tables(self):
        """Test the engine runs whatever ordered tables it is given"""
        engine = FeedbackEngine(
            algorithm_rules=[AlgorithmRule('loop', SubstringSignature('while'), 'Loop found.')],
            bug_rules=[
                BugRule('first', PatternSignature(re.compile(r'eval\(')), 'Eval', 'i', 'p', 'f', 'fixed-1'),
                BugRule('second', SubstringSignature('eval'), 'Eval2', 'i', 'p', 'f', 'fixed-2'),
            ],
        )
        assert "Loop found." in engine.analyze("while (true) {}")
        assert "fibonacci" not in engine.analyze("fibonacci")

        finding = engine.find_bug("eval('1')")
        assert finding.rule == 'first'
        assert finding.corrected_code == 'fixed-1'
        assert engine.find_bug("nothing") is None

    def test_matching_rules(self):
        """Test rule matching order"""
        engine = FeedbackEngine()
        names = [rule.name for rule in engine.matching_rules("binarySearch fibonacci")]
        assert names == ['recursive_fibonacci', 'binary_search']

    def test_bug_rule_order(self):
        """Test the off-by-one rule is evaluated first"""
        assert BUG_RULES[0].name == 'off_by_one_loop'

    def test_signature_search(self):
        """Test both signature variants return the matched text"""
        assert SubstringSignature('abc').search('xxabcxx') == 'abc'
        assert SubstringSignature('abc').search('xyz') is None
        pattern = PatternSignature(re.compile(r'\d+'))
        assert pattern.search('a 42 b') == '42'
        assert pattern.search('none') is None
