#!/usr/bin/env python3
"""
Tests for the one-shot command line interface.
"""

import io
import json
import logging
import runpy

import pytest
from rich.console import Console

import codementor.repl
from codementor import __version__
from codementor.cli import build_parser, main, setup_logging


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture(autouse=True)
def restore_logging():
    """setup_logging replaces root handlers; put them back afterwards"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParser:
    """Tests for argument parsing"""

    def test_defaults(self):
        """Test flags default to unset"""
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.strict is None
        assert args.seed is None

    def test_exercise_args(self):
        """Test exercise subcommand"""
        args = build_parser().parse_args(['--seed', '5', 'exercise', 'beginner', '--solution'])
        assert args.command == 'exercise'
        assert args.level == 'beginner'
        assert args.solution == True
        assert args.seed == 5

    def test_version(self, capsys):
        """Test --version prints and exits"""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--version'])
        assert __version__ in capsys.readouterr().out


class TestFeedbackCommands:
    """Tests for analyze/debug"""

    def test_analyze_file(self, tmp_path, console):
        """Test analyzing a source file"""
        source = tmp_path / 'fib.js'
        source.write_text("function fibonacci(n) {\n    return fibonacci(n - 1) + fibonacci(n - 2); }")

        assert main(['analyze', str(source)], console=console) == 0
        text = console.file.getvalue()
        assert 'Analysis Results' in text
        assert 'Lines of code: 2' in text
        assert 'Functions defined: 1' in text

    def test_debug_stdin(self, monkeypatch, console):
        """Test '-' reads from stdin"""
        monkeypatch.setattr('sys.stdin', io.StringIO("const n = items.length();\n"))

        assert main(['debug', '-'], console=console) == 0
        text = console.file.getvalue()
        assert 'Debugging Results' in text
        assert 'items.length;' in text

    def test_missing_file(self, tmp_path, console):
        """Test unreadable input exits with a usage error"""
        assert main(['analyze', str(tmp_path / 'nope.js')], console=console) == 2
        assert 'Could not read' in console.file.getvalue()

    def test_non_utf8_file(self, tmp_path, console):
        """Test undecodable input exits with a usage error"""
        source = tmp_path / 'latin1.js'
        source.write_bytes(b"// caf\xe9\nlet x = 1;\n")

        assert main(['analyze', str(source)], console=console) == 2
        assert 'not valid UTF-8' in console.file.getvalue()


class TestPracticeCommands:
    """Tests for exercise/tutorial"""

    def test_exercise_with_solution(self, console):
        """Test exercise output includes the solution when asked"""
        assert main(['exercise', 'advanced', '--solution'], console=console) == 0
        text = console.file.getvalue()
        assert 'Binary Search Implementation' in text
        assert 'Solution:' in text

    def test_unknown_exercise_level(self, console):
        """Test one-shot lookups always reject unknown levels"""
        assert main(['exercise', 'expert'], console=console) == 2
        assert "Unknown difficulty: 'expert'" in console.file.getvalue()

    def test_tutorial_prints_all_steps(self, console):
        """Test the whole tutorial is printed"""
        assert main(['tutorial', 'variables'], console=console) == 0
        text = console.file.getvalue()
        assert 'What are Variables?' in text
        assert 'Data Types' in text
        assert 'Step 2/2' in text

    def test_unknown_topic(self, console):
        """Test unknown tutorial topic"""
        assert main(['tutorial', 'loops'], console=console) == 2
        assert "Unknown topic: 'loops'" in console.file.getvalue()

    def test_custom_catalog(self, tmp_path, console):
        """Test --catalog swaps the content"""
        catalog = tmp_path / 'catalog.json'
        catalog.write_text(json.dumps({
            'exercises': {'beginner': [{
                'title': 'Sum Array',
                'description': 'Add the numbers.',
                'template': 'function sum(a) {}',
                'example': 'sum([1, 2]) should return 3',
                'solution': 'function sum(a) { return a.reduce((x, y) => x + y, 0); }',
                'difficulty': 'beginner',
            }]},
            'tutorials': {},
        }))

        assert main(['--catalog', str(catalog), 'exercise', 'beginner'], console=console) == 0
        assert 'Sum Array' in console.file.getvalue()

    def test_bad_catalog(self, tmp_path, console):
        """Test an invalid catalog file is reported"""
        catalog = tmp_path / 'catalog.json'
        catalog.write_text('{broken')
        assert main(['--catalog', str(catalog), 'exercise', 'beginner'], console=console) == 2
        assert 'invalid JSON' in console.file.getvalue()

    def test_catalog_directory(self, tmp_path, console):
        """Test --catalog pointing at a directory is reported"""
        assert main(['--catalog', str(tmp_path), 'exercise', 'beginner'], console=console) == 2
        assert 'cannot read catalog' in console.file.getvalue()


class TestInteractive:
    """Tests for launching the REPL"""

    def test_no_command_starts_repl(self, monkeypatch, console):
        """Test bare invocation starts the REPL with resolved settings"""
        started = {}

        class FakeREPL:
            def __init__(self, settings=None, console=None):
                started['settings'] = settings

            def run(self):
                started['ran'] = True

        monkeypatch.setattr(codementor.repl, 'MentorREPL', FakeREPL)

        assert main(['--strict', '--seed', '3'], console=console) == 0
        assert started['ran'] == True
        assert started['settings'].strict_selectors == True
        assert started['settings'].seed == 3


class TestLogging:
    """Tests for logging setup"""

    def test_verbose_enables_debug(self):
        """Test -v lowers the root level"""
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet_by_default(self):
        """Test default level is WARNING"""
        setup_logging()
        assert logging.getLogger().level == logging.WARNING


def test_module_entrypoint(monkeypatch, capsys):
    """Test python -m codementor"""
    monkeypatch.setattr('sys.argv', ['codementor', '--version'])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module('codementor', run_name='__main__')
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
