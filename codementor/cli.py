#!/usr/bin/env python3
"""
CodeMentor - Programming Learning & Debugging Assistant CLI

Usage:
    codementor                          # Interactive mode
    codementor analyze fib.js           # Analyze a file
    cat buggy.js | codementor debug -   # Debug code from stdin
    codementor exercise beginner        # Random beginner exercise
    codementor tutorial variables       # Print a whole tutorial
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from . import __version__
from .config import Settings, resolve_settings
from .content import get_catalog
from .errors import CodeMentorError
from .feedback import FeedbackEngine
from .practice import ExerciseSelector, SessionState, TutorialNavigator
from .render import exercise_panel, report_panel, tutorial_panel

EXIT_OK = 0
EXIT_USAGE = 2


def setup_logging(verbose: bool = False):
    """Route log records through rich; quiet unless verbose"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='codementor',
        description='CodeMentor - heuristic code feedback, practice exercises, and tutorials',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  codementor -i                            # Start interactive mode
  codementor analyze fib.js                # Metrics + algorithm remarks
  codementor debug buggy.js                # Known bug patterns + fix
  codementor exercise advanced --solution  # Exercise with its solution
  codementor tutorial functions            # Step-by-step tutorial
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='Start the interactive REPL (default with no command)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for exercise selection (repeatable picks)')
    parser.add_argument('--strict', action='store_true', default=None,
                        help='Fail on unknown difficulty levels or topics instead of ignoring them')
    parser.add_argument('--catalog', metavar='PATH', default=None,
                        help='Load exercises/tutorials from a JSON catalog file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show debug logging')

    sub = parser.add_subparsers(dest='command')

    analyze = sub.add_parser('analyze', help='Analyze code from a file or stdin')
    analyze.add_argument('file', help="Source file, or '-' for stdin")

    debug = sub.add_parser('debug', help='Detect a known bug pattern in a file or stdin')
    debug.add_argument('file', help="Source file, or '-' for stdin")

    exercise = sub.add_parser('exercise', help='Show a random exercise for a difficulty level')
    exercise.add_argument('level', help='beginner, intermediate, or advanced')
    exercise.add_argument('--solution', action='store_true', help='Also show the solution')

    tutorial = sub.add_parser('tutorial', help='Show every step of a tutorial')
    tutorial.add_argument('topic', help='Tutorial topic (e.g. variables, functions)')

    return parser


def read_source(path: str) -> str:
    """Read code from a file path, or stdin for '-'"""
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_feedback(command: str, path: str, console: Console) -> int:
    try:
        code = read_source(path)
    except OSError as e:
        console.print(f"[red]Could not read {escape(path)}: {escape(str(e.strerror or e))}[/red]")
        return EXIT_USAGE
    except UnicodeDecodeError:
        console.print(f"[red]Could not read {escape(path)}: not valid UTF-8 text[/red]")
        return EXIT_USAGE

    engine = FeedbackEngine()
    if command == 'analyze':
        console.print(report_panel(engine.analyze(code), "Analysis Results"))
    else:
        console.print(report_panel(engine.debug(code), "Debugging Results"))
    return EXIT_OK


def run_exercise(level: str, show_solution: bool, settings: Settings, console: Console) -> int:
    catalog = get_catalog(settings.catalog_path)
    # One-shot lookups always validate the key
    selector = ExerciseSelector(catalog, seed=settings.seed, strict=True)
    state = SessionState()

    selector.select_difficulty(state, level)
    if show_solution:
        selector.toggle_solution(state)
    console.print(exercise_panel(state.exercise.current, state.exercise.show_solution))
    return EXIT_OK


def run_tutorial(topic: str, settings: Settings, console: Console) -> int:
    catalog = get_catalog(settings.catalog_path)
    navigator = TutorialNavigator(catalog, strict=True)
    state = SessionState()

    tutorial = navigator.start_topic(state, topic)
    label = navigator.label(topic)
    console.print(tutorial_panel(tutorial, label))
    while not tutorial.is_last():
        navigator.next(state)
        console.print(tutorial_panel(tutorial, label))
    return EXIT_OK


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    console = console or Console()

    try:
        settings = resolve_settings({
            'seed': args.seed,
            'strict_selectors': args.strict,
            'catalog_path': args.catalog,
        })

        if args.interactive or args.command is None:
            from .repl import MentorREPL
            MentorREPL(settings=settings, console=console).run()
            return EXIT_OK

        if args.command in ('analyze', 'debug'):
            return run_feedback(args.command, args.file, console)
        if args.command == 'exercise':
            return run_exercise(args.level, args.solution, settings, console)
        if args.command == 'tutorial':
            return run_tutorial(args.topic, settings, console)
        return EXIT_OK

    except CodeMentorError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
