#!/usr/bin/env python3
"""
Interactive REPL session for code feedback, exercises, and tutorials.
"""

from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config import Settings, get_config_dir, resolve_settings
from ..content import Catalog, get_catalog
from ..errors import CodeMentorError
from ..feedback import FeedbackEngine
from ..practice import ExerciseSelector, SessionState, TutorialNavigator
from ..render import exercise_panel, report_panel, tutorial_panel
from .commands import get_command_help


class MentorREPL:
    """Interactive REPL driving the feedback engine and practice state"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[Catalog] = None,
        console: Optional[Console] = None,
        prompt_session=None,
    ):
        self.settings = settings or resolve_settings()
        self.console = console or Console()
        self.catalog = catalog or get_catalog(self.settings.catalog_path)

        self.engine = FeedbackEngine()
        self.selector = ExerciseSelector(
            self.catalog,
            seed=self.settings.seed,
            strict=self.settings.strict_selectors,
        )
        self.navigator = TutorialNavigator(self.catalog, strict=self.settings.strict_selectors)
        self.state = SessionState()

        # REPL setup
        if prompt_session is None:
            if self.settings.history:
                history = FileHistory(str(get_config_dir() / 'repl_history'))
            else:
                history = InMemoryHistory()
            prompt_session = PromptSession(
                history=history,
                auto_suggest=AutoSuggestFromHistory(),
            )
        self.prompt_session = prompt_session

    def run(self):
        """Main REPL loop"""
        self._print_welcome()

        while True:
            try:
                user_input = self.prompt_session.prompt(self._get_prompt())

                if not user_input.strip():
                    continue

                result = self._process_command(user_input.strip())

                if result == 'exit':
                    self.console.print("[dim]Goodbye![/dim]")
                    break

            except KeyboardInterrupt:
                self.console.print("\n[dim]Use 'exit' to quit[/dim]")
            except EOFError:
                break
            except CodeMentorError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")
            except Exception as e:
                self.console.print(f"[red]Error: {escape(str(e))}[/red]")

    def _print_welcome(self):
        """Print welcome message"""
        welcome = """
[bold blue]CodeMentor[/bold blue] - Programming Learning & Debugging Assistant

Paste code for analysis or bug detection, practice exercises by level,
or follow a step-by-step tutorial.

[dim]Commands: analyze, debug, exercise, tutorial, help
Type 'help' for all commands or 'help <cmd>' for details.[/dim]
"""
        self.console.print(Panel(welcome, border_style="blue"))

    def _get_prompt(self) -> str:
        """Generate context-aware prompt"""
        parts = ['codementor']

        exercise = self.state.exercise.current
        if exercise:
            parts.append(f"[{exercise.difficulty}]")

        tutorial = self.state.tutorial
        if tutorial.is_active():
            parts.append(f"({tutorial.topic} {tutorial.index + 1}/{len(tutorial.steps)})")

        return ' '.join(parts) + '> '

    def _process_command(self, user_input: str) -> Optional[str]:
        """Process user input and dispatch to handlers"""
        parts = user_input.split(maxsplit=1)
        command = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ''

        handlers = {
            'analyze': self._cmd_analyze,
            'debug': self._cmd_debug,
            'fix': self._cmd_debug,
            'explain': self._cmd_debug,
            'exercise': self._cmd_exercise,
            'solution': self._cmd_solution,
            'new': self._cmd_new,
            'levels': self._cmd_levels,
            'tutorial': self._cmd_tutorial,
            'next': self._cmd_next,
            'prev': self._cmd_prev,
            'previous': self._cmd_prev,
            'step': self._cmd_step,
            'topics': self._cmd_topics,
            'status': self._cmd_status,
            'help': self._cmd_help,
            'clear': self._cmd_clear,
            'exit': lambda _: 'exit',
            'quit': lambda _: 'exit',
        }

        handler = handlers.get(command)
        if handler:
            return handler(args)

        self.console.print(f"[red]Unknown command: {escape(command)}[/red]")
        self.console.print("[dim]Type 'help' for commands.[/dim]")
        return None

    def _read_code(self, args: str) -> str:
        """Inline code from the command, or a pasted block ended by an empty line"""
        if args:
            return args

        self.console.print("[dim]Paste your code, then press Enter on an empty line:[/dim]")
        lines = []
        while True:
            try:
                line = self.prompt_session.prompt('... ')
            except EOFError:
                break
            if not line.strip():
                break
            lines.append(line)
        return '\n'.join(lines)

    # === Feedback ===

    def _cmd_analyze(self, args: str) -> None:
        """Analyze code"""
        code = self._read_code(args)
        self.state.analyze_code = code
        self.state.analysis_result = self.engine.analyze(code)
        self.console.print(report_panel(self.state.analysis_result, "Analysis Results"))

    def _cmd_debug(self, args: str) -> None:
        """Debug code"""
        code = self._read_code(args)
        self.state.debug_code = code
        self.state.debug_result = self.engine.debug(code)
        self.console.print(report_panel(self.state.debug_result, "Debugging Results"))

    # === Exercises ===

    def _show_exercise(self) -> None:
        exercise = self.state.exercise.current
        if exercise is None:
            self.console.print("[yellow]Select a difficulty level to get started: "
                               f"exercise <{escape('|'.join(self.selector.levels()))}>[/yellow]")
            return
        self.console.print(exercise_panel(exercise, self.state.exercise.show_solution))

    def _cmd_exercise(self, args: str) -> None:
        """Pick an exercise by level"""
        level = args.strip().lower()
        if not level:
            self.console.print("[red]Usage: exercise <level>[/red]")
            self._cmd_levels('')
            return

        exercise = self.selector.select_difficulty(self.state, level)
        if exercise is None:
            self.console.print(f"[yellow]Unknown level: {escape(level)}[/yellow]")
            self._cmd_levels('')
            return
        self._show_exercise()

    def _cmd_solution(self, args: str) -> None:
        """Toggle solution visibility"""
        if self.state.exercise.current is None:
            self._show_exercise()
            return
        self.selector.toggle_solution(self.state)
        self._show_exercise()

    def _cmd_new(self, args: str) -> None:
        """New exercise of the same level"""
        self.selector.regenerate(self.state)
        self._show_exercise()

    def _cmd_levels(self, args: str) -> None:
        """List difficulty levels"""
        table = Table(title="Difficulty Levels")
        table.add_column("Level", style="cyan")
        table.add_column("Exercises", justify="right")
        for level in self.selector.levels():
            table.add_row(escape(level), str(len(self.catalog.get_exercises(level))))
        self.console.print(table)

    # === Tutorials ===

    def _show_step(self) -> None:
        tutorial = self.state.tutorial
        if not tutorial.is_active():
            self.console.print("[yellow]Select a tutorial topic to begin: "
                               f"tutorial <{escape('|'.join(self.navigator.topics()))}>[/yellow]")
            return
        self.console.print(tutorial_panel(tutorial, self.navigator.label(tutorial.topic)))

    def _cmd_tutorial(self, args: str) -> None:
        """Start a tutorial"""
        topic = args.strip()
        if not topic:
            self.console.print("[red]Usage: tutorial <topic>[/red]")
            self._cmd_topics('')
            return

        before = self.state.tutorial.topic
        self.navigator.start_topic(self.state, topic)
        if self.state.tutorial.topic != topic:
            self.console.print(f"[yellow]Unknown topic: {escape(topic)}[/yellow]")
            self._cmd_topics('')
            if before:
                self.console.print(f"[dim]Still on '{escape(before)}'.[/dim]")
            return
        self._show_step()

    def _cmd_next(self, args: str) -> None:
        """Next step"""
        tutorial = self.state.tutorial
        if tutorial.is_last():
            self.console.print("[dim]Already at the last step.[/dim]")
        self.navigator.next(self.state)
        self._show_step()

    def _cmd_prev(self, args: str) -> None:
        """Previous step"""
        tutorial = self.state.tutorial
        if tutorial.is_active() and tutorial.is_first():
            self.console.print("[dim]Already at the first step.[/dim]")
        self.navigator.previous(self.state)
        self._show_step()

    def _cmd_step(self, args: str) -> None:
        """Show current step"""
        self._show_step()

    def _cmd_topics(self, args: str) -> None:
        """List tutorial topics"""
        table = Table(title="Tutorials")
        table.add_column("Topic", style="cyan")
        table.add_column("Title")
        table.add_column("Steps", justify="right")
        for topic in self.navigator.topics():
            table.add_row(
                escape(topic),
                escape(self.navigator.label(topic)),
                str(len(self.catalog.get_tutorial(topic))),
            )
        self.console.print(table)

    # === Utilities ===

    def _cmd_status(self, args: str) -> None:
        """Show session status"""
        exercise = self.state.exercise
        tutorial = self.state.tutorial

        self.console.print("\n[bold]Session Status[/bold]")
        if exercise.current:
            visibility = "shown" if exercise.show_solution else "hidden"
            self.console.print(f"  Exercise: {escape(exercise.current.title)} "
                               f"({escape(exercise.current.difficulty)}, solution {visibility})")
        else:
            self.console.print("  Exercise: [dim]none[/dim]")

        if tutorial.is_active():
            self.console.print(f"  Tutorial: {escape(self.navigator.label(tutorial.topic))} - "
                               f"step {tutorial.index + 1}/{len(tutorial.steps)} "
                               f"({tutorial.progress:.0f}%)")
        else:
            self.console.print("  Tutorial: [dim]none[/dim]")

        self.console.print(f"  Last analysis: {'yes' if self.state.analysis_result else 'no'}")
        self.console.print(f"  Last debug: {'yes' if self.state.debug_result else 'no'}")

    def _cmd_help(self, args: str) -> None:
        """Show help"""
        self.console.print(get_command_help(args.strip().lower() or None), markup=False)

    def _cmd_clear(self, args: str) -> None:
        """Clear screen"""
        self.console.clear()
