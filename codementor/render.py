#!/usr/bin/env python3
"""
Rich renderables for reports, exercises, and tutorial steps.
Shared by the one-shot CLI and the REPL.
"""

from rich.console import Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.syntax import Syntax
from rich.text import Text

from .content import Exercise
from .practice import TutorialState

DIFFICULTY_STYLES = {
    'beginner': 'green',
    'intermediate': 'blue',
    'advanced': 'red',
}


def code_block(code: str) -> Syntax:
    return Syntax(code, 'javascript', theme='ansi_dark', word_wrap=True)


def report_panel(report: str, title: str) -> Panel:
    """Report text as-is (submitted code may contain [brackets], so no markup)"""
    return Panel(Text(report), title=title, border_style='blue')


def exercise_panel(exercise: Exercise, show_solution: bool = False) -> Panel:
    """Exercise card: description, starter template, example, optional solution"""
    style = DIFFICULTY_STYLES.get(exercise.difficulty, 'white')
    parts = [
        Text(exercise.description),
        Text(),
        code_block(exercise.template),
        Text(),
        Text.assemble(('Example: ', 'bold'), exercise.example),
    ]
    if show_solution:
        parts += [
            Text(),
            Text('Solution:', style='bold green'),
            code_block(exercise.solution),
        ]

    title = Text.assemble((exercise.title, 'bold'), '  ', (f"[{exercise.difficulty}]", style))
    return Panel(
        Group(*parts),
        title=title,
        subtitle="solution | new | exercise <level>",
        border_style=style,
    )


def tutorial_panel(tutorial: TutorialState, label: str = '') -> Panel:
    """Current step with a progress bar"""
    step = tutorial.current_step
    if step is None:
        return Panel(Text("No tutorial selected. Use 'tutorial <topic>'."), border_style='dim')

    position = f"Step {tutorial.index + 1}/{len(tutorial.steps)}"
    header = Text.assemble(
        (position, 'bold cyan'), '  ',
        (f"{tutorial.progress:.0f}%", 'dim'),
    )
    nav = []
    if not tutorial.is_first():
        nav.append('prev')
    if not tutorial.is_last():
        nav.append('next')

    return Panel(
        Group(
            header,
            ProgressBar(total=100, completed=tutorial.progress, width=40),
            Text(),
            Text(step.content),
            Text(),
            code_block(step.code),
        ),
        title=Text(f"{label or tutorial.topic}: {step.title}"),
        subtitle=' | '.join(nav) if nav else 'tutorial complete',
        border_style='cyan',
    )
