#!/usr/bin/env python3
"""
Command definitions for the CodeMentor REPL.
"""

COMMANDS = {
    # Code feedback
    'analyze': {
        'help': 'Analyze code: metrics, algorithm remarks, best practices',
        'usage': 'analyze [code]',
        'examples': ['analyze', 'analyze function fibonacci(n) { return n; }'],
    },
    'debug': {
        'help': 'Find a known bug pattern and show a corrected version',
        'usage': 'debug [code]',
        'examples': ['debug', 'debug if (x === NaN) {}'],
    },
    'fix': {
        'help': 'Find & fix bugs (alias for debug)',
        'usage': 'fix [code]',
        'examples': ['fix'],
    },
    'explain': {
        'help': 'Explain errors in code (alias for debug)',
        'usage': 'explain [code]',
        'examples': ['explain'],
    },

    # Practice exercises
    'exercise': {
        'help': 'Get a random exercise at a difficulty level',
        'usage': 'exercise <level>',
        'examples': ['exercise beginner', 'exercise advanced'],
    },
    'solution': {
        'help': 'Show or hide the current exercise solution',
        'usage': 'solution',
        'examples': ['solution'],
    },
    'new': {
        'help': 'New exercise at the same difficulty',
        'usage': 'new',
        'examples': ['new'],
    },
    'levels': {
        'help': 'List difficulty levels',
        'usage': 'levels',
        'examples': ['levels'],
    },

    # Tutorials
    'tutorial': {
        'help': 'Start a step-by-step tutorial',
        'usage': 'tutorial <topic>',
        'examples': ['tutorial variables', 'tutorial functions'],
    },
    'next': {
        'help': 'Go to the next tutorial step',
        'usage': 'next',
        'examples': ['next'],
    },
    'prev': {
        'help': 'Go to the previous tutorial step',
        'usage': 'prev',
        'examples': ['prev', 'previous'],
    },
    'step': {
        'help': 'Show the current tutorial step again',
        'usage': 'step',
        'examples': ['step'],
    },
    'topics': {
        'help': 'List tutorial topics',
        'usage': 'topics',
        'examples': ['topics'],
    },

    # Utilities
    'status': {
        'help': 'Show current exercise and tutorial progress',
        'usage': 'status',
        'examples': ['status'],
    },
    'help': {
        'help': 'Show available commands',
        'usage': 'help [command]',
        'examples': ['help', 'help debug'],
    },
    'clear': {
        'help': 'Clear the screen',
        'usage': 'clear',
        'examples': ['clear'],
    },
    'exit': {
        'help': 'Exit the REPL',
        'usage': 'exit',
        'examples': ['exit', 'quit'],
    },
    'quit': {
        'help': 'Exit the REPL (alias for exit)',
        'usage': 'quit',
        'examples': ['quit'],
    },
}


COMMAND_GROUPS = (
    ('Feedback', ('analyze', 'debug', 'fix', 'explain')),
    ('Exercises', ('exercise', 'solution', 'new', 'levels')),
    ('Tutorials', ('tutorial', 'next', 'prev', 'step', 'topics')),
    ('Utilities', ('status', 'help', 'clear', 'exit')),
)


def get_command_help(command: str = None) -> str:
    """Help for one command, or the grouped command list"""
    cmd = COMMANDS.get(command) if command else None
    if cmd:
        text = f"  {command}: {cmd['help']}\n  Usage: {cmd['usage']}"
        if cmd['examples']:
            text += "\n  Examples: " + ', '.join(cmd['examples'])
        return text

    sections = ["Available commands:"]
    for group, names in COMMAND_GROUPS:
        rows = [f"    {COMMANDS[name]['usage']:<18} {COMMANDS[name]['help']}" for name in names]
        sections.append(f"  {group}:\n" + '\n'.join(rows))
    sections.append("Type 'help <command>' for details on one command.")
    return '\n\n'.join(sections)
