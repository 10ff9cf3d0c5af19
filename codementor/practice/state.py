#!/usr/bin/env python3
"""
Session state for the practice and tutorial flows.
The caller owns a SessionState and passes it into each operation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..content import Exercise, TutorialStep


class TutorialPhase(Enum):
    """Tutorial navigator states"""
    IDLE = 'idle'       # No topic selected
    ACTIVE = 'active'   # Walking through a topic's steps


@dataclass
class ExerciseState:
    """Currently selected exercise and solution visibility"""
    current: Optional[Exercise] = None
    show_solution: bool = False

    def select(self, exercise: Exercise):
        """Make an exercise current with its solution hidden"""
        self.current = exercise
        self.show_solution = False


@dataclass
class TutorialState:
    """Selected tutorial and position within it"""
    topic: str = ''
    steps: Tuple[TutorialStep, ...] = ()
    index: int = 0

    @property
    def phase(self) -> TutorialPhase:
        return TutorialPhase.ACTIVE if self.steps else TutorialPhase.IDLE

    def is_active(self) -> bool:
        return self.phase == TutorialPhase.ACTIVE

    @property
    def current_step(self) -> Optional[TutorialStep]:
        if self.is_active():
            return self.steps[self.index]
        return None

    @property
    def progress(self) -> float:
        """Percent complete, derived from the index: (index + 1) / len * 100"""
        if not self.steps:
            return 0.0
        return (self.index + 1) / len(self.steps) * 100

    def is_first(self) -> bool:
        return self.index == 0

    def is_last(self) -> bool:
        return self.is_active() and self.index == len(self.steps) - 1

    def begin(self, topic: str, steps: Tuple[TutorialStep, ...]):
        """Enter a fresh ACTIVE state at the first step"""
        self.topic = topic
        self.steps = tuple(steps)
        self.index = 0


@dataclass
class SessionState:
    """Everything one learner's session holds"""
    # Feedback panels
    analyze_code: str = ''
    analysis_result: str = ''
    debug_code: str = ''
    debug_result: str = ''

    # Practice
    exercise: ExerciseState = field(default_factory=ExerciseState)
    tutorial: TutorialState = field(default_factory=TutorialState)
