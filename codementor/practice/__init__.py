"""Exercise and tutorial progression."""

from .state import ExerciseState, SessionState, TutorialPhase, TutorialState
from .exercises import ExerciseSelector
from .tutorials import TutorialNavigator

__all__ = [
    "ExerciseState",
    "SessionState",
    "TutorialPhase",
    "TutorialState",
    "ExerciseSelector",
    "TutorialNavigator",
]
