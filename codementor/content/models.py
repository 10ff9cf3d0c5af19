#!/usr/bin/env python3
"""
Content models for exercises and tutorials.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

DIFFICULTY_LEVELS = ('beginner', 'intermediate', 'advanced')


@dataclass(frozen=True)
class Exercise:
    """One practice exercise"""
    title: str
    description: str
    template: str                # Starter code shown to the learner
    example: str                 # Usage example / expected result
    solution: str                # Reference solution (hidden by default)
    difficulty: str              # beginner|intermediate|advanced


@dataclass(frozen=True)
class TutorialStep:
    """One step of a topic tutorial"""
    title: str
    content: str
    code: str


@dataclass(frozen=True)
class Catalog:
    """Immutable exercises-by-difficulty and tutorials-by-topic catalogs"""
    exercises: Mapping[str, Tuple[Exercise, ...]] = field(default_factory=dict)
    tutorials: Mapping[str, Tuple[TutorialStep, ...]] = field(default_factory=dict)
    topic_labels: Mapping[str, str] = field(default_factory=dict)

    def levels(self) -> List[str]:
        """Difficulty keys in catalog order"""
        return list(self.exercises)

    def topics(self) -> List[str]:
        """Tutorial topic keys in catalog order"""
        return list(self.tutorials)

    def get_exercises(self, level: str) -> Optional[Tuple[Exercise, ...]]:
        return self.exercises.get(level)

    def get_tutorial(self, topic: str) -> Optional[Tuple[TutorialStep, ...]]:
        return self.tutorials.get(topic)

    def label(self, topic: str) -> str:
        """Display label for a topic, falling back to the title-cased key"""
        return self.topic_labels.get(topic) or topic.replace('_', ' ').title()

    def to_dict(self) -> Dict:
        """Serialize back to the JSON catalog shape"""
        return {
            'exercises': {
                level: [asdict(exercise) for exercise in bucket]
                for level, bucket in self.exercises.items()
            },
            'tutorials': {
                topic: [asdict(step) for step in steps]
                for topic, steps in self.tutorials.items()
            },
            'topic_labels': dict(self.topic_labels),
        }

