#!/usr/bin/env python3
"""
Exercise selection by difficulty level.
"""

import logging
import random
from typing import List, Optional

from ..content import Catalog, Exercise
from ..errors import InvalidSelector
from .state import SessionState

logger = logging.getLogger(__name__)


class ExerciseSelector:
    """
    Picks exercises from a difficulty bucket and toggles solution visibility.

    Random choice goes through `rng`, so a fixed seed gives repeatable picks.
    Unknown levels are ignored unless `strict` is set, in which case they
    raise InvalidSelector.
    """

    def __init__(
        self,
        catalog: Catalog,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        strict: bool = False,
    ):
        self.catalog = catalog
        self.rng = rng or random.Random(seed)
        self.strict = strict

    def levels(self) -> List[str]:
        return self.catalog.levels()

    def select_difficulty(self, state: SessionState, level: str) -> Optional[Exercise]:
        """Pick a random exercise at `level` and make it current"""
        bucket = self.catalog.get_exercises(level)
        if not bucket:
            if self.strict:
                raise InvalidSelector('difficulty', level, self.levels())
            logger.warning("Ignoring unknown difficulty '%s'", level)
            return None

        exercise = self.rng.choice(bucket)
        state.exercise.select(exercise)
        logger.debug("Selected %s exercise '%s'", level, exercise.title)
        return exercise

    def toggle_solution(self, state: SessionState) -> bool:
        """Flip solution visibility; stays hidden when nothing is selected"""
        if state.exercise.current is None:
            return state.exercise.show_solution

        state.exercise.show_solution = not state.exercise.show_solution
        return state.exercise.show_solution

    def regenerate(self, state: SessionState) -> Optional[Exercise]:
        """New exercise at the current exercise's difficulty"""
        current = state.exercise.current
        if current is None:
            return None
        return self.select_difficulty(state, current.difficulty)
