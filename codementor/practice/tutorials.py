#!/usr/bin/env python3
"""
Tutorial navigation: a linear state machine over a topic's steps.

    IDLE --start_topic--> ACTIVE(index=0)
    ACTIVE --next--> ACTIVE(index+1)       (no-op at the last step)
    ACTIVE --previous--> ACTIVE(index-1)   (no-op at the first step)
    ACTIVE --start_topic--> ACTIVE(index=0)
"""

import logging
from typing import List

from ..content import Catalog
from ..errors import InvalidSelector
from .state import SessionState, TutorialState

logger = logging.getLogger(__name__)


class TutorialNavigator:
    """Moves a SessionState's tutorial through its steps"""

    def __init__(self, catalog: Catalog, strict: bool = False):
        self.catalog = catalog
        self.strict = strict

    def topics(self) -> List[str]:
        return self.catalog.topics()

    def label(self, topic: str) -> str:
        return self.catalog.label(topic)

    def start_topic(self, state: SessionState, topic: str) -> TutorialState:
        """Begin `topic` at its first step"""
        steps = self.catalog.get_tutorial(topic)
        if not steps:
            if self.strict:
                raise InvalidSelector('topic', topic, self.topics())
            logger.warning("Ignoring unknown tutorial topic '%s'", topic)
            return state.tutorial

        state.tutorial.begin(topic, steps)
        logger.debug("Started tutorial '%s' (%d steps)", topic, len(steps))
        return state.tutorial

    def next(self, state: SessionState) -> TutorialState:
        tutorial = state.tutorial
        if tutorial.is_active() and tutorial.index < len(tutorial.steps) - 1:
            tutorial.index += 1
            logger.debug("Tutorial '%s' -> step %d", tutorial.topic, tutorial.index + 1)
        return tutorial

    def previous(self, state: SessionState) -> TutorialState:
        tutorial = state.tutorial
        if tutorial.is_active() and tutorial.index > 0:
            tutorial.index -= 1
            logger.debug("Tutorial '%s' -> step %d", tutorial.topic, tutorial.index + 1)
        return tutorial
