#!/usr/bin/env python3
"""
Catalog loading and validation.
Builds immutable catalogs from the JSON catalog shape:

    {"exercises": {level: [exercise, ...]},
     "tutorials": {topic: [step, ...]},
     "topic_labels": {topic: label}}
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Tuple, Union

from ..errors import CatalogError
from .models import DIFFICULTY_LEVELS, Catalog, Exercise, TutorialStep

logger = logging.getLogger(__name__)

EXERCISE_FIELDS = ('title', 'description', 'template', 'example', 'solution', 'difficulty')
STEP_FIELDS = ('title', 'content', 'code')


def _require_fields(raw: Any, fields: Tuple[str, ...], where: str) -> Dict[str, str]:
    """Check that raw is an object with every field present as a string"""
    if not isinstance(raw, dict):
        raise CatalogError(f"{where}: expected an object, got {type(raw).__name__}")
    missing = [name for name in fields if name not in raw]
    if missing:
        raise CatalogError(f"{where}: missing field(s) {', '.join(missing)}")
    for name in fields:
        if not isinstance(raw[name], str):
            raise CatalogError(f"{where}: field '{name}' must be a string")
    return {name: raw[name] for name in fields}


def _parse_exercises(raw: Any, source: str) -> Dict[str, Tuple[Exercise, ...]]:
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: 'exercises' must map difficulty -> list")

    buckets: Dict[str, Tuple[Exercise, ...]] = {}
    for level, items in raw.items():
        if level not in DIFFICULTY_LEVELS:
            raise CatalogError(
                f"{source}: unknown difficulty '{level}' "
                f"(expected one of {', '.join(DIFFICULTY_LEVELS)})"
            )
        if not isinstance(items, list) or not items:
            raise CatalogError(f"{source}: difficulty '{level}' has no exercises")

        exercises: List[Exercise] = []
        for position, item in enumerate(items):
            where = f"{source}: exercises.{level}[{position}]"
            fields = _require_fields(item, EXERCISE_FIELDS, where)
            if fields['difficulty'] != level:
                raise CatalogError(
                    f"{where}: difficulty '{fields['difficulty']}' does not match bucket '{level}'"
                )
            exercises.append(Exercise(**fields))
        buckets[level] = tuple(exercises)
    return buckets


def _parse_tutorials(raw: Any, source: str) -> Dict[str, Tuple[TutorialStep, ...]]:
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: 'tutorials' must map topic -> list")

    topics: Dict[str, Tuple[TutorialStep, ...]] = {}
    for topic, items in raw.items():
        if not isinstance(items, list) or not items:
            raise CatalogError(f"{source}: tutorial '{topic}' has no steps")
        steps = [
            TutorialStep(**_require_fields(item, STEP_FIELDS, f"{source}: tutorials.{topic}[{position}]"))
            for position, item in enumerate(items)
        ]
        topics[topic] = tuple(steps)
    return topics


def catalog_from_dict(raw: Dict[str, Any], source: str = '<dict>') -> Catalog:
    """Build a validated, read-only catalog from raw content"""
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: catalog must be a JSON object")

    exercises = _parse_exercises(raw.get('exercises', {}), source)
    tutorials = _parse_tutorials(raw.get('tutorials', {}), source)

    labels = raw.get('topic_labels', {})
    if not isinstance(labels, dict):
        raise CatalogError(f"{source}: 'topic_labels' must map topic -> label")

    return Catalog(
        exercises=MappingProxyType(exercises),
        tutorials=MappingProxyType(tutorials),
        topic_labels=MappingProxyType({str(k): str(v) for k, v in labels.items()}),
    )


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load a catalog from a JSON file"""
    path = Path(path).expanduser()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {path}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON ({e})")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"{path}: cannot read catalog ({e})")

    catalog = catalog_from_dict(raw, source=str(path))
    logger.debug(
        "Loaded catalog %s: %d difficulty levels, %d tutorial topics",
        path, len(catalog.exercises), len(catalog.tutorials),
    )
    return catalog


def get_catalog(catalog_path=None) -> Catalog:
    """The configured catalog file, or the built-in content when none is set"""
    if catalog_path:
        return load_catalog(catalog_path)

    from .catalog import default_catalog
    return default_catalog()
