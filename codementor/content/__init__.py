"""Exercise and tutorial content catalogs."""

from .models import DIFFICULTY_LEVELS, Catalog, Exercise, TutorialStep
from .loader import catalog_from_dict, get_catalog, load_catalog
from .catalog import BUILTIN_CONTENT, default_catalog

__all__ = [
    "DIFFICULTY_LEVELS",
    "Catalog",
    "Exercise",
    "TutorialStep",
    "catalog_from_dict",
    "get_catalog",
    "load_catalog",
    "BUILTIN_CONTENT",
    "default_catalog",
]
