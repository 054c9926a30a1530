"""Page title assignment and conflict resolution.

Submodules:
- sanitize: MediaWiki-safe page names
- classifier: entity -> Candidate (requested title, sort key, tags)
- rules: ordered disambiguation rule table
- registry: TitleRegistry, the eager/rule-based/lazy allocation algorithm
"""

from wiki_titles.naming.candidate import Candidate
from wiki_titles.naming.classifier import EntityClassifier
from wiki_titles.naming.errors import (
    RegistryClosedError,
    TitleConflictError,
    TitleRegistryError,
    UnsupportedEntityKindError,
)
from wiki_titles.naming.registry import LazyDispute, ResolutionReport, TitleRegistry
from wiki_titles.naming.rules import DEFAULT_RULES, DisambiguationRule

__all__ = [
    "DEFAULT_RULES",
    "Candidate",
    "DisambiguationRule",
    "EntityClassifier",
    "LazyDispute",
    "RegistryClosedError",
    "ResolutionReport",
    "TitleConflictError",
    "TitleRegistry",
    "TitleRegistryError",
    "UnsupportedEntityKindError",
]
