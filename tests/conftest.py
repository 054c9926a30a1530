"""Shared pytest fixtures for wiki-titles tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from wiki_titles.config import TitleOverrides
from wiki_titles.models.enums import EntityKind
from wiki_titles.naming.candidate import Candidate
from wiki_titles.naming.registry import TitleRegistry


@pytest.fixture
def registry() -> TitleRegistry:
    """Empty registry without overrides."""
    return TitleRegistry(TitleOverrides())


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    """Factory for synthetic candidates (bypasses the classifier)."""

    def _make(
        kind: EntityKind = EntityKind.ITEM,
        identifier: str = "thing",
        title: str = "Thing",
        sort_key: int = 0,
        **tags: Any,
    ) -> Candidate:
        return Candidate(
            entity=object(),
            kind=kind,
            identifier=identifier,
            wanted_title=title,
            sort_key=sort_key,
            **tags,
        )

    return _make
