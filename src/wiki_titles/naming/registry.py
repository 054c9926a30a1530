"""Title registry: decides the wiki page title of every entity.

Usage:
    registry = TitleRegistry(overrides)
    # First inform the registry about everything that will need a title:
    registry.add(item1)
    registry.add(monster1)
    # Once all entities are added, titles can be requested:
    title = registry.get_title_for(item1)

Algorithm (runs once, on the first title request):
1. Classify every entity into a Candidate (requested title, sort key, tags).
2. Group candidates by requested title.
3. Eager allocation: titles wanted by exactly one candidate are assigned.
4. Disambiguation passes: inside each disputed bucket (sorted by sort key),
   the rule table renames candidates pairwise. Renamed candidates are
   regrouped and newly unique titles are assigned. Passes repeat while the
   number of disputed titles keeps shrinking.
5. Lazy fallback: whatever is still disputed is numbered on demand by
   get_title_for(), "X", "X (2)", "X (3)", in the order titles are
   requested. The result depends on call order, not only on the entities.

get_object_by_title() is NOT consistent with get_title_for() for lazily
disputed base titles: it always returns the first candidate of the bucket,
whichever entity later receives the plain title.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from wiki_titles.config import TitleOverrides
from wiki_titles.models.enums import EntityKind
from wiki_titles.naming.candidate import Candidate
from wiki_titles.naming.classifier import EntityClassifier
from wiki_titles.naming.errors import RegistryClosedError, TitleConflictError
from wiki_titles.naming.rules import DEFAULT_RULES, DisambiguationRule, apply_rules

logger = logging.getLogger(__name__)

TitleBuckets = dict[str, list[Candidate]]


@dataclass
class LazyDispute:
    """Shared state for all entities whose title could not be disambiguated."""

    disputed_title: str
    counter: int = 0
    """How many entities have already received a title from this dispute."""

    claims_base_title: bool = True
    """False if the plain title already belongs to an entity outside the dispute."""


@dataclass
class Rename:
    """One rename applied during a disambiguation pass."""

    rule: str
    old_title: str
    new_title: str
    kind: EntityKind
    identifier: str


@dataclass
class ResolutionReport:
    """Diagnostics of one TitleRegistry.resolve() run."""

    entities_registered: int = 0
    disputed_titles: int = 0
    """Number of titles wanted by 2+ entities before any renaming."""

    passes: int = 0
    renames: list[Rename] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]
    unresolved_titles: list[str] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]
    """Titles left to lazy numbering, sorted."""

    elapsed_seconds: float = 0.0


class TitleRegistry:
    """Assigns globally unique page titles to entities.

    One registry is constructed by the entry point and passed to every
    collaborator that registers entities or asks for titles.
    """

    def __init__(
        self,
        overrides: TitleOverrides | None = None,
        *,
        rules: Sequence[DisambiguationRule] = DEFAULT_RULES,
        classifier: EntityClassifier | None = None,
    ) -> None:
        """Initialize an empty, open registry.

        Args:
            overrides: Per-kind title overrides (ignored if classifier is given).
            rules: Ordered disambiguation rule table.
            classifier: Custom classifier (default: EntityClassifier(overrides)).
        """
        self._classifier = classifier or EntityClassifier(overrides)
        self._rules = tuple(rules)

        self._entities: list[Any] = []
        self._registered_ids: set[int] = set()

        # Keyed by id(entity): entities are identified by identity, never equality.
        # self._entities keeps them alive, so ids stay valid.
        self._entity_to_title: dict[int, str] = {}
        self._title_to_entity: dict[str, Any] = {}
        self._entity_to_lazy_dispute: dict[int, LazyDispute] = {}

        self._report: ResolutionReport | None = None
        self._lock = threading.RLock()

    # ── Registration ─────────────────────────────────────────────────────────

    def add(self, entity: Any) -> None:
        """Inform the registry that this entity will need a title.

        Raises:
            RegistryClosedError: If titles were already resolved.
        """
        with self._lock:
            if self._report is not None:
                raise RegistryClosedError()
            if id(entity) in self._registered_ids:
                return
            self._registered_ids.add(id(entity))
            self._entities.append(entity)

    def add_all(self, entities: Iterable[Any]) -> None:
        for entity in entities:
            self.add(entity)

    @property
    def is_resolved(self) -> bool:
        return self._report is not None

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return id(entity) in self._registered_ids

    @property
    def rules(self) -> tuple[DisambiguationRule, ...]:
        return self._rules

    # ── Lookups ──────────────────────────────────────────────────────────────

    def get_title_for(self, entity: Any, *, allow_lazy_allocation: bool = True) -> str:
        """Return the final title of an entity previously passed to add().

        Triggers resolve() on first use. Returns "" if the entity was never
        added. For entities whose title stayed disputed, the first caller
        gets the plain title and later callers get " (2)", " (3)", ... in
        request order; with allow_lazy_allocation=False such entities get ""
        until someone allocates them.
        """
        with self._lock:
            self.resolve()

            title = self._entity_to_title.get(id(entity))
            if title is not None or not allow_lazy_allocation:
                return title or ""

            dispute = self._entity_to_lazy_dispute.get(id(entity))
            if dispute is None:
                return ""
            return self._allocate_lazily(entity, dispute)

    def get_object_by_title(
        self,
        title: str,
        required_kind: EntityKind | None = None,
    ) -> Any | None:
        """Find the entity holding ``title`` (reverse of get_title_for()).

        Args:
            title: Exact page title.
            required_kind: If set, entities of other kinds are not returned.

        Returns:
            The entity, or None if not found or of the wrong kind.
        """
        with self._lock:
            self.resolve()

            entity = self._title_to_entity.get(title)
            if entity is None:
                return None
            if required_kind is not None and getattr(entity, "kind", None) is not required_kind:
                return None
            return entity

    @property
    def report(self) -> ResolutionReport:
        """Diagnostics of the resolution (resolves if needed)."""
        return self.resolve()

    # ── Resolution ───────────────────────────────────────────────────────────

    def resolve(self) -> ResolutionReport:
        """Assign titles to all added entities. Runs once; later calls are no-ops.

        If classification raises, nothing is assigned and the registry stays
        open, so add() still accepts entities.
        """
        with self._lock:
            if self._report is not None:
                return self._report

            started = time.perf_counter()
            report = ResolutionReport(entities_registered=len(self._entities))
            logger.info("%d different entities were registered.", len(self._entities))

            candidates = []
            for order, entity in enumerate(self._entities):
                candidate = self._classifier.classify(entity, order)
                if not candidate.wanted_title:
                    logger.warning(
                        "Name of %s %r is empty after cleanup, leaving it untitled.",
                        candidate.kind.value,
                        candidate.identifier,
                    )
                    continue
                candidates.append(candidate)

            disputed = self._allocate_undisputed_titles(self._group_by_title(candidates))
            report.disputed_titles = len(disputed)
            logger.info("There is a competition for %d titles.", len(disputed))

            self._run_disambiguation_passes(disputed, report)

            report.elapsed_seconds = time.perf_counter() - started
            logger.info("resolve() took %.3fs.", report.elapsed_seconds)

            # Closes the registry: add() fails from now on.
            self._report = report
            return report

    def _run_disambiguation_passes(self, disputed: TitleBuckets, report: ResolutionReport) -> None:
        while disputed:
            report.passes += 1
            regrouped: TitleBuckets = {}

            for bucket in disputed.values():
                bucket.sort(key=lambda c: c.ordering)
                self._rename_within_bucket(bucket, report)
                # Renaming may create new collisions, so regroup everything
                self._group_by_title(bucket, regrouped)

            remaining = self._allocate_undisputed_titles(regrouped)

            if len(remaining) == len(disputed):
                logger.info(
                    "Pass %d: no change in the number of remaining conflicts (%d), stopping.",
                    report.passes,
                    len(remaining),
                )
                self._freeze_lazy_disputes(remaining, report)
                return

            logger.info(
                "Pass %d: processed %d collisions. Still remaining collisions (%d): %s",
                report.passes,
                len(disputed),
                len(remaining),
                ", ".join(sorted(remaining)),
            )
            disputed = remaining

    def _rename_within_bucket(self, bucket: list[Candidate], report: ResolutionReport) -> None:
        """Rename candidates of one bucket until no rule applies.

        After each rename the scan restarts over the candidates that were not
        renamed yet. The bucket is settled when one candidate is left.
        """
        if not bucket:
            return
        disputed_title = bucket[0].wanted_title
        remaining = list(bucket)

        while len(remaining) > 1:
            match = self._find_rename(remaining)
            if match is None:
                return

            renamed, rule = match
            report.renames.append(
                Rename(
                    rule=rule.name,
                    old_title=disputed_title,
                    new_title=renamed.wanted_title,
                    kind=renamed.kind,
                    identifier=renamed.identifier,
                )
            )
            logger.info("Renamed (%s): %s => %s", rule.name, disputed_title, renamed.wanted_title)
            remaining = [c for c in remaining if c is not renamed]

    def _find_rename(
        self, candidates: list[Candidate]
    ) -> tuple[Candidate, DisambiguationRule] | None:
        for i, a in enumerate(candidates):
            for b in candidates[i + 1:]:
                match = apply_rules(self._rules, a, b) or apply_rules(self._rules, b, a)
                if match is not None:
                    return match
        return None

    def _freeze_lazy_disputes(self, remaining: TitleBuckets, report: ResolutionReport) -> None:
        """Fall back to "whoever calls get_title_for() first gets the plain title"."""
        report.unresolved_titles = sorted(remaining)
        if remaining:
            logger.warning(
                "Unresolved title collisions (%d), numbered lazily: %s",
                len(remaining),
                ", ".join(report.unresolved_titles),
            )

        for title, bucket in remaining.items():
            held = title in self._title_to_entity
            dispute = LazyDispute(disputed_title=title, claims_base_title=not held)
            for candidate in bucket:
                self._entity_to_lazy_dispute[id(candidate.entity)] = dispute

            # Reverse lookup of the plain title always answers the first candidate,
            # regardless of who gets it from get_title_for().
            if not held:
                self._title_to_entity[title] = bucket[0].entity

    def _allocate_lazily(self, entity: Any, dispute: LazyDispute) -> str:
        while True:
            # counter == 3 means the previous title had "(3)", so this one gets "(4)"
            dispute.counter += 1
            if dispute.counter == 1:
                if dispute.claims_base_title:
                    title = dispute.disputed_title
                    break
                continue

            title = f"{dispute.disputed_title} ({dispute.counter})"
            # "(N)" may be part of a real name or an override, so check ownership
            if title not in self._title_to_entity:
                self._title_to_entity[title] = entity
                break

        self._entity_to_title[id(entity)] = title
        if dispute.counter > 1:
            logger.info(
                "Lazy title allocation: %s: %s",
                title,
                getattr(entity, "identifier", type(entity).__name__),
            )
        return title

    # ── Helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _group_by_title(
        candidates: Iterable[Candidate],
        target: TitleBuckets | None = None,
    ) -> TitleBuckets:
        """Group candidates by wanted title (into ``target`` if given)."""
        buckets: TitleBuckets = {} if target is None else target
        for candidate in candidates:
            buckets.setdefault(candidate.wanted_title, []).append(candidate)
        return buckets

    def _allocate_undisputed_titles(self, buckets: TitleBuckets) -> TitleBuckets:
        """Name every candidate that is alone in wanting a free title.

        Returns:
            The buckets that are still disputed.
        """
        disputed: TitleBuckets = {}
        for title, bucket in buckets.items():
            if len(bucket) < 2 and title not in self._title_to_entity:
                self._set_chosen_title(bucket[0].entity, title)
            else:
                disputed[title] = bucket
        return disputed

    def _set_chosen_title(self, entity: Any, title: str) -> None:
        """Record the final, never reassigned title of an entity."""
        owner = self._title_to_entity.get(title)
        if owner is not None:
            raise TitleConflictError(title, owner, entity)
        self._entity_to_title[id(entity)] = title
        self._title_to_entity[title] = entity
