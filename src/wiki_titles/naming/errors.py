"""Exceptions raised by the title registry.

All of these are invariant violations: they point at a bug in the rule
table or inconsistent data from the loaders, and abort the run.
Unresolvable collisions are not errors (they fall back to lazy numbering).
"""

from __future__ import annotations


class TitleRegistryError(Exception):
    """Base class for title registry failures."""


class RegistryClosedError(TitleRegistryError):
    """Raised by add() once titles have been resolved."""

    def __init__(self) -> None:
        super().__init__("Title registry is closed: can't add new entities after resolve().")


class TitleConflictError(TitleRegistryError):
    """Raised when a title is about to be assigned to a second entity."""

    def __init__(self, title: str, owner: object, newcomer: object) -> None:
        self.title = title
        self.owner = owner
        self.newcomer = newcomer
        super().__init__(
            f"Attempted to assign the same title to different entities: {title!r} "
            f"(held by {_describe(owner)}, wanted by {_describe(newcomer)})"
        )


class UnsupportedEntityKindError(TitleRegistryError):
    """Raised when an entity has no (or an unknown) kind."""

    def __init__(self, entity: object) -> None:
        self.entity = entity
        super().__init__(f"Entity has unsupported kind: {_describe(entity)}")


def _describe(entity: object) -> str:
    kind = getattr(entity, "kind", None)
    identifier = getattr(entity, "identifier", None)
    label = getattr(kind, "value", None) or type(entity).__name__
    return f"{label} {identifier}" if identifier else label
