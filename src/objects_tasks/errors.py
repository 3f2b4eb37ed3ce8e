"""Error hierarchy for objects_tasks."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objects_tasks.selector.model import PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class ObjectsTasksError(Exception):
    """Base error for all objects_tasks errors."""


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectsTasksError):
    """A selector part was rejected by the builder."""

    def __init__(self, message: str, *, kind: PartKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class OrderError(SelectorError):
    """A part was appended after a part of higher rank."""

    def __init__(self, message: str = ORDER_MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


class DuplicateError(SelectorError):
    """A second element, id or pseudo-element was appended."""

    def __init__(self, message: str = DUPLICATE_MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SerializationError(ObjectsTasksError):
    """A value could not be converted to or from JSON."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
