"""Fluent builder for compound CSS selectors and their combinations."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Protocol

from objects_tasks.errors import DuplicateError, OrderError
from objects_tasks.selector.model import PartKind, SelectorPart

__all__ = ["SelectorBuilder", "CombinedSelector", "Stringifiable", "combine"]

logger = logging.getLogger("objects_tasks.selector")


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Incrementally built compound selector.

    Parts must be appended in rank order (element, id, class, attribute,
    pseudo-class, pseudo-element); element, id and pseudo-element may each
    appear once. Both rules are checked on every append, and a rejected
    append leaves the builder untouched.
    """

    def __init__(self) -> None:
        self._parts: list[SelectorPart] = []
        self._counts: Counter[PartKind] = Counter()
        self._max_rank = -1

    # --- appends --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a part of an arbitrary kind."""
        if kind.singleton and self._counts[kind]:
            logger.debug("rejected %s %r: duplicate", kind.label, value)
            raise DuplicateError(kind=kind)
        if kind.rank < self._max_rank:
            logger.debug(
                "rejected %s %r: rank %d after rank %d",
                kind.label,
                value,
                kind.rank,
                self._max_rank,
            )
            raise OrderError(kind=kind)

        self._parts.append(SelectorPart(kind=kind, value=value))
        self._counts[kind] += 1
        self._max_rank = kind.rank
        logger.debug("appended %s %r", kind.label, value)
        return self

    # --- rendering ------------------------------------------------------------

    @property
    def parts(self) -> tuple[SelectorPart, ...]:
        return tuple(self._parts)

    def stringify(self) -> str:
        """Return the selector string, e.g. ``a#main.x``."""
        return "".join(part.render() for part in self._parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    The operands are rendered once, when combined; later changes to an
    operand builder do not show up here. The combinator is always padded
    with one space on each side, so a descendant combinator (``" "``)
    renders as three spaces. Nesting keeps that padding as-is.
    """

    combinator: str
    value: str

    def stringify(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.stringify()


def combine(
    left: Stringifiable, combinator: str, right: Stringifiable
) -> CombinedSelector:
    """Join two built selectors with *combinator* (not validated)."""
    value = f"{left.stringify()} {combinator} {right.stringify()}"
    logger.debug("combined selector %r", value)
    return CombinedSelector(combinator=combinator, value=value)
