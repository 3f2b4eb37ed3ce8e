"""Selector model: part kinds and rendered selector parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PartKind(Enum):
    """Category of a compound selector part.

    Each member carries its rank (required position within a compound
    selector), its rendering prefix and suffix, and whether it may occur
    only once.
    """

    ELEMENT = ("element", 0, "", "", True)
    ID = ("id", 1, "#", "", True)
    CLASS = ("class", 2, ".", "", False)
    ATTRIBUTE = ("attribute", 3, "[", "]", False)
    PSEUDO_CLASS = ("pseudo-class", 4, ":", "", False)
    PSEUDO_ELEMENT = ("pseudo-element", 5, "::", "", True)

    def __init__(
        self, label: str, rank: int, prefix: str, suffix: str, singleton: bool
    ) -> None:
        self.label = label
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.singleton = singleton

    @classmethod
    def from_label(cls, label: str) -> PartKind:
        """Look up a kind by its label, e.g. ``"pseudo-class"``."""
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown selector part kind: {label!r}")


@dataclass(frozen=True)
class SelectorPart:
    """A single selector part, e.g. ``#main`` or ``[href$=".png"]``."""

    kind: PartKind
    value: str

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        return f"{self.kind.prefix}{self.value}{self.kind.suffix}"

    def __str__(self) -> str:
        return self.render()


class Combinator:
    """Literal combinator tokens accepted by ``combine``."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
