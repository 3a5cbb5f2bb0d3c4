"""Stylesheet model: values, selectors, declarations, rules, and Stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# (id_count, class_count, tag_count), compared lexicographically.
Specificity = tuple[int, int, int]


class Unit(Enum):
    """Length units understood by the parser."""

    PX = "px"


@dataclass(frozen=True)
class Keyword:
    """An identifier value such as ``block`` or ``auto``."""

    name: str

    def to_px(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Length:
    """A numeric length with a unit."""

    amount: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        return self.amount


@dataclass(frozen=True)
class ColorValue:
    """An RGBA color, each channel 0-255."""

    r: int
    g: int
    b: int
    a: int = 255

    def to_px(self) -> float:
        return 0.0


Value = Union[Keyword, Length, ColorValue]


@dataclass(frozen=True)
class SimpleSelector:
    """A selector constrained by optional tag, optional id, and classes.

    Every present constraint must hold; an absent constraint always matches.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: frozenset[str] = field(default_factory=frozenset)

    @property
    def specificity(self) -> Specificity:
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )


@dataclass(frozen=True)
class UnsupportedSelector:
    """A selector using combinators, pseudo-classes, or attribute tests.

    Kept so the rule's source text survives parsing; it never matches.
    """

    text: str

    @property
    def specificity(self) -> Specificity:
        return (0, 0, 0)


Selector = Union[SimpleSelector, UnsupportedSelector]


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """Selectors (alternatives, in order) paired with their declarations."""

    selectors: list[Selector]
    declarations: list[Declaration]


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order."""

    rules: list[Rule] = field(default_factory=list)

    def __add__(self, other: Stylesheet) -> Stylesheet:
        return Stylesheet(rules=[*self.rules, *other.rules])
