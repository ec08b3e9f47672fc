"""
Band tables and guard lists.

Every scorer is expressed as data instead of nested if/else:

- A `ScoreTable` is a base score plus `Category` entries.
- A `Category` is an ordered tuple of `Band`s; the first matching band contributes
  its points and the rest of the category is skipped.
- A `Band` matches when ANY of its `Condition`s holds, which covers both
  "sst < 20 or sst > 31" and "precipAmount >= 15 or precipLast24h >= 50".
- A `Rule` tuple is an ordered guard list evaluated with `first_match`.

Tables are frozen so tests can assert against them directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from swimscore.domain.models import SwimInputs
from swimscore.scoring.composite import ComponentResult, clamp_score

T = TypeVar("T")


@dataclass(frozen=True)
class Interval:
    """A numeric interval; each bound is inclusive unless flagged otherwise."""

    low: float = -math.inf
    high: float = math.inf
    low_inclusive: bool = True
    high_inclusive: bool = True

    def contains(self, value: float) -> bool:
        above_low = value >= self.low if self.low_inclusive else value > self.low
        below_high = value <= self.high if self.high_inclusive else value < self.high
        return above_low and below_high


def at_least(x: float) -> Interval:
    return Interval(low=x)


def above(x: float) -> Interval:
    return Interval(low=x, low_inclusive=False)


def below(x: float) -> Interval:
    return Interval(high=x, high_inclusive=False)


def between(low: float, high: float) -> Interval:
    """Closed interval [low, high]."""
    return Interval(low=low, high=high)


def from_until(low: float, high: float) -> Interval:
    """Half-open interval [low, high)."""
    return Interval(low=low, high=high, high_inclusive=False)


@dataclass(frozen=True)
class Condition:
    """`getattr(inputs, field)` falls inside `interval`."""

    field: str
    interval: Interval

    def holds(self, inputs: SwimInputs) -> bool:
        return self.interval.contains(float(getattr(inputs, self.field)))


@dataclass(frozen=True)
class Band:
    points: int
    when: tuple[Condition, ...]

    def matches(self, inputs: SwimInputs) -> bool:
        return any(c.holds(inputs) for c in self.when)


def when(field: str, *intervals: Interval) -> tuple[Condition, ...]:
    return tuple(Condition(field, interval) for interval in intervals)


def band(points: int, *conditions: tuple[Condition, ...]) -> Band:
    return Band(points=points, when=tuple(c for group in conditions for c in group))


@dataclass(frozen=True)
class Category:
    name: str
    bands: tuple[Band, ...]

    def adjustment(self, inputs: SwimInputs) -> int:
        """Points of the first matching band, or 0 when nothing matches."""
        for b in self.bands:
            if b.matches(inputs):
                return b.points
        return 0


@dataclass(frozen=True)
class ScoreTable:
    name: str
    base: int
    categories: tuple[Category, ...]


def max_attainable(table: ScoreTable) -> int:
    """Highest raw score the table can produce (base + best band of every category)."""
    return table.base + sum(max([0, *(b.points for b in c.bands)]) for c in table.categories)


def evaluate_table(table: ScoreTable, inputs: SwimInputs) -> ComponentResult:
    """Apply every category of `table` to `inputs` and clamp the sum."""
    adjustments = {c.name: c.adjustment(inputs) for c in table.categories}
    raw = table.base + sum(adjustments.values())
    reasons = [f"{name.replace('_', ' ')} {points:+d}" for name, points in adjustments.items() if points]
    details = {"base": table.base, "adjustments": adjustments, "raw_score": raw}
    return ComponentResult(score=clamp_score(raw), details=details, reasons=reasons)


@dataclass(frozen=True)
class Rule(Generic[T]):
    """One guard clause: when `predicate(subject)` holds, the answer is `result`."""

    name: str
    predicate: Callable[[Any], bool]
    result: T


def first_match(rules: Iterable[Rule[T]], subject: Any) -> Rule[T] | None:
    """Return the first rule whose predicate holds for `subject` (or None)."""
    for rule in rules:
        if rule.predicate(subject):
            return rule
    return None


def is_thunderstorm(inputs: SwimInputs) -> bool:
    """Weather code is the thunderstorm code "95" or mentions a thunderstorm."""
    code = str(inputs.weather_code)
    return "thunderstorm" in code or code == "95"
