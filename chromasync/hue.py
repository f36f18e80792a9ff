"""
Named hues.

A fixed registry of twelve named hues on the unit hue circle, seven of which
(the rainbow primaries) are flagged as primary. The registry is built once at
import time and is read-only afterwards, so it can be shared between threads
without locking.

>>> from chromasync.hue import get_closest, get_for_name
>>> get_closest(0.17).name
'yellow'
>>> round(get_for_name("teal").degrees)
150
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .errors import HueNotFoundError
from .types.color_types import PRIMARY_VARIANCE


@dataclass(frozen=True)
class Hue:
    name: str
    position: float
    is_primary: bool = False

    @property
    def degrees(self) -> float:
        return self.position * 360.0


RED = Hue("red", 0.0, True)
ORANGE = Hue("orange", 30 / 360.0, True)
YELLOW = Hue("yellow", 60 / 360.0, True)
LIME = Hue("lime", 90 / 360.0)
GREEN = Hue("green", 120 / 360.0, True)
TEAL = Hue("teal", 150 / 360.0)
CYAN = Hue("cyan", 180 / 360.0)
AZURE = Hue("azure", 210 / 360.0)
BLUE = Hue("blue", 240 / 360.0, True)
INDIGO = Hue("indigo", 270 / 360.0)
PURPLE = Hue("purple", 300 / 360.0, True)
PINK = Hue("pink", 330 / 360.0, True)


def _build_registry(hues: Iterable[Hue]) -> Mapping[str, Hue]:
    registry: dict[str, Hue] = {}
    for hue in hues:
        if hue.name in registry:
            raise ValueError(f"Duplicate hue name {hue.name!r}")
        registry[hue.name] = hue
    return MappingProxyType(registry)


# Iteration order is the order below; get_closest ties resolve to the earlier entry
NAMED_HUES: Mapping[str, Hue] = _build_registry(
    (RED, ORANGE, YELLOW, LIME, GREEN, TEAL, CYAN, AZURE, BLUE, INDIGO, PURPLE, PINK)
)
PRIMARY_HUES: Tuple[Hue, ...] = tuple(h for h in NAMED_HUES.values() if h.is_primary)


def circular_distance(a: float, b: float) -> float:
    """Shortest distance between two positions on the unit hue circle."""
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


def get_closest(hue: float, primary_only: bool = False) -> Hue:
    """
    Find the registered hue closest to ``hue``.

    Args:
        hue: normalized hue, wrapped into [0, 1) first
        primary_only: only consider the seven primary hues

    Returns:
        the closest Hue; on a tie the one registered first
    """
    hue = hue % 1.0
    candidates = PRIMARY_HUES if primary_only else NAMED_HUES.values()
    closest = None
    dist = float("inf")
    for candidate in candidates:
        d = circular_distance(candidate.position, hue)
        if d < dist:
            dist = d
            closest = candidate
    if closest is None:
        # only reachable with a NaN hue
        raise ValueError(f"Cannot find the closest hue to {hue!r}")
    return closest


def get_for_name(name: str) -> Hue:
    """
    Look a hue up by name.

    Raises:
        HueNotFoundError: if no hue is registered under ``name``.
    """
    try:
        return NAMED_HUES[name]
    except KeyError:
        raise HueNotFoundError(name) from None


def is_primary_hue(hue: float, variance: float = PRIMARY_VARIANCE) -> bool:
    """
    Check whether ``hue`` lies within ``variance`` of a primary hue.

    The distance is the plain absolute difference, not the circular one, so
    0.995 is not considered close to red at 0.0.
    """
    return any(abs(hue - primary.position) < variance for primary in PRIMARY_HUES)


def named_hues() -> Mapping[str, Hue]:
    return NAMED_HUES


def primary_hues() -> Tuple[Hue, ...]:
    return PRIMARY_HUES
