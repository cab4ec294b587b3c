"""Random numbers, coordinates and identifiers."""

from __future__ import annotations

import random
import uuid


def rand_value(
    minimum: int,
    maximum: int,
    contains_min: bool = False,
    contains_max: bool = False,
    rng: random.Random | None = None,
) -> int:
    """Random integer between ``minimum`` and ``maximum``, each end included on request."""
    low = minimum if contains_min else minimum + 1
    high = maximum + 1 if contains_max else maximum
    if low >= high:
        raise ValueError("empty range")
    return (rng or random).randrange(low, high)


def rand_float(minimum: float, maximum: float, rng: random.Random | None = None) -> float:
    """Random value from ``minimum`` upward in steps of one hundredth of the range."""
    diff = abs(maximum - minimum)
    step = (rng or random).randrange(100) / 100
    return minimum + step * diff


def rand_points(
    count: int,
    main_lng: float,
    main_lat: float,
    dot_lng: float,
    dot_lat: float,
    rng: random.Random | None = None,
) -> list[str]:
    """``count`` random ``lng,lat`` strings near a centre, each with eight decimals."""
    source = rng or random
    points = []
    for _ in range(count):
        lng = main_lng + source.random() * dot_lng
        lat = main_lat + source.random() * dot_lat
        points.append(f"{lng:.8f},{lat:.8f}")
    return points


def uuid_string() -> str:
    """A new random UUID without braces."""
    return str(uuid.uuid4())