"""Fisher–Yates shuffle over an injected random source."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: random.Random | None = None) -> None:
    """Shuffle *items* in place into a uniformly random permutation.

    Walks the indices from high to low, swapping each with a uniformly
    chosen index at or below it. Pass a seeded ``random.Random`` for a
    reproducible order.
    """
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
