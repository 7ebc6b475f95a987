from __future__ import annotations

import random
from collections.abc import Sequence

from safety_engine.models import WeightedCategory


def weighted_random(
    labels: Sequence[str],
    weights: Sequence[float],
    rng: random.Random | None = None,
) -> str:
    if not labels:
        raise ValueError("labels must not be empty")
    if len(labels) != len(weights):
        raise ValueError("labels and weights must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be >= 0")
    source = rng or random
    remaining = source.random() * sum(weights)
    for label, weight in zip(labels, weights):
        remaining -= weight
        if remaining <= 0:
            return label
    # float drift can leave a sliver above zero
    return labels[0]


def pick_category(
    categories: Sequence[WeightedCategory],
    rng: random.Random | None = None,
) -> str:
    return weighted_random(
        [category.label for category in categories],
        [category.weight for category in categories],
        rng=rng,
    )
