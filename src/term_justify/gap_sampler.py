"""Pick which gaps on a justified line receive an extra space.

:author: Shay Hill
:created: 2026-10-19

When a line's leftover width does not divide evenly between its gaps, some gaps
get one more space than others. Always giving the extra space to the leftmost
gaps produces a visible diagonal "river" down the left of a paragraph, so the
gaps are sampled. The generator is seeded with a fixed constant on every call,
so the same request always returns the same gaps.
"""

from __future__ import annotations

import random

# Changing this changes the spacing of every justified line with an uneven
# remainder.
GAP_SAMPLER_SEED = 0x5EED_6A95


def sample_gaps(k: int, g: int, seed: int = GAP_SAMPLER_SEED) -> list[int]:
    """Sample k distinct gap indices from range(g) without replacement.

    :param k: number of gap indices to select
    :param g: number of gaps available
    :param seed: seed for the private generator. Leave the default for
        reproducible spacing.
    :return: k distinct integers in [0, g). Order carries no meaning.
    :raises ValueError: if k is negative or greater than g

    Partial Fisher-Yates shuffle. Only the first k positions of the pool are
    shuffled.

        >>> sample_gaps(3, 3) == sample_gaps(3, 3)
        True
        >>> sorted(sample_gaps(3, 3))
        [0, 1, 2]
    """
    if k < 0 or k > g:
        msg = f"Cannot sample {k} gaps from {g} available gaps."
        raise ValueError(msg)
    rng = random.Random(seed)
    pool = list(range(g))
    for i in range(k):
        j = rng.randrange(i, g)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:k]
