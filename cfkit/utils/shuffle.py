"""In-place Fisher-Yates shuffle.

See https://en.wikipedia.org/wiki/Fisher%E2%80%93Yates_shuffle
"""

import logging
from collections.abc import MutableSequence
from typing import Any, Optional

import numpy as np

from .rng import RandomSource, get_random, next_below

logger = logging.getLogger(__name__)


def _check_mutable(sequence: Any) -> None:
    if isinstance(sequence, MutableSequence):
        return
    if isinstance(sequence, np.ndarray):
        if sequence.ndim != 1:
            raise ValueError(f"Expected a 1-D array, got {sequence.ndim} dimensions")
        if not sequence.flags.writeable:
            raise TypeError("Cannot shuffle a read-only array in place")
        return
    raise TypeError(
        f"Cannot shuffle {type(sequence).__name__} in place; "
        "it does not support item assignment"
    )


def shuffle(sequence: Any, rng: Optional[RandomSource] = None) -> None:
    """Shuffle a sequence in place.

    Every one of the ``n!`` orderings is equally likely given a uniform
    generator. The index ``i`` runs from ``n - 1`` down to ``1``; at each step
    ``r`` is drawn from ``[0, i]`` and positions ``i`` and ``r`` are swapped.
    Sequences of length 0 or 1 are left untouched and consume no draws.

    Args:
        sequence: Mutable random-access sequence (list, ``MutableSequence``
            or 1-D numpy array).
        rng: ``random.Random`` or ``numpy.random.Generator``. Defaults to the
            process-wide generator from ``get_random()``.

    Raises:
        TypeError: If the sequence cannot be mutated in place.
    """
    _check_mutable(sequence)

    if rng is None:
        rng = get_random()

    n = len(sequence)
    logger.debug("Shuffling %d elements", n)

    for i in range(n - 1, 0, -1):
        r = next_below(rng, i + 1)

        # swap position i with position r
        sequence[i], sequence[r] = sequence[r], sequence[i]
