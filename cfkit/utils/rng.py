"""Default random generator handle.

A single ``random.Random`` is created lazily on first use and shared by every
consumer that is not given an explicit generator. It is not safe to share
across threads; pass a thread-confined generator instead.
"""

import logging
import random
from typing import Optional, Union

import numpy as np

logger = logging.getLogger(__name__)

RandomSource = Union[random.Random, np.random.Generator]

# Global generator instance for singleton pattern
_random_instance: Optional[random.Random] = None


def get_random(seed: Optional[int] = None) -> random.Random:
    """Get the process-wide generator (singleton pattern).

    Args:
        seed: Seed used only when the generator does not exist yet.

    Returns:
        The shared ``random.Random`` instance
    """
    global _random_instance

    if _random_instance is None:
        _random_instance = random.Random(seed)
        logger.debug("Created default random generator (seed=%s)", seed)

    return _random_instance


def set_random(generator: random.Random) -> None:
    """Replace the process-wide generator, e.g. with a seeded one."""
    global _random_instance

    if not isinstance(generator, random.Random):
        raise TypeError(
            f"Expected a random.Random instance, got {type(generator).__name__}"
        )
    _random_instance = generator


def reset_random() -> None:
    """Drop the process-wide generator so the next call creates a fresh one."""
    global _random_instance
    _random_instance = None


def next_below(generator: RandomSource, bound: int) -> int:
    """Draw an integer uniformly from ``[0, bound)``.

    Works with ``random.Random`` (``randrange``) and
    ``numpy.random.Generator`` (``integers``).
    """
    if bound <= 0:
        raise ValueError(f"bound must be > 0. Got: {bound}")
    if isinstance(generator, np.random.Generator):
        return int(generator.integers(bound))
    return generator.randrange(bound)
