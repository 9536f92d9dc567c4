"""Random byte sources for the CXKK instruction.

The emulator takes any zero-argument callable returning an int in 0..255.
"""

from itertools import cycle
from typing import Iterable

import jax
import jax.numpy as jnp


class PRNGByteSource:
    """Random bytes drawn from a ``jax.random`` key, split on every draw."""

    def __init__(self, seed: int = 0):
        self.rng = jax.random.PRNGKey(seed)

    def __call__(self) -> int:
        self.rng, subkey = jax.random.split(self.rng)
        return int(jax.random.randint(subkey, shape=(), minval=0, maxval=256, dtype=jnp.int32))


class ConstantByteSource:
    """Always returns the same byte."""

    def __init__(self, value: int = 0):
        self.value = value & 0xFF

    def __call__(self) -> int:
        return self.value


class SequenceByteSource:
    """Cycles through a fixed sequence of bytes."""

    def __init__(self, values: Iterable[int]):
        values = [v & 0xFF for v in values]
        if not values:
            raise ValueError("SequenceByteSource needs at least one value")
        self._values = cycle(values)

    def __call__(self) -> int:
        return next(self._values)
