"""CHIP-8 display bitmap.

The framebuffer is a boolean array of shape ``(SCREEN_WIDTH, SCREEN_HEIGHT)``
indexed ``[x, y]``. Pixels are only ever flipped, never set directly.
"""

import jax.numpy as jnp
import numpy as np

from octcore.constants import SCREEN_WIDTH, SCREEN_HEIGHT


def _check_bounds(x: int, y: int):
    if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
        raise IndexError(f"pixel ({x}, {y}) outside {SCREEN_WIDTH}x{SCREEN_HEIGHT} display")


def toggle(display: jnp.ndarray, x: int, y: int) -> tuple[jnp.ndarray, bool]:
    """XOR a single pixel and return the new display and the pixel's new value."""
    _check_bounds(x, y)
    new_value = not bool(display[x, y])
    return display.at[x, y].set(new_value), new_value


def toggle_mask(display: jnp.ndarray, mask: jnp.ndarray) -> jnp.ndarray:
    """XOR every pixel set in ``mask`` and return the new display."""
    if mask.shape != display.shape:
        raise ValueError(f"mask shape {mask.shape} does not match display shape {display.shape}")
    return display ^ mask.astype(jnp.bool_)


def is_set(display: jnp.ndarray, x: int, y: int) -> bool:
    """Read a single pixel."""
    _check_bounds(x, y)
    return bool(display[x, y])


def clear(display: jnp.ndarray) -> jnp.ndarray:
    """Return a blank display of the same shape."""
    return jnp.zeros_like(display)


def pixel_rows(display: jnp.ndarray) -> tuple[int, ...]:
    """Pack the display into rows of 64-bit integers.

    Returns:
        Tuple of ``SCREEN_HEIGHT`` ints; bit 63 of each row is column 0.
    """
    packed = np.packbits(np.asarray(display, dtype=np.bool_).T, axis=1)
    return tuple(int.from_bytes(row.tobytes(), "big") for row in packed)
