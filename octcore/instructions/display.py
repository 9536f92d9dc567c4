"""CHIP-8 display operations."""

import jax
import jax.numpy as jnp

from octcore import display
from octcore.constants import SCREEN_WIDTH, SCREEN_HEIGHT, ADDRESS_MASK, FLAG_REGISTER
from octcore.state import EmulatorState
from octcore.decode import DecodedInstruction

# Pre-computed coordinate grids for display operations
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


@jax.jit
def sprite_mask(memory: jnp.ndarray, sprite_x, sprite_y, base, height) -> jnp.ndarray:
    """Pixels covered by the set bits of an 8 x ``height`` sprite at (sprite_x, sprite_y).

    The grids only span the screen, so pixels past the right or bottom edge
    are clipped rather than wrapped.
    """
    in_sprite = (xx >= sprite_x) & (xx < sprite_x + 8) & (yy >= sprite_y) & (yy < sprite_y + height)

    row_offset = jnp.clip(yy - sprite_y, 0, 15)
    col_offset = jnp.clip(xx - sprite_x, 0, 7)
    sprite_bytes = memory[(base + row_offset) & ADDRESS_MASK].astype(jnp.int32)
    bits = (sprite_bytes >> (7 - col_offset)) & 1
    return (bits == 1) & in_sprite


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N.

    Only the base position wraps around the screen. Sprite pixels that land
    past the right or bottom edge are clipped.
    """
    sprite_x = int(state.V[instruction.x]) % SCREEN_WIDTH
    sprite_y = int(state.V[instruction.y]) % SCREEN_HEIGHT

    V = state.V.at[FLAG_REGISTER].set(0)
    mask = sprite_mask(state.memory, sprite_x, sprite_y, int(state.I), instruction.n)

    # A set pixel under the sprite is turned off by the XOR
    collision = int(jnp.any(state.display & mask))
    pixels = display.toggle_mask(state.display, mask)

    return state.replace(display=pixels, V=V.at[FLAG_REGISTER].set(collision))
