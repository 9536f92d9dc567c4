"""CHIP-8 emulator state structures."""

import jax.numpy as jnp
from flax.struct import PyTreeNode

from octcore.constants import (
    MEMORY_SIZE, PROGRAM_START, FONT_START, FONT_DATA,
    SCREEN_WIDTH, SCREEN_HEIGHT, STACK_SIZE, NUM_REGISTERS, NUM_KEYS,
)


class StackState(PyTreeNode):
    """Call stack of return addresses."""
    data: jnp.ndarray
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state."""
    memory: jnp.ndarray
    pc: jnp.ndarray
    display: jnp.ndarray
    stack: StackState
    delay_timer: jnp.ndarray
    sound_timer: jnp.ndarray
    keypad: jnp.ndarray
    V: jnp.ndarray
    I: jnp.ndarray


def create_stack() -> StackState:
    """Create an empty call stack."""
    return StackState(data=jnp.zeros(STACK_SIZE, dtype=jnp.uint16), pointer=0)


def create_state() -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    memory = jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8)
    memory = memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(
        jnp.array(FONT_DATA, dtype=jnp.uint8)
    )
    return EmulatorState(
        memory=memory,
        pc=jnp.asarray(PROGRAM_START, dtype=jnp.uint16),
        display=jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_),
        stack=create_stack(),
        delay_timer=jnp.zeros((), dtype=jnp.uint8),
        sound_timer=jnp.zeros((), dtype=jnp.uint8),
        keypad=jnp.zeros(NUM_KEYS, dtype=jnp.bool_),
        V=jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8),
        I=jnp.zeros((), dtype=jnp.uint16),
    )


def keypad_mask(state: EmulatorState) -> int:
    """Return the keypad as a 16-bit mask, bit k set when key k is down."""
    mask = 0
    for key, pressed in enumerate(state.keypad.tolist()):
        if pressed:
            mask |= 1 << key
    return mask


def as_u8(value: int) -> jnp.ndarray:
    """Wrap a Python int into an 8-bit scalar."""
    return jnp.asarray(int(value) & 0xFF, dtype=jnp.uint8)


def as_u16(value: int) -> jnp.ndarray:
    """Wrap a Python int into a 16-bit scalar."""
    return jnp.asarray(int(value) & 0xFFFF, dtype=jnp.uint16)
