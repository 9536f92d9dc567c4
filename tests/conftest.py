"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp
from octcore import Emulator, create_state


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def emulator():
    """Provide an emulator whose random source always returns 0."""
    return Emulator.with_constant_rng(0)


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def program(*opcodes):
    """Assemble 16-bit opcodes into big-endian byte code."""
    return b"".join(op.to_bytes(2, "big") for op in opcodes)
