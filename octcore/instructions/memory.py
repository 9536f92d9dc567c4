"""CHIP-8 memory and register operations."""

from typing import Callable

from octcore.state import EmulatorState, as_u16
from octcore.decode import DecodedInstruction


def execute_set(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """6XKK - Set VX = KK."""
    return state.replace(V=state.V.at[instruction.x].set(instruction.kk))


def execute_add(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """7XKK - Add KK to VX, no carry flag."""
    result = (int(state.V[instruction.x]) + instruction.kk) & 0xFF
    return state.replace(V=state.V.at[instruction.x].set(result))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return state.replace(I=as_u16(instruction.nnn))


def execute_random(
    state: EmulatorState,
    instruction: DecodedInstruction,
    random_byte: Callable[[], int],
) -> EmulatorState:
    """CXKK - Set VX = random & KK."""
    random_value = int(random_byte()) & 0xFF
    return state.replace(V=state.V.at[instruction.x].set(random_value & instruction.kk))
