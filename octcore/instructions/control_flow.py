"""CHIP-8 control flow instructions."""

from octcore.constants import ADDRESS_MASK
from octcore.state import EmulatorState, as_u16
from octcore.decode import DecodedInstruction
from octcore.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=as_u16(instruction.nnn))


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, int(state.pc)))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        if condition_fn(state, instruction):
            return state.replace(pc=as_u16(int(state.pc) + 2))
        return state
    return skip_instruction


def _register(state: EmulatorState, index: int) -> int:
    return int(state.V[index])


def _key_pressed(state: EmulatorState, inst: DecodedInstruction) -> bool:
    return bool(state.keypad[_register(state, inst.x) & 0xF])


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: _register(state, inst.x) == inst.kk
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: _register(state, inst.x) != inst.kk
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: _register(state, inst.x) == _register(state, inst.y)
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: _register(state, inst.x) != _register(state, inst.y)
)

execute_skip_if_key = make_skip_instruction(_key_pressed)

execute_skip_if_not_key = make_skip_instruction(
    lambda state, inst: not _key_pressed(state, inst)
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = (instruction.nnn + _register(state, 0)) & ADDRESS_MASK
    return state.replace(pc=as_u16(jump_address))
