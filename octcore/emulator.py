"""Main CHIP-8 emulator execution engine."""

from typing import Callable

import jax.numpy as jnp

from octcore.state import EmulatorState, as_u8, as_u16
from octcore.decode import DecodedInstruction, Op, decode
from octcore.errors import EmulatorError
from octcore.constants import PROGRAM_START, MEMORY_SIZE, ADDRESS_MASK, NUM_KEYS
from octcore.instructions.system import no_op, execute_clear_screen, execute_return
from octcore.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key, execute_skip_if_not_key,
)
from octcore.instructions.alu import ALU_OPERATIONS, execute_alu_operation
from octcore.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from octcore.instructions.display import execute_display
from octcore.instructions.misc import (
    execute_get_delay_timer, execute_wait_for_key, execute_set_delay_timer,
    execute_set_sound_timer, execute_add_to_index, execute_font_character,
    execute_bcd_conversion, execute_store_registers, execute_load_registers,
)

RandomByte = Callable[[], int]

INSTRUCTION_TABLE = {
    Op.SYS: no_op,
    Op.CLS: execute_clear_screen,
    Op.RET: execute_return,
    Op.JP: execute_jump,
    Op.CALL: execute_call,
    Op.SE_VX_KK: execute_skip_if_equal_immediate,
    Op.SNE_VX_KK: execute_skip_if_not_equal_immediate,
    Op.SE_VX_VY: execute_skip_if_equal_register,
    Op.LD_VX_KK: execute_set,
    Op.ADD_VX_KK: execute_add,
    **{op: execute_alu_operation for op in ALU_OPERATIONS},
    Op.SNE_VX_VY: execute_skip_if_not_equal_register,
    Op.LD_I: execute_set_index,
    Op.JP_V0: execute_jump_with_offset,
    Op.DRW: execute_display,
    Op.SKP: execute_skip_if_key,
    Op.SKNP: execute_skip_if_not_key,
    Op.LD_VX_DT: execute_get_delay_timer,
    Op.LD_VX_K: execute_wait_for_key,
    Op.LD_DT_VX: execute_set_delay_timer,
    Op.LD_ST_VX: execute_set_sound_timer,
    Op.ADD_I_VX: execute_add_to_index,
    Op.LD_F_VX: execute_font_character,
    Op.LD_B_VX: execute_bcd_conversion,
    Op.LD_I_VX: execute_store_registers,
    Op.LD_VX_I: execute_load_registers,
}


def _zero_byte() -> int:
    return 0


def execute_instruction(
    state: EmulatorState,
    instruction: DecodedInstruction,
    random_byte: RandomByte = _zero_byte,
) -> EmulatorState:
    """Apply one decoded instruction to the state."""
    if instruction.op is Op.RND:
        return execute_random(state, instruction, random_byte)
    return INSTRUCTION_TABLE[instruction.op](state, instruction)


def execute(state: EmulatorState, instruction: int, random_byte: RandomByte = _zero_byte) -> EmulatorState:
    """Decode and execute a single CHIP-8 instruction.

    The program counter is not advanced; see ``step`` for a full cycle.

    Raises:
        IllegalOpcode: if ``instruction`` does not decode.
        StackOverflow, StackUnderflow: on call/return faults.
    """
    return execute_instruction(state, decode(instruction), random_byte)


def _pack_u16(high: int, low: int) -> int:
    """Pack two bytes into uint16."""
    return (high << 8) | low


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory and advance the program counter."""
    pc = int(state.pc)
    instruction = _pack_u16(
        int(state.memory[pc & ADDRESS_MASK]),
        int(state.memory[(pc + 1) & ADDRESS_MASK]),
    )
    return state.replace(pc=as_u16(pc + 2)), instruction


def step(state: EmulatorState, random_byte: RandomByte = _zero_byte) -> EmulatorState:
    """Run one fetch, advance, decode, execute cycle."""
    state, instruction = fetch(state)
    return execute(state, instruction, random_byte)


def run(state: EmulatorState, count: int, random_byte: RandomByte = _zero_byte) -> EmulatorState:
    """Run ``count`` cycles, raising on the first fault.

    The raised error carries the state left by the instructions that
    completed, with pc pointing at the faulting instruction.
    """
    for _ in range(count):
        try:
            state = step(state, random_byte)
        except EmulatorError as e:
            e.state = state
            raise
    return state


def tick_timers(state: EmulatorState) -> EmulatorState:
    """Decrement delay and sound timers by one, stopping at zero."""
    return state.replace(
        delay_timer=as_u8(max(int(state.delay_timer) - 1, 0)),
        sound_timer=as_u8(max(int(state.sound_timer) - 1, 0)),
    )


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Copy byte code into memory starting at 0x200.

    The caller is responsible for keeping ``program`` within
    ``MEMORY_SIZE - PROGRAM_START`` bytes.
    """
    if not program:
        return state
    rom_array = jnp.array(list(program[:MEMORY_SIZE - PROGRAM_START]), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(rom_array)].set(rom_array)
    return state.replace(memory=new_memory)


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(state, rom_data)


def _check_key(key: int):
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"key must be in 0..{NUM_KEYS - 1}, got {key}")


def press_key(state: EmulatorState, key: int) -> EmulatorState:
    """Mark ``key`` as held down."""
    _check_key(key)
    return state.replace(keypad=state.keypad.at[key].set(True))


def release_key(state: EmulatorState, key: int) -> EmulatorState:
    """Mark ``key`` as released."""
    _check_key(key)
    return state.replace(keypad=state.keypad.at[key].set(False))
