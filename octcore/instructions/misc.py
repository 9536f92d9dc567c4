"""CHIP-8 miscellaneous instructions (Fxxx)."""

from octcore.constants import FONT_START, FONT_CHAR_SIZE, ADDRESS_MASK, NUM_KEYS
from octcore.state import EmulatorState, as_u16
from octcore.decode import DecodedInstruction


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=state.V[instruction.x])


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=state.V[instruction.x])


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I register, VF untouched."""
    return state.replace(I=as_u16(int(state.I) + int(state.V[instruction.x])))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press.

    Rewinds the program counter so the instruction runs again on the next
    cycle. The lowest pressed key is consumed (released), stored in VX and the
    program counter moves past the instruction again.
    """
    pc = int(state.pc) - 2
    pressed = state.keypad.tolist()

    for key in range(NUM_KEYS):
        if pressed[key]:
            return state.replace(
                keypad=state.keypad.at[key].set(False),
                V=state.V.at[instruction.x].set(key),
                pc=as_u16(pc + 2),
            )

    return state.replace(pc=as_u16(pc))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    digit = int(state.V[instruction.x]) & 0xF
    return state.replace(I=as_u16(FONT_START + digit * FONT_CHAR_SIZE))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = int(state.V[instruction.x])
    digits = (value // 100, (value // 10) % 10, value % 10)

    memory = state.memory
    for offset, digit in enumerate(digits):
        memory = memory.at[(int(state.I) + offset) & ADDRESS_MASK].set(digit)
    return state.replace(memory=memory)


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I."""
    memory = state.memory
    for register in range(instruction.x + 1):
        address = (int(state.I) + register) & ADDRESS_MASK
        memory = memory.at[address].set(state.V[register])
    return state.replace(memory=memory)


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I."""
    V = state.V
    for register in range(instruction.x + 1):
        address = (int(state.I) + register) & ADDRESS_MASK
        V = V.at[register].set(state.memory[address])
    return state.replace(V=V)
