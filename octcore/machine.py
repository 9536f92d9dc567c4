"""Stateful CHIP-8 machine for host applications.

``Emulator`` wraps the functional engine: it owns the current
``EmulatorState`` and the injected random byte source, and swaps the state
after each operation. The host drives it::

    emulator = Emulator()
    emulator.load_program(rom_bytes)
    while running:
        emulator.cycle(CYCLES_PER_FRAME)
        emulator.time_step()
        draw(emulator.display_rows())
"""

from typing import Optional

from octcore import display, emulator as engine
from octcore.constants import CYCLES_PER_FRAME
from octcore.emulator import RandomByte
from octcore.errors import EmulatorError
from octcore.logging import ConsoleLogger, get_logger, format_registers
from octcore.rng import PRNGByteSource, ConstantByteSource
from octcore.state import EmulatorState, create_state, keypad_mask


class Emulator:
    """CHIP-8 virtual machine with a stepping API and passive getters.

    Args:
        random_byte: Zero-argument callable returning a byte, used by CXKK.
            Defaults to ``PRNGByteSource(0)``.
        logger: Logger for load, reset and fault messages.
    """

    def __init__(self, random_byte: Optional[RandomByte] = None, logger: Optional[ConsoleLogger] = None):
        self.random_byte = random_byte if random_byte is not None else PRNGByteSource(0)
        self.logger = logger if logger is not None else get_logger()
        self._state = create_state()

    @classmethod
    def with_constant_rng(cls, value: int = 0, **kwargs) -> "Emulator":
        """Create an emulator whose random source always returns ``value``."""
        return cls(random_byte=ConstantByteSource(value), **kwargs)

    @property
    def state(self) -> EmulatorState:
        """Current immutable machine state."""
        return self._state

    def load_program(self, program: bytes):
        """Copy byte code into memory at 0x200."""
        self._state = engine.load_program(self._state, program)
        self.logger.debug(f"loaded {len(program)} byte program")

    def load_rom(self, filename: str):
        """Read a ROM file and load it as the program."""
        self._state = engine.load_rom(self._state, filename)
        self.logger.debug(f"loaded ROM {filename}")

    def reset(self):
        """Reinitialise all state. The program must be loaded again."""
        self._state = create_state()
        self.logger.debug("machine reset")

    def cycle(self, count: int = 1):
        """Execute ``count`` fetch/decode/execute steps.

        Instructions completed before a fault keep their effects and pc is
        left on the faulting instruction.

        Raises:
            EmulatorError: the first illegal opcode or stack fault.
        """
        try:
            self._state = engine.run(self._state, count, self.random_byte)
        except EmulatorError as e:
            self._state = e.state
            _, opcode = engine.fetch(self._state)
            self.logger.debug(
                f"fault at pc=0x{int(self._state.pc):03X} opcode=0x{opcode:04X}: {e} "
                f"({format_registers(self._state.V)})"
            )
            raise

    def time_step(self):
        """Decrement delay and sound timers, once per 60 Hz tick."""
        self._state = engine.tick_timers(self._state)

    def run_frame(self, cycles: int = CYCLES_PER_FRAME):
        """Run one frame worth of instructions followed by a timer tick."""
        self.cycle(cycles)
        self.time_step()

    def key_down(self, key: int):
        """Press keypad key 0x0-0xF."""
        self._state = engine.press_key(self._state, key)

    def key_up(self, key: int):
        """Release keypad key 0x0-0xF."""
        self._state = engine.release_key(self._state, key)

    def pressed_keys(self) -> int:
        """Keypad as a 16-bit mask."""
        return keypad_mask(self._state)

    def sound_timer(self) -> int:
        """Current sound timer; the tone plays while it is above 0."""
        return int(self._state.sound_timer)

    def delay_timer(self) -> int:
        """Current delay timer."""
        return int(self._state.delay_timer)

    def display_rows(self) -> tuple[int, ...]:
        """Packed display rows for rendering, bit 63 is column 0."""
        return display.pixel_rows(self._state.display)
