"""CHIP-8 emulator errors."""


class EmulatorError(Exception):
    """Base class for fatal emulation faults.

    ``state`` is set by ``run`` to the machine state reached before the
    faulting instruction.
    """
    state = None


class IllegalOpcode(EmulatorError):
    """Raised when a 16-bit word matches no instruction."""

    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"illegal opcode: 0x{opcode:04X}")


class StackOverflow(EmulatorError):
    """Raised when calling a subroutine with a full call stack."""

    def __init__(self):
        super().__init__("stack overflow")


class StackUnderflow(EmulatorError):
    """Raised when returning with an empty call stack."""

    def __init__(self):
        super().__init__("stack underflow")
