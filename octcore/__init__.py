"""CHIP-8 emulator core."""

from octcore.state import EmulatorState, StackState, create_state
from octcore.emulator import execute, fetch, step, run, tick_timers, load_program, load_rom
from octcore.decode import DecodedInstruction, Op, decode
from octcore.errors import EmulatorError, IllegalOpcode, StackOverflow, StackUnderflow
from octcore.machine import Emulator
from octcore.rng import PRNGByteSource, ConstantByteSource, SequenceByteSource
from octcore.constants import *

__all__ = [
    "Emulator",
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "run",
    "tick_timers",
    "load_program",
    "load_rom",
    "DecodedInstruction",
    "Op",
    "decode",
    "EmulatorError",
    "IllegalOpcode",
    "StackOverflow",
    "StackUnderflow",
    "PRNGByteSource",
    "ConstantByteSource",
    "SequenceByteSource",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "STACK_SIZE",
    "CYCLES_PER_FRAME",
]
