"""CHIP-8 instruction handlers grouped by opcode family."""
