"""Tests for ALU operations (8XYN)."""

import pytest
from octcore import execute
from octcore.instructions.alu import (
    alu_add, alu_sub_xy, alu_sub_yx, alu_shift_right, alu_shift_left,
)


def with_registers(state, **registers):
    V = state.V
    for name, value in registers.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)


class TestLogic:
    """Test 8XY0-8XY3; none of them touch VF."""

    def test_set(self, fresh_state):
        state = with_registers(fresh_state, VC=0x24)
        state = execute(state, 0x80C0)
        assert state.V[0x0] == 0x24

    def test_or(self, fresh_state):
        state = with_registers(fresh_state, V3=0b0110_1000, V7=0b1000_1101)
        state = execute(state, 0x8371)
        assert state.V[0x3] == 0b1110_1101

    def test_and(self, fresh_state):
        state = with_registers(fresh_state, VB=0b0111_1010, V1=0b1010_1111)
        state = execute(state, 0x8B12)
        assert state.V[0xB] == 0b0010_1010

    def test_xor(self, fresh_state):
        state = with_registers(fresh_state, V4=0b1100_1100, V5=0b1010_1010)
        state = execute(state, 0x8453)
        assert state.V[0x4] == 0b0110_0110

    @pytest.mark.parametrize("opcode", [0x8010, 0x8011, 0x8012, 0x8013])
    def test_flag_untouched(self, fresh_state, opcode):
        state = with_registers(fresh_state, V0=0xF0, V1=0x0F, VF=0x77)
        state = execute(state, opcode)
        assert state.V[0xF] == 0x77


class TestAdd:
    """Test 8XY4."""

    def test_add_no_carry(self, fresh_state):
        state = with_registers(fresh_state, V0=0x10, V1=0x20)
        state = execute(state, 0x8014)
        assert state.V[0] == 0x30
        assert state.V[0xF] == 0

    def test_add_with_carry(self, fresh_state):
        state = with_registers(fresh_state, V0=0xFF, V1=0x02)
        state = execute(state, 0x8014)
        assert state.V[0] == 0x01
        assert state.V[0xF] == 1

    def test_add_exactly_256(self, fresh_state):
        state = with_registers(fresh_state, V0=0x80, V1=0x80)
        state = execute(state, 0x8014)
        assert state.V[0] == 0
        assert state.V[0xF] == 1

    def test_add_into_flag_register(self, fresh_state):
        """The carry overrides the sum when X is F."""
        state = with_registers(fresh_state, VF=0x10, V1=0x20)
        state = execute(state, 0x8F14)
        assert state.V[0xF] == 0

    def test_add_immediate_wraps_without_flag(self, fresh_state):
        """7XKK - Wraps and leaves VF alone."""
        state = with_registers(fresh_state, V2=0xFE, VF=0x05)
        state = execute(state, 0x7203)
        assert state.V[2] == 0x01
        assert state.V[0xF] == 0x05


class TestSubtract:
    """Test 8XY5 and 8XY7."""

    def test_sub_no_borrow(self, fresh_state):
        state = with_registers(fresh_state, V0=0x30, V1=0x10)
        state = execute(state, 0x8015)
        assert state.V[0] == 0x20
        assert state.V[0xF] == 1

    def test_sub_equal(self, fresh_state):
        state = with_registers(fresh_state, V0=0x30, V1=0x30)
        state = execute(state, 0x8015)
        assert state.V[0] == 0
        assert state.V[0xF] == 1

    def test_sub_with_borrow(self, fresh_state):
        state = with_registers(fresh_state, V0=0x10, V1=0x30)
        state = execute(state, 0x8015)
        assert state.V[0] == 0xE0
        assert state.V[0xF] == 0

    def test_subn_no_borrow(self, fresh_state):
        state = with_registers(fresh_state, V0=0x10, V1=0x30)
        state = execute(state, 0x8017)
        assert state.V[0] == 0x20
        assert state.V[0xF] == 1

    def test_subn_with_borrow(self, fresh_state):
        state = with_registers(fresh_state, V0=0x30, V1=0x10)
        state = execute(state, 0x8017)
        assert state.V[0] == 0xE0
        assert state.V[0xF] == 0


class TestShift:
    """Test 8XY6 and 8XYE; VY is ignored."""

    def test_shift_right(self, fresh_state):
        state = with_registers(fresh_state, V0=0b0000_0101, V1=0xFF)
        state = execute(state, 0x8016)
        assert state.V[0] == 0b0000_0010
        assert state.V[1] == 0xFF
        assert state.V[0xF] == 1

    def test_shift_right_even(self, fresh_state):
        state = with_registers(fresh_state, V0=0b0000_0100)
        state = execute(state, 0x8016)
        assert state.V[0] == 0b0000_0010
        assert state.V[0xF] == 0

    def test_shift_left(self, fresh_state):
        state = with_registers(fresh_state, V0=0b1000_0001, V1=0x00)
        state = execute(state, 0x801E)
        assert state.V[0] == 0b0000_0010
        assert state.V[0xF] == 1

    def test_shift_left_no_overflow(self, fresh_state):
        state = with_registers(fresh_state, V0=0b0100_0000)
        state = execute(state, 0x801E)
        assert state.V[0] == 0b1000_0000
        assert state.V[0xF] == 0


class TestArithmeticProperties:
    """Exhaustive checks of the pure ALU functions over all byte pairs."""

    def test_add(self):
        for vx in range(256):
            for vy in range(256):
                result, flag = alu_add(vx, vy)
                assert result == (vx + vy) % 256
                assert flag == int(vx + vy >= 256)

    def test_sub(self):
        for vx in range(256):
            for vy in range(256):
                result, flag = alu_sub_xy(vx, vy)
                assert result == (vx - vy) % 256
                assert flag == int(vx >= vy)

                result, flag = alu_sub_yx(vx, vy)
                assert result == (vy - vx) % 256
                assert flag == int(vy >= vx)

    def test_shifts(self):
        for vx in range(256):
            result, flag = alu_shift_right(vx, 0)
            assert (result, flag) == (vx >> 1, vx & 1)

            result, flag = alu_shift_left(vx, 0)
            assert (result, flag) == ((vx << 1) % 256, vx >> 7)
