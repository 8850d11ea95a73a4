"""
Register file and call stack tests.
"""

import pytest

from chip8 import RegisterFile, StackOverflow, StackUnderflow


@pytest.fixture
def regs():
    return RegisterFile()


class TestRegisters:

    def test_power_on(self, regs):
        assert regs.PC == 0x200
        assert regs.I == 0
        assert regs.sp == 0
        assert list(regs.V) == [0] * 16

    def test_index_is_16_bit(self, regs):
        regs.I = 0x1FFFF
        assert regs.I == 0xFFFF

    def test_advance(self, regs):
        regs.advance()
        assert regs.PC == 0x202
        regs.advance(4)
        assert regs.PC == 0x206

    def test_reset(self, regs):
        regs.V[3] = 9
        regs.I = 0x123
        regs.call(0x400)
        regs.reset()
        assert regs.PC == 0x200
        assert regs.I == 0
        assert regs.sp == 0
        assert regs.V[3] == 0


class TestStack:

    def test_call_pushes_pc(self, regs):
        regs.call(0x300)
        assert regs.PC == 0x300
        assert regs.sp == 1
        assert regs.stack[0] == 0x200

    def test_ret_skips_the_call(self, regs):
        regs.call(0x300)
        regs.ret()
        assert regs.PC == 0x202
        assert regs.sp == 0

    def test_nested(self, regs):
        regs.call(0x300)
        regs.call(0x400)
        regs.ret()
        assert regs.PC == 0x302
        regs.ret()
        assert regs.PC == 0x202

    def test_sixteen_levels(self, regs):
        for n in range(16):
            regs.call(0x300 + 2 * n)
        assert regs.sp == 16

    def test_overflow(self, regs):
        for n in range(16):
            regs.call(0x300)
        with pytest.raises(StackOverflow):
            regs.call(0x400)
        assert regs.sp == 16
        assert regs.PC == 0x300

    def test_underflow(self, regs):
        with pytest.raises(StackUnderflow) as exc:
            regs.ret()
        assert exc.value.pc == 0x200
        assert regs.sp == 0
        assert regs.PC == 0x200
