"""
Instruction decoding tests.
"""

import pytest

from chip8 import Op, decode


class TestFields:

    def test_operands(self):
        ins = decode(0xD123)
        assert ins.op is Op.DRW
        assert ins.word == 0xD123
        assert ins.nnn == 0x123
        assert ins.x == 0x1
        assert ins.y == 0x2
        assert ins.n == 0x3
        assert ins.kk == 0x23

    def test_str(self):
        assert str(decode(0x00E0)) == "CLS"
        assert str(decode(0x8AB4)) == "ADD VA, VB"
        assert str(decode(0xA2F0)) == "LD I, 2f0"
        assert str(decode(0xD015)) == "DRW V0, V1, 5"
        assert str(decode(0x5121)) == "??? 5121"


@pytest.mark.parametrize("word, op", [
    (0x00E0, Op.CLS),
    (0x00EE, Op.RET),
    (0x0123, Op.SYS),
    (0x1234, Op.JP),
    (0x2345, Op.CALL),
    (0x3A12, Op.SE_IMM),
    (0x4A12, Op.SNE_IMM),
    (0x5AB0, Op.SE_REG),
    (0x6A12, Op.LD_IMM),
    (0x7A12, Op.ADD_IMM),
    (0x8AB0, Op.LD_REG),
    (0x8AB1, Op.OR),
    (0x8AB2, Op.AND),
    (0x8AB3, Op.XOR),
    (0x8AB4, Op.ADD_REG),
    (0x8AB5, Op.SUB),
    (0x8AB6, Op.SHR),
    (0x8AB7, Op.SUBN),
    (0x8ABE, Op.SHL),
    (0x9AB0, Op.SNE_REG),
    (0xA123, Op.LD_I),
    (0xB123, Op.JP_V0),
    (0xCA12, Op.RND),
    (0xDAB5, Op.DRW),
    (0xEA9E, Op.SKP),
    (0xEAA1, Op.SKNP),
    (0xFA07, Op.LD_VX_DT),
    (0xFA0A, Op.LD_VX_K),
    (0xFA15, Op.LD_DT_VX),
    (0xFA18, Op.LD_ST_VX),
    (0xFA1E, Op.ADD_I),
    (0xFA29, Op.LD_F),
    (0xFA33, Op.LD_B),
    (0xFA55, Op.LD_REGS),
    (0xFA65, Op.LD_VX_REGS),
])
def test_every_operation(word, op):
    assert decode(word).op is op


@pytest.mark.parametrize("word", [
    0x5AB1, 0x9AB8, 0x8AB8, 0x8ABF, 0xEA00, 0xFA00, 0xFAFF,
])
def test_unknown(word):
    assert decode(word).op is Op.UNKNOWN
