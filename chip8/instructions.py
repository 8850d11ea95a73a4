# chip8 - instruction decoding.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

from collections import namedtuple
from enum import Enum


class Op(Enum):
    """Every operation the interpreter knows, with the format used
    to print it in the trace log."""
    CLS = "CLS"
    RET = "RET"
    SYS = "SYS {nnn:03x}"
    JP = "JP {nnn:03x}"
    CALL = "CALL {nnn:03x}"
    SE_IMM = "SE V{x:1X}, {kk:02x}"
    SNE_IMM = "SNE V{x:1X}, {kk:02x}"
    SE_REG = "SE V{x:1X}, V{y:1X}"
    LD_IMM = "LD V{x:1X}, {kk:02x}"
    ADD_IMM = "ADD V{x:1X}, {kk:02x}"
    LD_REG = "LD V{x:1X}, V{y:1X}"
    OR = "OR V{x:1X}, V{y:1X}"
    AND = "AND V{x:1X}, V{y:1X}"
    XOR = "XOR V{x:1X}, V{y:1X}"
    ADD_REG = "ADD V{x:1X}, V{y:1X}"
    SUB = "SUB V{x:1X}, V{y:1X}"
    SHR = "SHR V{x:1X}"
    SUBN = "SUBN V{x:1X}, V{y:1X}"
    SHL = "SHL V{x:1X}"
    SNE_REG = "SNE V{x:1X}, V{y:1X}"
    LD_I = "LD I, {nnn:03x}"
    JP_V0 = "JP V0, {nnn:03x}"
    RND = "RND V{x:1X}, {kk:02x}"
    DRW = "DRW V{x:1X}, V{y:1X}, {n:1x}"
    SKP = "SKP V{x:1X}"
    SKNP = "SKNP V{x:1X}"
    LD_VX_DT = "LD V{x:1X}, DT"
    LD_VX_K = "LD V{x:1X}, K"
    LD_DT_VX = "LD DT, V{x:1X}"
    LD_ST_VX = "LD ST, V{x:1X}"
    ADD_I = "ADD I, V{x:1X}"
    LD_F = "LD F, V{x:1X}"
    LD_B = "LD B, V{x:1X}"
    LD_REGS = "LD [I], V{x:1X}"
    LD_VX_REGS = "LD V{x:1X}, [I]"
    UNKNOWN = "??? {word:04x}"


# Secondary dispatch tables, keyed on the masked sub-field
ALU_OPS = {
    0x0: Op.LD_REG,
    0x1: Op.OR,
    0x2: Op.AND,
    0x3: Op.XOR,
    0x4: Op.ADD_REG,
    0x5: Op.SUB,
    0x6: Op.SHR,
    0x7: Op.SUBN,
    0xE: Op.SHL,
}

KEY_OPS = {
    0x9E: Op.SKP,
    0xA1: Op.SKNP,
}

MISC_OPS = {
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_VX_K,
    0x15: Op.LD_DT_VX,
    0x18: Op.LD_ST_VX,
    0x1E: Op.ADD_I,
    0x29: Op.LD_F,
    0x33: Op.LD_B,
    0x55: Op.LD_REGS,
    0x65: Op.LD_VX_REGS,
}

# Groups where the whole instruction is picked by the top nibble
SIMPLE_OPS = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_IMM,
    0x4: Op.SNE_IMM,
    0x6: Op.LD_IMM,
    0x7: Op.ADD_IMM,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW,
}


class Instruction(namedtuple("Instruction", "op word nnn n x y kk")):
    __slots__ = ()

    def __str__(self):
        return self.op.value.format(**self._asdict())


def decode(word):
    """Split a 16 bit instruction word into its operation and operands"""
    word &= 0xFFFF
    group = word >> 12
    nnn = word & 0x0FFF
    n = word & 0x000F
    x = word >> 8 & 0x0F
    y = word >> 4 & 0x0F
    kk = word & 0x00FF

    if group == 0x0:
        if word == 0x00E0:
            op = Op.CLS
        elif word == 0x00EE:
            op = Op.RET
        else:
            op = Op.SYS
    elif group in SIMPLE_OPS:
        op = SIMPLE_OPS[group]
    elif group == 0x5:
        op = Op.SE_REG if n == 0 else Op.UNKNOWN
    elif group == 0x9:
        op = Op.SNE_REG if n == 0 else Op.UNKNOWN
    elif group == 0x8:
        op = ALU_OPS.get(n, Op.UNKNOWN)
    elif group == 0xE:
        op = KEY_OPS.get(kk, Op.UNKNOWN)
    else:
        op = MISC_OPS.get(kk, Op.UNKNOWN)

    return Instruction(op, word, nnn, n, x, y, kk)
