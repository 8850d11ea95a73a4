# chip8 - register file and call stack.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import logging

from .constants import REGISTER_COUNT, STACK_DEPTH, LOAD_POS
from .errors import StackOverflow, StackUnderflow

log = logging.getLogger(__name__)

VF = 0xF


class RegisterFile:
    """V0:VF, I, PC and the return stack.

    V is a bytearray so anything stored there has to be masked to
    8 bits first. I and PC are 16 bits wide and mask themselves."""

    def __init__(self):
        self.V = bytearray(REGISTER_COUNT)
        self.stack = [0] * STACK_DEPTH
        self.sp = 0
        self._I = 0
        self._PC = LOAD_POS

    def reset(self):
        self.V[:] = bytes(REGISTER_COUNT)
        self.stack = [0] * STACK_DEPTH
        self.sp = 0
        self.I = 0
        self.PC = LOAD_POS
        log.debug(f"Registers V0:VF, I initialized")
        log.debug(f"Register PC initialised to 0x{self.PC:04x}")

    @property
    def I(self):
        return self._I

    @I.setter
    def I(self, value):
        self._I = value & 0xFFFF

    @property
    def PC(self):
        return self._PC

    @PC.setter
    def PC(self, value):
        self._PC = value & 0xFFFF

    def advance(self, n=2):
        self.PC += n

    def call(self, target):
        """Push PC and jump to target"""
        if self.sp >= STACK_DEPTH:
            raise StackOverflow(self.PC)
        self.stack[self.sp] = self.PC
        self.sp += 1
        self.PC = target

    def ret(self):
        """Pop the caller's PC and step over the CALL that saved it"""
        if self.sp == 0:
            raise StackUnderflow(self.PC)
        self.sp -= 1
        self.PC = self.stack[self.sp]
        self.advance()

    def __repr__(self):
        regs = " ".join(f"V{i:1X}:{v:02x}" for i, v in enumerate(self.V))
        return f"<RegisterFile PC:{self.PC:04x} I:{self.I:04x} SP:{self.sp} {regs}>"
