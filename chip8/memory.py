# chip8 - main memory.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import logging

from .constants import (TOTAL_RAM, ADDR_MASK, LOAD_POS, MAX_PROGRAM_SIZE,
                        FONT_LOAD, FONT_MAP, FONT_HEIGHT)
from .errors import ProgramTooLarge

log = logging.getLogger(__name__)


class Memory:
    """4K of byte addressable RAM.

    Addresses wrap at 12 bits, so reading past 0xFFF comes back
    around to 0x000 rather than raising."""

    def __init__(self):
        self.cells = bytearray(TOTAL_RAM)
        self.initialize()

    def __len__(self):
        return len(self.cells)

    def initialize(self):
        """Zero everything and put the font back"""
        self.cells[:] = bytes(TOTAL_RAM)
        self.cells[FONT_LOAD:FONT_LOAD + len(FONT_MAP)] = bytes(FONT_MAP)
        log.debug(f"Main memory {TOTAL_RAM:d} bytes initialised")
        log.debug(f"Fonts loaded to {FONT_LOAD:04x}")

    def read(self, address):
        return self.cells[address & ADDR_MASK]

    def write(self, address, value):
        self.cells[address & ADDR_MASK] = value & 0xFF

    def read_word(self, address):
        """Fetch a big-endian instruction word"""
        return self.read(address) << 8 | self.read(address + 1)

    def read_block(self, address, n):
        return bytes(self.read(address + i) for i in range(n))

    def load_program(self, program):
        program = memoryview(program).tobytes()
        if len(program) > MAX_PROGRAM_SIZE:
            raise ProgramTooLarge(len(program), MAX_PROGRAM_SIZE)
        self.cells[LOAD_POS:LOAD_POS + len(program)] = program
        log.info(f"Program length {len(program)} bytes loaded at 0x{LOAD_POS:04x}")

    @staticmethod
    def font_address(digit):
        return FONT_LOAD + FONT_HEIGHT * (digit & 0xF)
