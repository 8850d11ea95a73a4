"""
Shared fixtures for the chip8 test suite.
"""

import pytest

from chip8 import Chip8


def put(machine, address, *words):
    """Write instruction words big-endian starting at address."""
    for i, word in enumerate(words):
        machine.memory.write(address + 2 * i, word >> 8)
        machine.memory.write(address + 2 * i + 1, word & 0xFF)


def execute(machine, word):
    """Place one instruction at PC and step it."""
    put(machine, machine.regs.PC, word)
    return machine.step()


@pytest.fixture
def machine():
    """A freshly initialised machine with a fixed RND seed."""
    return Chip8(seed=1234)
