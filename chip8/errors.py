# chip8 - machine faults.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.


class Chip8Error(Exception):
    """Base class for everything the machine can raise"""


class ProgramError(Chip8Error):
    """A program could not be loaded"""


class ProgramTooLarge(ProgramError):
    def __init__(self, length, capacity):
        super().__init__(
            f"Program is too large: {length} bytes, at most {capacity} fit.")
        self.length = length
        self.capacity = capacity


class ProgramNotFound(ProgramError):
    def __init__(self, path):
        super().__init__(f"Program file {path} doesn't exist.")
        self.path = path


class ProgramUnreadable(ProgramError):
    def __init__(self, path, reason):
        super().__init__(f"Program file {path} can't be read: {reason}")
        self.path = path
        self.reason = reason


class StackError(Chip8Error):
    """The call stack was misused by the running program"""

    def __init__(self, message, pc):
        super().__init__(f"{message} at 0x{pc:04x}")
        self.pc = pc


class StackOverflow(StackError):
    def __init__(self, pc):
        super().__init__("Stack overflow", pc)


class StackUnderflow(StackError):
    def __init__(self, pc):
        super().__init__("Stack underflow", pc)


class UnknownOpcode(Chip8Error):
    def __init__(self, word, pc):
        super().__init__(f"Undefined opcode {word:04x} at address {pc:04x}")
        self.word = word
        self.pc = pc
