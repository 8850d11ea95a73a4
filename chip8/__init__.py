# chip8 - a Chip-8 virtual machine.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

from .errors import (Chip8Error, ProgramError, ProgramTooLarge, ProgramNotFound,
                     ProgramUnreadable, StackError, StackOverflow, StackUnderflow,
                     UnknownOpcode)
from .framebuffer import Framebuffer
from .instructions import Instruction, Op, decode
from .interpreter import Chip8
from .keypad import Keypad
from .memory import Memory
from .registers import RegisterFile
from .rom import load_rom
from .timers import Timers

__version__ = "0.2.0"
