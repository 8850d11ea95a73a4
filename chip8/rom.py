# chip8 - reading programs off disk.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import logging

from .errors import ProgramNotFound, ProgramUnreadable

log = logging.getLogger(__name__)


def load_rom(path):
    """Return the raw bytes of a compiled Chip-8 program"""
    try:
        with open(path, 'rb') as p:
            program = p.read()
    except FileNotFoundError:
        raise ProgramNotFound(path) from None
    except OSError as e:
        raise ProgramUnreadable(path, e.strerror or str(e)) from e
    log.info(f"Read {len(program)} bytes from {path}")
    return program
