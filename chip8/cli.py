# chip8 - command line entry point.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import sys
import logging
import argparse

from .constants import CYCLE_HZ, VIDEO_RES
from .errors import Chip8Error
from .host import run
from .interpreter import Chip8
from .rom import load_rom

aparser = argparse.ArgumentParser(prog="chip8", description="A Chip-8 interpreter")
aparser.add_argument('program',
    help="A compiled Chip-8 program to load")
aparser.add_argument('--debug',
    help="Enable verbose debug logging",
    action="store_true")
aparser.add_argument('--speed',
    help="Instructions executed per second (default %(default)s)",
    metavar="HZ",
    default=CYCLE_HZ,
    type=int)
aparser.add_argument('--scale',
    help="Size in screen pixels of one Chip-8 pixel (default %(default)s)",
    metavar="N",
    default=VIDEO_RES,
    type=int)
aparser.add_argument('--wrap',
    help="Wrap sprites around the screen edges instead of clipping them",
    action="store_true")


def main(argv=None):
    args = aparser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    logging.info("chip8 - a Chip-8 interpreter")
    machine = Chip8(wrap_sprites=args.wrap)
    try:
        logging.info(f"Loading program {args.program}")
        machine.load_program(load_rom(args.program))
        run(machine, speed=args.speed, scale=args.scale)
    except Chip8Error as e:
        logging.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
