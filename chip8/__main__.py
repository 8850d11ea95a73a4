# chip8 - run with python -m chip8.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import sys

from .cli import main

sys.exit(main())
