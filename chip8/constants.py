# chip8 - machine constants and defaults.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

## CONSTANTS ##

# Clock speeds used by Chip-8.
# Timers always run at TIMER_HZ; CYCLE_HZ is only the default
# instruction rate and can be changed per run.
TIMER_HZ = 60
CYCLE_HZ = 500

TOTAL_RAM = 4096
ADDR_MASK = TOTAL_RAM - 1
LOAD_POS = 0x200
PROGRAM_END = 0xFFF
MAX_PROGRAM_SIZE = PROGRAM_END - LOAD_POS + 1

REGISTER_COUNT = 16
STACK_DEPTH = 16
KEY_COUNT = 16

# Chip-8 Video display constants
VIDEO_X = 64
VIDEO_Y = 32
VIDEO_RES = 10
# Pixel colors for display
PIXEL_ON = (255, 255, 255)
PIXEL_OFF = (0, 0, 0)

# Beeper
TONE_HZ = 440
TONE_MS = 100
SAMPLE_RATE = 22050

# Chip-8 ROM Font map
FONT_LOAD = 0x000
FONT_HEIGHT = 5
FONT_MAP = [
    0xF0, 0x90, 0x90, 0x90, 0xF0, # 0
    0x20, 0x60, 0x20, 0x20, 0x70, # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0, # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0, # 3
    0x90, 0x90, 0xF0, 0x10, 0x10, # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0, # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0, # 6
    0xF0, 0x10, 0x20, 0x40, 0x40, # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0, # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0, # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90, # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0, # B
    0xF0, 0x80, 0x80, 0x80, 0xF0, # C
    0xE0, 0x90, 0x90, 0x90, 0xE0, # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0, # E
    0xF0, 0x80, 0xF0, 0x80, 0x80  # F
]
