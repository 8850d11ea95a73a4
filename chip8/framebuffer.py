# chip8 - video memory.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

from .constants import VIDEO_X, VIDEO_Y


class Framebuffer:
    """64x32 monochrome pixel grid.

    pixels is indexed [y][x]. dirty is set whenever a pixel changes
    and is left for the renderer to clear once it has redrawn."""

    def __init__(self, width=VIDEO_X, height=VIDEO_Y):
        self.width = width
        self.height = height
        self.pixels = [bytearray(width) for y in range(height)]
        self.dirty = True

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self):
        for row in self.pixels:
            row[:] = bytes(self.width)
        self.dirty = True

    def read(self, x, y):
        if not self.in_bounds(x, y):
            return 0
        return self.pixels[y][x]

    def xor_pixel(self, x, y):
        """Flip the pixel at (x, y). Returns True if it was set, ie. the
        write erased it. Anything off screen is dropped."""
        if not self.in_bounds(x, y):
            return False
        oldpx = self.pixels[y][x]
        self.pixels[y][x] = oldpx ^ 1
        self.dirty = True
        return oldpx == 1

    def rows(self):
        for y, row in enumerate(self.pixels):
            yield y, row

    def lit(self):
        """Coordinates of every set pixel"""
        for y, row in self.rows():
            for x, px in enumerate(row):
                if px:
                    yield x, y

    def __str__(self):
        return "\n".join("".join("#" if px else "." for px in row)
                         for row in self.pixels)
