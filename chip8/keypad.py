# chip8 - hex keypad state.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

from .constants import KEY_COUNT


class Keypad:
    """Sixteen keys, 0x0 to 0xF. The host writes them, the
    interpreter only ever reads."""

    def __init__(self):
        self.keys = [False] * KEY_COUNT

    def _check(self, key):
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"No such key: {key!r}")

    def set(self, key, state):
        self._check(key)
        self.keys[key] = bool(state)

    def press(self, key):
        self.set(key, True)

    def release(self, key):
        self.set(key, False)

    def clear(self):
        self.keys = [False] * KEY_COUNT

    def is_pressed(self, key):
        # Programs pass whatever is in Vx, so only the low nibble counts
        return self.keys[key & 0xF]

    def first_pressed(self):
        """Lowest numbered key currently down, or None"""
        for key, down in enumerate(self.keys):
            if down:
                return key
        return None
