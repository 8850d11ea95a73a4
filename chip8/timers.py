# chip8 - delay and sound timers.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.


class Timers:
    """The two programmable timers. Both count down at TIMER_HZ
    when something calls tick()."""

    def __init__(self):
        self._delay = 0
        self._sound = 0

    def reset(self):
        self.delay = 0
        self.sound = 0

    @property
    def delay(self):
        return self._delay

    @delay.setter
    def delay(self, value):
        self._delay = value & 0xFF

    @property
    def sound(self):
        return self._sound

    @sound.setter
    def sound(self, value):
        self._sound = value & 0xFF

    def tick(self):
        """Count both timers down once.

        Returns True only on the tick that takes the sound timer
        from 1 to 0, which is when the tone should start."""
        if self._delay > 0:
            self._delay -= 1
        tone = False
        if self._sound > 0:
            tone = self._sound == 1
            self._sound -= 1
        return tone
