# chip8 - pygame window, keyboard and beeper.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import logging
import struct

import pygame

from .constants import (TIMER_HZ, CYCLE_HZ, VIDEO_RES, PIXEL_ON, PIXEL_OFF,
                        TONE_HZ, TONE_MS, SAMPLE_RATE)

log = logging.getLogger(__name__)

# KEY_MAP[n] is the pygame key that drives keypad key n. The hex pad
# isn't in numeric order, so the list looks shuffled; laid out on the
# keyboard it is the 4x4 block under 1-4, pad label / keyboard key:

# +-----+-----+-----+-----+
# | 1/1 | 2/2 | 3/3 | C/4 |
# +-----+-----+-----+-----+
# | 4/Q | 5/W | 6/E | D/R |
# +-----+-----+-----+-----+
# | 7/A | 8/S | 9/D | E/F |
# +-----+-----+-----+-----+
# | A/Z | 0/X | B/C | F/V |
# +-----+-----+-----+-----+

KEY_MAP = [
    pygame.K_x, pygame.K_1, pygame.K_2, pygame.K_3,
    pygame.K_q, pygame.K_w, pygame.K_e, pygame.K_a,
    pygame.K_s, pygame.K_d, pygame.K_z, pygame.K_c,
    pygame.K_4, pygame.K_r, pygame.K_f, pygame.K_v
]


class Screen:
    """Draws the framebuffer as scale x scale blocks"""

    def __init__(self, fb, scale=VIDEO_RES, caption="CHIP-8"):
        self.fb = fb
        self.scale = scale
        size = [fb.width * scale, fb.height * scale]
        pygame.display.set_caption(caption)
        log.info(f"Display mode {size[0]} x {size[1]}")
        self.surface = pygame.display.set_mode(size)

    def update(self):
        # Only redraw when something has actually changed
        if not self.fb.dirty:
            return
        self.surface.fill(PIXEL_OFF)
        for x, y in self.fb.lit():
            pygame.draw.rect(self.surface, PIXEL_ON,
                             (x * self.scale, y * self.scale, self.scale, self.scale))
        pygame.display.flip()
        self.fb.dirty = False


class Keyboard:
    """Copies the state of the mapped keys into the keypad"""

    def __init__(self, keypad, key_map=KEY_MAP):
        self.keypad = keypad
        self.key_map = key_map

    def poll(self):
        pressed = pygame.key.get_pressed()
        for key, code in enumerate(self.key_map):
            self.keypad.set(key, pressed[code])


class Beeper:
    """A short square wave. Stays quiet if there's no audio device."""

    def __init__(self, freq=TONE_HZ, ms=TONE_MS):
        self.sound = None
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as e:
            log.warning(f"No audio, sound disabled: {e}")
            return
        rate, _, channels = pygame.mixer.get_init()
        half = max(1, rate // freq // 2)
        samples = []
        for i in range(rate * ms // 1000):
            level = 4096 if (i // half) % 2 == 0 else -4096
            samples.extend([level] * channels)
        self.sound = pygame.mixer.Sound(buffer=struct.pack(f"<{len(samples)}h", *samples))

    def play(self):
        if self.sound is not None:
            self.sound.play()


def run(machine, speed=CYCLE_HZ, scale=VIDEO_RES):
    """Drive machine until the window is closed or Escape is pressed.

    speed instructions run per second, spread over TIMER_HZ frames,
    and the timers get one tick per frame."""
    log.info("Initialise display engine")
    pygame.init()
    screen = Screen(machine.fb, scale)
    keyboard = Keyboard(machine.keypad)
    beeper = Beeper()
    machine.on_tone = beeper.play
    clock = pygame.time.Clock()
    cycles_per_frame = max(1, round(speed / TIMER_HZ))
    log.debug(f"{cycles_per_frame} instructions per frame")

    log.info("Emulation starting")
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            keyboard.poll()
            for _ in range(cycles_per_frame):
                machine.step()
            machine.tick_timers()
            screen.update()
            clock.tick(TIMER_HZ)
    finally:
        pygame.quit()
    log.info(f"Emulation halted after {machine.cycles} instructions")
