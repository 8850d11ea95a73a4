# chip8 - the fetch, decode, execute loop.

# To the extent possible under law, the person who associated CC0 with
# chip8 has waived all copyright and related or neighboring rights
# to chip8.

# You should have received a copy of the CC0 legalcode along with this
# work.  If not, see <http://creativecommons.org/publicdomain/zero/1.0/>.

import logging
import random

from .errors import UnknownOpcode
from .framebuffer import Framebuffer
from .instructions import Op, decode
from .keypad import Keypad
from .memory import Memory
from .registers import RegisterFile, VF
from .timers import Timers

log = logging.getLogger(__name__)


class Chip8:
    """One complete machine.

    The host owns the loop: call step() as often as it likes and
    tick_timers() at TIMER_HZ. Nothing in here blocks, not even
    LD Vx, K, which just leaves PC alone until a key turns up.

    seed       -- seed for RND, fixed for the lifetime of the machine
    wrap_sprites -- wrap sprites around the screen edges instead of
                  clipping them
    strict     -- raise UnknownOpcode instead of skipping bad words
    on_tone    -- called with no arguments when the sound timer runs out
    """

    def __init__(self, seed=None, wrap_sprites=False, strict=False, on_tone=None):
        self.memory = Memory()
        self.regs = RegisterFile()
        self.timers = Timers()
        self.fb = Framebuffer()
        self.keypad = Keypad()
        self.wrap_sprites = wrap_sprites
        self.strict = strict
        self.on_tone = on_tone
        # Seeded once here and never again, initialize() included
        self.rng = random.Random(seed)
        self.cycles = 0
        self.last_instruction = None

        self.dispatch = {
            Op.CLS: self.ins_cls,
            Op.RET: self.ins_ret,
            Op.SYS: self.ins_sys,
            Op.JP: self.ins_jmp,
            Op.CALL: self.ins_call,
            Op.SE_IMM: self.ins_se_imm,
            Op.SNE_IMM: self.ins_sne_imm,
            Op.SE_REG: self.ins_se_reg,
            Op.LD_IMM: self.ins_ld_imm,
            Op.ADD_IMM: self.ins_add_imm,
            Op.LD_REG: self.ins_ld_reg,
            Op.OR: self.ins_or,
            Op.AND: self.ins_and,
            Op.XOR: self.ins_xor,
            Op.ADD_REG: self.ins_add_reg,
            Op.SUB: self.ins_sub,
            Op.SHR: self.ins_shr,
            Op.SUBN: self.ins_subn,
            Op.SHL: self.ins_shl,
            Op.SNE_REG: self.ins_sne_reg,
            Op.LD_I: self.ins_loadi,
            Op.JP_V0: self.ins_jmp_v0,
            Op.RND: self.ins_rnd,
            Op.DRW: self.ins_draw,
            Op.SKP: self.ins_skp,
            Op.SKNP: self.ins_sknp,
            Op.LD_VX_DT: self.ins_ld_vx_dt,
            Op.LD_VX_K: self.ins_ld_vx_key,
            Op.LD_DT_VX: self.ins_ld_dt_vx,
            Op.LD_ST_VX: self.ins_ld_st_vx,
            Op.ADD_I: self.ins_add_i,
            Op.LD_F: self.ins_ld_font,
            Op.LD_B: self.ins_ld_bcd,
            Op.LD_REGS: self.ins_store_regs,
            Op.LD_VX_REGS: self.ins_load_regs,
            Op.UNKNOWN: self.ins_unknown,
        }
        missing = set(Op) - set(self.dispatch)
        if missing:
            raise RuntimeError(f"No handler for {sorted(op.name for op in missing)}")

        self.initialize()

    @property
    def V(self):
        return self.regs.V

    def initialize(self):
        """Put the machine back to power-on state"""
        self.memory.initialize()
        self.regs.reset()
        self.timers.reset()
        self.fb.clear()
        self.keypad.clear()
        self.cycles = 0
        self.last_instruction = None

    def load_program(self, program):
        self.memory.load_program(program)

    def fetch(self):
        return self.memory.read_word(self.regs.PC)

    def step(self):
        """Run exactly one instruction and return it, decoded"""
        pc = self.regs.PC
        ins = decode(self.fetch())
        log.debug("%04x | OP 0x%04x - %s", pc, ins.word, ins)
        self.dispatch[ins.op](ins)
        self.cycles += 1
        self.last_instruction = ins
        return ins

    def tick_timers(self):
        """One TIMER_HZ tick. Returns True if the tone should start now."""
        tone = self.timers.tick()
        if tone:
            log.debug("Sound timer expired, beep")
            if self.on_tone is not None:
                self.on_tone()
        return tone

    def set_flag(self, x, value, flag):
        """Store an ALU result and VF, VF last so it wins when x is F"""
        self.V[x] = value & 0xFF
        self.V[VF] = flag

    def skip_if(self, cond):
        self.regs.advance(4 if cond else 2)

    ## Instructions ##

    def ins_cls(self, ins):
        self.fb.clear()
        self.regs.advance()

    def ins_ret(self, ins):
        self.regs.ret()

    def ins_sys(self, ins):
        # Machine code routines on the original hardware; nothing to run
        self.regs.advance()

    def ins_jmp(self, ins):
        self.regs.PC = ins.nnn

    def ins_call(self, ins):
        self.regs.call(ins.nnn)

    def ins_se_imm(self, ins):
        self.skip_if(self.V[ins.x] == ins.kk)

    def ins_sne_imm(self, ins):
        self.skip_if(self.V[ins.x] != ins.kk)

    def ins_se_reg(self, ins):
        self.skip_if(self.V[ins.x] == self.V[ins.y])

    def ins_sne_reg(self, ins):
        self.skip_if(self.V[ins.x] != self.V[ins.y])

    def ins_ld_imm(self, ins):
        self.V[ins.x] = ins.kk
        self.regs.advance()

    def ins_add_imm(self, ins):
        # No carry flag for the immediate form
        self.V[ins.x] = (self.V[ins.x] + ins.kk) & 0xFF
        self.regs.advance()

    def ins_ld_reg(self, ins):
        self.V[ins.x] = self.V[ins.y]
        self.regs.advance()

    def ins_or(self, ins):
        self.V[ins.x] |= self.V[ins.y]
        self.regs.advance()

    def ins_and(self, ins):
        self.V[ins.x] &= self.V[ins.y]
        self.regs.advance()

    def ins_xor(self, ins):
        self.V[ins.x] ^= self.V[ins.y]
        self.regs.advance()

    def ins_add_reg(self, ins):
        result = self.V[ins.x] + self.V[ins.y]
        self.set_flag(ins.x, result, 1 if result > 0xFF else 0)
        self.regs.advance()

    def ins_sub(self, ins):
        vx, vy = self.V[ins.x], self.V[ins.y]
        self.set_flag(ins.x, vx - vy, 1 if vx > vy else 0)
        self.regs.advance()

    def ins_subn(self, ins):
        vx, vy = self.V[ins.x], self.V[ins.y]
        self.set_flag(ins.x, vy - vx, 1 if vy > vx else 0)
        self.regs.advance()

    def ins_shr(self, ins):
        vx = self.V[ins.x]
        self.set_flag(ins.x, vx >> 1, vx & 0x01)
        self.regs.advance()

    def ins_shl(self, ins):
        vx = self.V[ins.x]
        self.set_flag(ins.x, vx << 1, vx >> 7 & 0x01)
        self.regs.advance()

    def ins_loadi(self, ins):
        self.regs.I = ins.nnn
        self.regs.advance()

    def ins_jmp_v0(self, ins):
        self.regs.PC = ins.nnn + self.V[0]

    def ins_rnd(self, ins):
        self.V[ins.x] = self.rng.randint(0, 255) & ins.kk
        self.regs.advance()

    def ins_draw(self, ins):
        """Draw an n-row sprite from [I] at (Vx, Vy).

        Each byte is one row, most significant bit on the left.
        VF ends up 1 if any set pixel got erased along the way."""
        x0, y0 = self.V[ins.x], self.V[ins.y]
        collision = 0
        for row in range(ins.n):
            sprite = self.memory.read(self.regs.I + row)
            y_off = y0 + row
            for col in range(8):
                if not sprite >> (7 - col) & 0x1:
                    continue
                x_off = x0 + col
                if self.wrap_sprites:
                    x_off %= self.fb.width
                    y_off %= self.fb.height
                if self.fb.xor_pixel(x_off, y_off):
                    collision = 1
        self.V[VF] = collision
        self.regs.advance()

    def ins_skp(self, ins):
        self.skip_if(self.keypad.is_pressed(self.V[ins.x]))

    def ins_sknp(self, ins):
        self.skip_if(not self.keypad.is_pressed(self.V[ins.x]))

    def ins_ld_vx_dt(self, ins):
        self.V[ins.x] = self.timers.delay
        self.regs.advance()

    def ins_ld_vx_key(self, ins):
        key = self.keypad.first_pressed()
        if key is None:
            # Come back to this instruction next step
            return
        log.debug(f"Store key {key:1x} to V{ins.x:1X}")
        self.V[ins.x] = key
        self.regs.advance()

    def ins_ld_dt_vx(self, ins):
        self.timers.delay = self.V[ins.x]
        self.regs.advance()

    def ins_ld_st_vx(self, ins):
        self.timers.sound = self.V[ins.x]
        self.regs.advance()

    def ins_add_i(self, ins):
        self.regs.I += self.V[ins.x]
        self.regs.advance()

    def ins_ld_font(self, ins):
        self.regs.I = self.memory.font_address(self.V[ins.x])
        self.regs.advance()

    def ins_ld_bcd(self, ins):
        value = self.V[ins.x]
        i = self.regs.I
        self.memory.write(i, value // 100)
        self.memory.write(i + 1, value // 10 % 10)
        self.memory.write(i + 2, value % 10)
        self.regs.advance()

    def ins_store_regs(self, ins):
        for n in range(ins.x + 1):
            self.memory.write(self.regs.I + n, self.V[n])
        self.regs.advance()

    def ins_load_regs(self, ins):
        for n in range(ins.x + 1):
            self.V[n] = self.memory.read(self.regs.I + n)
        self.regs.advance()

    def ins_unknown(self, ins):
        if self.strict:
            raise UnknownOpcode(ins.word, self.regs.PC)
        log.warning(f"Undefined opcode {ins.word:04x} at address {self.regs.PC:04x}, skipped")
        self.regs.advance()
