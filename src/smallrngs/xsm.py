# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.



from dataclasses import dataclass

from smallrngs.rngcore import (
    fill_bytes_via_next,
    next_u64_via_u32,
    read_u32_into,
    read_u64_into,
    rotate_left32,
    rotate_left64,
    seed_from_entropy,
    to_uint32,
    to_uint64,
)

XSM32_K = 0x6595A395
XSM64_K = 0xA3EC647659359ACD


@dataclass
class Xsm32Rng:
    """XSM generator, 32-bit version

    Designed by Chris Doty-Humphrey for PractRand (public domain). A 64-bit LCG split
    in two 32-bit halves (`lcg_low`, `lcg_high`) with an odd increment `lcg_adder`,
    whose output is mixed with the previous one (`history`). Period 2^64, 12-byte seed.
    """

    SEED_SIZE = 12

    lcg_low: int = 0
    lcg_high: int = 0
    lcg_adder: int = 1
    history: int = 0

    @classmethod
    def from_seed(cls, seed):
        low, high, adder = read_u32_into(seed, 3)
        result = cls(lcg_low=low, lcg_high=high, lcg_adder=adder | 1, history=0)

        # Discard the first output, so that `history` is no longer zero
        result.next_u32()
        return result

    @classmethod
    def from_entropy(cls):
        return cls.from_seed(seed_from_entropy(cls.SEED_SIZE))

    def next_u32(self) -> int:
        rv = to_uint32(self.history * XSM32_K)
        tmp = to_uint32(self.lcg_high + rotate_left32(self.lcg_high ^ self.lcg_low, 11))
        tmp = to_uint32(tmp * XSM32_K)

        old_lcg_low = self.lcg_low
        self.lcg_low = to_uint32(self.lcg_low + self.lcg_adder)
        # Carry out of the low half
        if self.lcg_low < self.lcg_adder:
            old_lcg_low = to_uint32(old_lcg_low + 1)
        self.lcg_high = to_uint32(self.lcg_high + old_lcg_low)

        rv ^= rv >> 16
        self.history = tmp ^ (tmp >> 16)
        return to_uint32(rv + self.history)

    def next_u64(self) -> int:
        return next_u64_via_u32(self)

    def fill_bytes(self, dest: bytearray):
        fill_bytes_via_next(self, dest)

    def random_bytes(self, num_of_bytes: int) -> bytes:
        result = bytearray(num_of_bytes)
        self.fill_bytes(result)
        return bytes(result)

    def random_float(self) -> float:
        """Return a new random number uniformly distributed over [0, 1]"""
        return self.next_u32() / 0xFFFFFFFF


@dataclass
class Xsm64Rng:
    """XSM generator, 64-bit version

    Same construction as :class:`.Xsm32Rng` with 64-bit words: a 128-bit LCG, a
    different multiplier, rotation by 19 and shifts by 32. Period 2^128, 24-byte seed.
    """

    SEED_SIZE = 24

    lcg_low: int = 0
    lcg_high: int = 0
    lcg_adder: int = 1
    history: int = 0

    @classmethod
    def from_seed(cls, seed):
        low, high, adder = read_u64_into(seed, 3)
        result = cls(lcg_low=low, lcg_high=high, lcg_adder=adder | 1, history=0)
        result.next_u64()
        return result

    @classmethod
    def from_entropy(cls):
        return cls.from_seed(seed_from_entropy(cls.SEED_SIZE))

    def next_u64(self) -> int:
        history = to_uint64(self.history * XSM64_K)
        tmp = to_uint64(self.lcg_high + rotate_left64(self.lcg_high ^ self.lcg_low, 19))
        tmp = to_uint64(tmp * XSM64_K)

        old_lcg_low = self.lcg_low
        self.lcg_low = to_uint64(self.lcg_low + self.lcg_adder)
        if self.lcg_low < self.lcg_adder:
            old_lcg_low = to_uint64(old_lcg_low + 1)
        self.lcg_high = to_uint64(self.lcg_high + old_lcg_low)

        old_history = history ^ (history >> 32)
        self.history = tmp ^ (tmp >> 32)
        return to_uint64(tmp + old_history)

    def next_u32(self) -> int:
        return to_uint32(self.next_u64())

    def fill_bytes(self, dest: bytearray):
        fill_bytes_via_next(self, dest)

    def random_bytes(self, num_of_bytes: int) -> bytes:
        result = bytearray(num_of_bytes)
        self.fill_bytes(result)
        return bytes(result)

    def random_float(self) -> float:
        """Return a new random number uniformly distributed over [0, 1]"""
        return self.next_u32() / 0xFFFFFFFF
