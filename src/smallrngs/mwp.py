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
    read_u64_into,
    rotate_right32,
    seed_from_entropy,
    to_uint32,
    to_uint64,
)

# Multiplier of the MCG, also used by the RXS M XS output function
MULTIPLIER = 6364136223846793005

# Increment of the Weyl sequence
WEYL_INCREMENT = 1442695040888963407


@dataclass
class MwpRng:
    """A 64-bit MCG combined with a Weyl sequence, followed by a PCG permutation

    The two words `m` (MCG, always odd) and `w` (Weyl sequence) advance together and
    are xored into the value passed to the output function. :meth:`.next_u32` uses
    the XSH RR permutation, :meth:`.next_u64` uses RXS M XS: the two methods are
    independent, and one 64-bit output is *not* the concatenation of two 32-bit ones.
    """

    SEED_SIZE = 16

    m: int = 1
    w: int = 0

    @classmethod
    def from_seed(cls, seed):
        m, w = read_u64_into(seed, 2)
        return cls(m=m | 1, w=w)

    @classmethod
    def from_entropy(cls):
        return cls.from_seed(seed_from_entropy(cls.SEED_SIZE))

    def _advance(self) -> int:
        self.m = to_uint64(self.m * MULTIPLIER)
        self.w = to_uint64(self.w + WEYL_INCREMENT)
        return self.m ^ self.w

    def next_u32(self) -> int:
        state = self._advance()

        # XSH RR: xorshift high (bits), followed by a random rotate
        xorshifted = to_uint32(((state >> 18) ^ state) >> 27)
        return rotate_right32(xorshifted, state >> 59)

    def next_u64(self) -> int:
        state = self._advance()

        # RXS M XS: random xorshift, mcg multiply, fixed xorshift
        rshift = (state >> 59) & 63
        state ^= state >> (5 + rshift)
        state = to_uint64(state * MULTIPLIER)
        return state ^ (state >> 42)

    def fill_bytes(self, dest: bytearray):
        fill_bytes_via_next(self, dest)

    def random_bytes(self, num_of_bytes: int) -> bytes:
        result = bytearray(num_of_bytes)
        self.fill_bytes(result)
        return bytes(result)

    def random_float(self) -> float:
        """Return a new random number uniformly distributed over [0, 1]"""
        return self.next_u32() / 0xFFFFFFFF
