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
    InvalidSeedValue,
    fill_bytes_via_next,
    read_u64_into,
    rotate_left64,
    seed_from_entropy,
    to_uint32,
    to_uint64,
)

# The Weyl increment must be odd and have at least one bit set in its upper half,
# otherwise the sequence falls into a short cycle
_HIGH_BITS_MASK = 0xFFFFFFFF00000000


def _is_valid_stream(stream: int) -> bool:
    return (stream & _HIGH_BITS_MASK) != 0


@dataclass
class MswsRng:
    """Middle Square Weyl Sequence generator

    Devised by Bernard Widynski (https://mswsrng.wixsite.com/rand). The state is made
    by three 64-bit words: `x` is squared at each step, `w` is a Weyl sequence with
    increment `s`. The period is 2^64, the seed is 16 bytes long.
    """

    SEED_SIZE = 16

    x: int = 0
    w: int = 0
    s: int = 1

    @classmethod
    def from_seed(cls, seed):
        """Create a generator from 16 bytes

        The first little-endian word becomes the Weyl increment (forced to be odd), the
        second one the initial value of `x`. Raise :class:`.InvalidSeedValue` if the
        upper 32 bits of the increment are all zero."""
        stream, x = read_u64_into(seed, 2)
        stream |= 1
        if not _is_valid_stream(stream):
            raise InvalidSeedValue("bad seed: high bits are zero")

        return cls(x=x, w=0, s=stream)

    @classmethod
    def from_rng(cls, source):
        """Create a generator by drawing 64-bit words from another generator

        Words whose upper half is zero are discarded until a good one comes out."""
        while True:
            stream = source.next_u64() | 1
            if _is_valid_stream(stream):
                break

        return cls(x=source.next_u64(), w=0, s=stream)

    @classmethod
    def from_entropy(cls):
        while True:
            seed = seed_from_entropy(cls.SEED_SIZE)
            if _is_valid_stream(read_u64_into(seed, 2)[0] | 1):
                return cls.from_seed(seed)

    def next_u64(self) -> int:
        self.x = to_uint64(self.x * self.x)
        self.w = to_uint64(self.w + self.s)
        self.x = to_uint64(self.x + self.w)
        return rotate_left64(self.x, 32)

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
