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
    read_u64_into,
    rotate_right32,
    rotate_right64,
    seed_from_entropy,
    to_uint32,
    to_uint64,
    to_uint128,
)

# Multiplier of the 64-bit LCG
MULTIPLIER_64 = 6364136223846793005

# Multiplier of the 128-bit MCG
MULTIPLIER_128 = (2549297995355413924 << 64) | 4865540595714422341


@dataclass
class PcgXsh64LcgRng:
    """PCG generator, XSH RR 64/32 variant

    «Xorshift high (bits), random rotation» output function applied to a 64-bit linear
    congruential generator. Each call to :meth:`.next_u32` produces 32 bits.
    """

    SEED_SIZE = 16

    # 64-bit
    state: int = 0
    # 64-bit, always odd
    increment: int = 1

    @classmethod
    def from_seed(cls, seed):
        state, increment = read_u64_into(seed, 2)
        result = cls(state=state, increment=increment | 1)
        # Prepare for the first round
        result.state = to_uint64(result.state * MULTIPLIER_64 + result.increment)
        return result

    @classmethod
    def from_entropy(cls):
        return cls.from_seed(seed_from_entropy(cls.SEED_SIZE))

    def next_u32(self) -> int:
        """Return a new random number and advance the internal state"""
        # 64-bit
        oldstate = self.state

        # 64-bit
        self.state = to_uint64(oldstate * MULTIPLIER_64 + self.increment)

        # 32-bit
        xorshifted = to_uint32(((oldstate >> 18) ^ oldstate) >> 27)

        # 5 bits, 59 = 64 - log2(32)
        rot = oldstate >> 59

        return rotate_right32(xorshifted, rot)

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
class PcgXsl64LcgRng:
    """PCG generator, XSL RR 64/32 variant

    Same LCG as :class:`.PcgXsh64LcgRng`, but the output function xors the two halves
    of the state («xorshift low») before the random rotation.
    """

    SEED_SIZE = 16

    state: int = 0
    increment: int = 1

    @classmethod
    def from_seed(cls, seed):
        state, increment = read_u64_into(seed, 2)
        result = cls(state=state, increment=increment | 1)
        result.state = to_uint64(result.state * MULTIPLIER_64 + result.increment)
        return result

    @classmethod
    def from_entropy(cls):
        return cls.from_seed(seed_from_entropy(cls.SEED_SIZE))

    def next_u32(self) -> int:
        oldstate = self.state
        self.state = to_uint64(oldstate * MULTIPLIER_64 + self.increment)

        xsl = (oldstate >> 32) ^ to_uint32(oldstate)
        return rotate_right32(xsl, oldstate >> 59)

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
class PcgXsl128McgRng:
    """PCG generator, XSL RR 128/64 variant

    The underlying generator is a 128-bit multiplicative congruential generator, so
    there is no increment. Python integers are unbounded, so the 128-bit state is a
    plain `int` clipped with :func:`.to_uint128` after every multiplication.
    """

    SEED_SIZE = 16

    # 128-bit
    state: int = 0

    @classmethod
    def from_seed(cls, seed):
        """Create a generator from 16 bytes

        The first little-endian word is the high half of the state, the second one the
        low half."""
        high, low = read_u64_into(seed, 2)
        result = cls(state=(high << 64) | low)
        result.state = to_uint128(result.state * MULTIPLIER_128)
        return result

    @classmethod
    def from_entropy(cls):
        return cls.from_seed(seed_from_entropy(cls.SEED_SIZE))

    def next_u64(self) -> int:
        oldstate = self.state
        self.state = to_uint128(oldstate * MULTIPLIER_128)

        # 6 bits, 122 = 128 - log2(64)
        xsl = (oldstate >> 64) ^ to_uint64(oldstate)
        return rotate_right64(xsl, oldstate >> 122)

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
