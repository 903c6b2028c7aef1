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



import os
import struct
from typing import List, Protocol


# Python has no fixed-width integers, so every addition, subtraction and
# multiplication in the generators is followed by one of these clipping
# routines. The generators rely on the wraparound.


def to_uint32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits"""
    return x & 0xFFFFFFFF


def to_uint64(x: int) -> int:
    """Clip an integer so that it occupies 64 bits"""
    return x & 0xFFFFFFFFFFFFFFFF


def to_uint128(x: int) -> int:
    """Clip an integer so that it occupies 128 bits"""
    return x & 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF


def rotate_left32(x: int, n: int) -> int:
    n &= 31
    return to_uint32((x << n) | (x >> ((32 - n) & 31)))


def rotate_right32(x: int, n: int) -> int:
    n &= 31
    return to_uint32((x >> n) | (x << ((-n) & 31)))


def rotate_left64(x: int, n: int) -> int:
    n &= 63
    return to_uint64((x << n) | (x >> ((64 - n) & 63)))


def rotate_right64(x: int, n: int) -> int:
    n &= 63
    return to_uint64((x >> n) | (x << ((-n) & 63)))


class SeedError(Exception):
    """A seed that cannot be turned into a generator state"""

    def __init__(self, error_message):
        super().__init__(error_message)
        self.message = error_message


class InvalidSeedLength(SeedError):
    """The seed does not have the number of bytes the generator expects"""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"invalid seed length: expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidSeedValue(SeedError):
    """The seed decodes to a state the generator cannot work with"""


class RngCore(Protocol):
    """The operations every generator in this package provides

    The generators do not derive from this class: it only documents what the
    command-line tool and :func:`.fill_bytes_via_next` rely upon.
    """

    SEED_SIZE: int

    def next_u32(self) -> int:
        ...

    def next_u64(self) -> int:
        ...

    def fill_bytes(self, dest: bytearray) -> None:
        ...

    def random_bytes(self, num_of_bytes: int) -> bytes:
        ...


def check_seed_length(seed, expected: int):
    if len(seed) != expected:
        raise InvalidSeedLength(expected=expected, actual=len(seed))


# "<": little endian
# "I": unsigned 32-bit integer
# "Q": unsigned 64-bit integer


def read_u32_into(seed, count: int) -> List[int]:
    """Decode `count` little-endian 32-bit words from the seed"""
    check_seed_length(seed, 4 * count)
    return list(struct.unpack(f"<{count}I", bytes(seed)))


def read_u64_into(seed, count: int) -> List[int]:
    """Decode `count` little-endian 64-bit words from the seed"""
    check_seed_length(seed, 8 * count)
    return list(struct.unpack(f"<{count}Q", bytes(seed)))


def seed_from_entropy(size: int) -> bytes:
    """Return `size` bytes taken from the operating system's random source"""
    return os.urandom(size)


def next_u64_via_u32(rng: RngCore) -> int:
    """Build a 64-bit word out of two 32-bit words, the first one being the low half"""
    low = rng.next_u32()
    high = rng.next_u32()
    return (high << 32) | low


def fill_bytes_via_next(rng: RngCore, dest: bytearray):
    """Fill `dest` with the output of `rng`, little-endian

    Whole 64-bit words are written as long as at least 8 bytes are left. A tail of
    5–7 bytes is taken from the leading bytes of one more 64-bit word, a tail of
    1–4 bytes from the leading bytes of a 32-bit word. The unused bytes of the last
    word are thrown away.
    """
    length = len(dest)
    pos = 0
    while length - pos >= 8:
        dest[pos:pos + 8] = struct.pack("<Q", rng.next_u64())
        pos += 8

    left = length - pos
    if left > 4:
        dest[pos:] = struct.pack("<Q", rng.next_u64())[:left]
    elif left > 0:
        dest[pos:] = struct.pack("<I", rng.next_u32())[:left]
