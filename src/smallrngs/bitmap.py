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




def bitmap_bytes(rng, width: int, height: int) -> bytes:
    """Draw enough bytes from `rng` to cover a `width`×`height` grid of bits

    Each row starts on a byte boundary, as in a 1-bit-per-pixel raster."""
    row_size = (width + 7) // 8
    return rng.random_bytes(row_size * height)


def write_bitmap(rng, stream, width=256, height=256, format="PNG"):
    """Save `width`×`height` bits of output from `rng` as a black-and-white image

    Every bit becomes one pixel (1 = white), the most significant bit of each byte
    being the leftmost one. Visual patterns in the image are a quick hint of a poor
    generator."""
    from PIL import Image

    data = bitmap_bytes(rng, width, height)
    img = Image.frombytes("1", (width, height), data)
    img.save(stream, format=format)
