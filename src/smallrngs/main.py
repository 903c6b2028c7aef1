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
import sys
from typing import Dict

from smallrngs.msws import MswsRng
from smallrngs.mwp import MwpRng
from smallrngs.pcg import PcgXsh64LcgRng, PcgXsl64LcgRng, PcgXsl128McgRng
from smallrngs.rngcore import RngCore, SeedError
from smallrngs.xsm import Xsm32Rng, Xsm64Rng
from smallrngs.bitmap import write_bitmap

import click

RNGS: Dict[str, type] = {
    "msws": MswsRng,
    "mwp": MwpRng,
    "pcg_xsh_64_lcg": PcgXsh64LcgRng,
    "pcg_xsl_64_lcg": PcgXsl64LcgRng,
    "pcg_xsl_128_mcg": PcgXsl128McgRng,
    "xsm32": Xsm32Rng,
    "xsm64": Xsm64Rng,
}

DEFAULT_BUFFER_SIZE = 32


def create_rng(name: str, seed_hex=None):
    """Build the generator called `name`

    If `seed_hex` is ``None``, the generator is seeded from the operating system;
    otherwise the string is decoded as hexadecimal and passed to ``from_seed``. Raise
    :class:`.SeedError` if the seed is not acceptable."""
    rng_class = RNGS[name]
    if seed_hex is None:
        return rng_class.from_entropy()

    try:
        seed = bytes.fromhex(seed_hex)
    except ValueError:
        raise SeedError(f"invalid hexadecimal seed «{seed_hex}»")

    return rng_class.from_seed(seed)


def _create_rng_or_exit(name, seed_hex):
    try:
        return create_rng(name, seed_hex)
    except SeedError as e:
        print(f"error, cannot seed «{name}»: {e.message}", file=sys.stderr)
        sys.exit(1)


def cat_rng(rng: RngCore, stream, num_of_bytes=None, buffer_size=DEFAULT_BUFFER_SIZE):
    """Write the output of `rng` to a binary stream

    If `num_of_bytes` is ``None``, the loop never ends."""
    buf = bytearray(buffer_size)
    written = 0
    while num_of_bytes is None or written < num_of_bytes:
        if num_of_bytes is not None and num_of_bytes - written < buffer_size:
            buf = bytearray(num_of_bytes - written)

        rng.fill_bytes(buf)
        stream.write(buf)
        written += len(buf)

    stream.flush()


@click.group()
def cli():
    """Concatenate the output of a random number generator

    The stream can be fed to a test suite, e.g. `cat-rng cat xsm64 | RNG_test stdin`."""
    pass


@click.command("list")
def list_rngs():
    """Print the names of the available generators"""
    for name in sorted(RNGS):
        print(name)


@click.command("cat")
@click.option(
    "--seed",
    type=str,
    default=None,
    help="Seed as a hexadecimal string (default: random seed from the operating system)",
)
@click.option(
    "--bytes",
    "num_of_bytes",
    type=click.IntRange(min=0),
    default=None,
    help="Number of bytes to write (default: write forever)",
)
@click.option(
    "--buffer-size",
    type=click.IntRange(min=1),
    default=DEFAULT_BUFFER_SIZE,
    help="Number of bytes generated at each write",
)
@click.argument("name", type=click.Choice(sorted(RNGS)))
def cat(seed, num_of_bytes, buffer_size, name):
    """Write the output of generator NAME to the standard output"""
    rng = _create_rng_or_exit(name, seed)
    stream = click.get_binary_stream("stdout")

    try:
        cat_rng(rng, stream, num_of_bytes=num_of_bytes, buffer_size=buffer_size)
    except BrokenPipeError:
        # The reader has had enough, which is how an endless stream normally ends.
        # Python flushes stdout at exit, so it must not point to the closed pipe any more
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


@click.command("bitmap")
@click.option("--width", type=click.IntRange(min=1), default=256, help="Width of the image")
@click.option("--height", type=click.IntRange(min=1), default=256, help="Height of the image")
@click.option(
    "--seed",
    type=str,
    default=None,
    help="Seed as a hexadecimal string (default: random seed from the operating system)",
)
@click.argument("name", type=click.Choice(sorted(RNGS)))
@click.argument("output_png_file_name", type=str)
def bitmap(width, height, seed, name, output_png_file_name):
    """Save the output of generator NAME as a black-and-white PNG image"""
    rng = _create_rng_or_exit(name, seed)

    with open(output_png_file_name, "wb") as outf:
        write_bitmap(rng, outf, width=width, height=height)

    print(f"File {output_png_file_name} has been written to disk.", file=sys.stderr)


cli.add_command(list_rngs)
cli.add_command(cat)
cli.add_command(bitmap)

if __name__ == "__main__":
    cli()
