"""
dis86 - 16-bit x86 Disassembler Command-Line Interface
======================================================

This module implements the command-line interface for the MOV
disassembler. It reads a flat binary and prints NASM-syntax source that
reassembles to the same bytes.

Usage Examples
--------------
Disassemble to stdout:
    $ dis86 listing_0037_single_register_mov

Write to a file:
    $ dis86 program.bin -o program.asm

Show offsets and raw bytes:
    $ dis86 program.bin --bytes

Limit number of instructions:
    $ dis86 program.bin --count 20

Exit Status
-----------
0 on success; 1 when the argument is missing, the file cannot be read,
or decoding fails. On a decode failure the instructions decoded before
the failing byte are still written out.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from dis86 import __version__
from dis86.cli.errors import ExitCode, handle_cli_exception
from dis86.config import ListingConfig
from dis86.disassembler import Disassembler
from dis86.errors import DecodeError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def write_lines(lines: List[str], output: Optional[Path]) -> None:
    """Write listing lines to `output`, or to stdout when it is None."""
    text = "\n".join(lines) + "\n"
    if output:
        output.write_text(text, encoding="utf-8")
        logger.debug(f"Output written to: {output}")
    else:
        click.echo(text, nl=False)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-c", "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "--bytes",
    "show_bytes",
    is_flag=True,
    help="Append offset and raw bytes to each instruction as a comment",
)
@click.option(
    "--header/--no-header",
    default=False,
    help="Start the listing with a comment naming the input file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (decode trace on stderr)",
)
@click.version_option(version=__version__, prog_name="dis86")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    count: Optional[int],
    show_bytes: bool,
    header: bool,
    verbose: bool,
) -> None:
    """
    Disassemble 16-bit x86 MOV instructions.

    INPUT_FILE is the flat binary to disassemble.

    Examples:

        # Disassemble and reassemble with NASM
        dis86 code.bin -o code.asm && nasm code.asm

        # Show where each instruction came from
        dis86 code.bin --bytes
    """
    setup_logging(verbose)

    if input_file is None:
        click.echo("Usage: dis86 [OPTIONS] INPUT_FILE", err=True)
        click.echo("Error: missing INPUT_FILE argument", err=True)
        sys.exit(ExitCode.FAILURE)

    # Read input file
    try:
        size = input_file.stat().st_size
    except OSError as e:
        click.echo(f"Error getting file info for {input_file}: {e.strerror or e}", err=True)
        sys.exit(ExitCode.FAILURE)

    try:
        data = input_file.read_bytes()
    except OSError as e:
        click.echo(f"Error reading {input_file}: {e.strerror or e}", err=True)
        sys.exit(ExitCode.FAILURE)

    logger.debug(f"Input file: {input_file} ({size} bytes)")

    config = ListingConfig(
        show_bytes=show_bytes,
        header=f"{input_file.name} disassembly:" if header else None,
    )
    disasm = Disassembler(config)

    try:
        lines = disasm.disassemble(data, count=count)
    except DecodeError as e:
        # Keep what decoded before the failure, then report it
        try:
            write_lines(e.lines, output)
        except OSError as write_error:
            click.echo(f"Error writing {output}: {write_error.strerror or write_error}", err=True)
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")

    try:
        write_lines(lines, output)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    logger.debug(f"Instructions disassembled: {len(lines) - len(config.preamble())}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
