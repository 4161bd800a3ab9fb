"""
8086 MOV Disassembler
=====================

Disassembles 16-bit x86 machine code into NASM-syntax assembly lines.

The dispatcher reads one opcode byte at a time and tests it against an
ordered table of (mask, fixed) patterns. The first pattern with
`opcode & mask == fixed` wins: its field extractor pulls the bits embedded
in the opcode into a DecodedFields value, and its decoder consumes the rest
of the instruction from the cursor. New encodings are added by appending
to OPCODE_PATTERNS.

Termination:
    - Clean end of input between instructions ends the run.
    - An opcode that matches no pattern raises UnknownOpcode.
    - Running out of bytes inside an instruction raises TruncatedInstruction.

Both errors carry the lines decoded so far in `error.lines`.

Usage:
    disasm = Disassembler()

    # Listing lines, directive first
    lines = disasm.disassemble(data)

    # Structured instructions
    for instr in disasm.decode(data):
        print(f"{instr.offset:04X}: {instr}")

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from dis86.config import ListingConfig
from dis86.cursor import ByteCursor
from dis86.decoders import (
    DecodedFields,
    Decoder,
    Instruction,
    decode_immediate_to_register,
    decode_register_memory,
)
from dis86.errors import EndOfBuffer, TruncatedInstruction, UnknownOpcode

logger = logging.getLogger(__name__)


# =============================================================================
# Opcode Patterns
# =============================================================================

@dataclass(frozen=True)
class OpcodePattern:
    """
    One entry of the dispatch table.

    Attributes:
        mask: Bits of the opcode that identify the encoding
        fixed: Required value of those bits
        extract: Builds DecodedFields from the bits embedded in the opcode
        handler: Decoder for the rest of the instruction
        name: Short description for trace messages
    """
    mask: int
    fixed: int
    extract: Callable[[int], DecodedFields]
    handler: Decoder
    name: str

    def matches(self, opcode: int) -> bool:
        return opcode & self.mask == self.fixed


OPCODE_PATTERNS: Tuple[OpcodePattern, ...] = (
    OpcodePattern(
        mask=0b11111100,
        fixed=0b10001000,
        extract=DecodedFields.from_register_memory_opcode,
        handler=decode_register_memory,
        name="mov r/m, reg",
    ),
    OpcodePattern(
        mask=0b11110000,
        fixed=0b10110000,
        extract=DecodedFields.from_immediate_opcode,
        handler=decode_immediate_to_register,
        name="mov reg, imm",
    ),
)


def match_opcode(opcode: int) -> Optional[OpcodePattern]:
    """Return the first pattern matching `opcode`, or None."""
    for pattern in OPCODE_PATTERNS:
        if pattern.matches(opcode):
            return pattern
    return None


# =============================================================================
# Disassembler
# =============================================================================

class Disassembler:
    """
    Disassembler for 16-bit x86 MOV instructions.

    The instance only holds listing configuration. Every call builds its
    own ByteCursor, so one instance can be reused across buffers.

    Attributes:
        config: Listing options (directive, raw bytes, header)
    """

    def __init__(self, config: Optional[ListingConfig] = None):
        self.config = config or ListingConfig()

    def decode(self, data: bytes, count: Optional[int] = None) -> List[Instruction]:
        """
        Decode instructions from a byte buffer.

        Args:
            data: Raw machine code
            count: Maximum number of instructions to decode (None = all)

        Returns:
            Instructions in program order

        Raises:
            UnknownOpcode: On a byte that matches no opcode pattern
            TruncatedInstruction: If the buffer ends mid-instruction
        """
        cursor = ByteCursor(data)
        result: List[Instruction] = []

        while count is None or len(result) < count:
            offset = cursor.position
            try:
                opcode = cursor.read()
            except EndOfBuffer:
                break

            pattern = match_opcode(opcode)
            if pattern is None:
                logger.warning(f"unknown opcode 0x{opcode:02X} at offset 0x{offset:04X}")
                raise UnknownOpcode(opcode, offset=offset, lines=self._format(result))

            try:
                instr = pattern.handler(pattern.extract(opcode), cursor)
            except EndOfBuffer as e:
                available = cursor.position - offset
                logger.warning(
                    f"truncated '{pattern.name}' at offset 0x{offset:04X} "
                    f"({available} byte(s) available)"
                )
                raise TruncatedInstruction(
                    opcode, offset=offset, available=available, lines=self._format(result)
                ) from e

            instr = replace(instr, offset=offset, raw_bytes=cursor.slice(offset, cursor.position))
            logger.debug(f"decoded {instr.to_listing()}")
            result.append(instr)

        logger.debug(f"decoded {len(result)} instruction(s) from {len(data)} byte(s)")
        return result

    def disassemble(self, data: bytes, count: Optional[int] = None) -> List[str]:
        """
        Disassemble a byte buffer into listing lines.

        The first line is the width directive ("bits 16" by default),
        followed by one line per instruction. An empty buffer yields only
        the directive.

        Raises:
            DecodeError: With `lines` holding the output produced so far
        """
        return self._format(self.decode(data, count))

    def _format(self, instructions: List[Instruction]) -> List[str]:
        lines = self.config.preamble()
        for instr in instructions:
            lines.append(instr.to_listing() if self.config.show_bytes else str(instr))
        return lines


def disassemble(data: bytes) -> List[str]:
    """
    Disassemble with default settings.

    Example:
        >>> disassemble(bytes([0x89, 0xD9]))
        ['bits 16', 'mov cx, bx']
    """
    return Disassembler().disassemble(data)


__all__ = [
    "OpcodePattern",
    "OPCODE_PATTERNS",
    "match_opcode",
    "Disassembler",
    "disassemble",
]
