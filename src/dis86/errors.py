"""
dis86 Error Hierarchy
=====================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from Dis86Error, allowing callers to catch all
disassembler errors with a single except clause if desired.

Exception Hierarchy
-------------------
Dis86Error (base)
├── CursorError (byte cursor misuse)
│   ├── EndOfBuffer - read past the last byte
│   └── InvalidRewind - unread past the first byte
└── DecodeError (instruction decoding)
    ├── UnknownOpcode - byte matches no known opcode pattern
    └── TruncatedInstruction - buffer ends in the middle of an instruction

Design Philosophy
-----------------
EndOfBuffer is the normal way the dispatcher learns that the input is
exhausted. It only becomes a failure when it happens after an opcode byte
has been matched, in which case the dispatcher re-raises it as
TruncatedInstruction.

Decode errors carry the offset of the failing opcode and the lines that
were produced before the failure, so a caller can still print the part of
the program that did decode:

    offset 0x0004: error: unknown opcode 0x0F (0b00001111)
    hint: only the MOV family (100010dw, 1011wreg) is decoded
"""

from typing import List, Optional, Sequence


# =============================================================================
# Base Exception Class
# =============================================================================

class Dis86Error(Exception):
    """
    Base exception for all dis86 errors.

    Catch this to handle every failure the core can raise:

        try:
            lines = disassemble(data)
        except Dis86Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Cursor Exceptions
# =============================================================================

class CursorError(Dis86Error):
    """Base exception for byte cursor errors."""
    pass


class EndOfBuffer(CursorError):
    """
    Read attempted at or past the end of the buffer.

    Attributes:
        position: Cursor position at the time of the read
        length: Length of the underlying buffer
    """

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(f"end of buffer at position {position} (length {length})")


class InvalidRewind(CursorError):
    """
    Unread moved the cursor before the start of the buffer.

    Attributes:
        position: Cursor position at the time of the unread
        count: Number of bytes the caller asked to step back
    """

    def __init__(self, position: int, count: int):
        self.position = position
        self.count = count
        super().__init__(f"cannot unread {count} bytes from position {position}")


# =============================================================================
# Decode Exceptions
# =============================================================================

class DecodeError(Dis86Error):
    """
    Base exception for instruction decoding errors.

    Attributes:
        message: The error description
        offset: Buffer offset of the opcode byte that failed (optional)
        hint: A suggestion for the reader (optional)
        lines: Output lines produced before the failure
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        hint: Optional[str] = None,
        lines: Optional[Sequence[str]] = None,
    ):
        self.message = message
        self.offset = offset
        self.hint = hint
        self.lines: List[str] = list(lines or [])
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with offset and hint.

        Example output:
            offset 0x0002: error: truncated instruction after opcode 0xB8
            hint: 1 more byte(s) needed
        """
        parts = []

        if self.offset is not None:
            parts.append(f"offset 0x{self.offset:04X}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnknownOpcode(DecodeError):
    """
    Byte does not match any known opcode pattern.

    The run stops here: the length of an unknown instruction cannot be
    known, so every byte after it would be decoded from a guessed boundary.
    """

    def __init__(
        self,
        opcode: int,
        offset: Optional[int] = None,
        lines: Optional[Sequence[str]] = None,
    ):
        self.opcode = opcode
        super().__init__(
            f"unknown opcode 0x{opcode:02X} (0b{opcode:08b})",
            offset=offset,
            hint="only the MOV family (100010dw, 1011wreg) is decoded",
            lines=lines,
        )


class TruncatedInstruction(DecodeError):
    """
    Buffer ended before the instruction started by `opcode` was complete.

    Attributes:
        opcode: The opcode byte that began the instruction
        available: Bytes of the instruction that were present (opcode included)
    """

    def __init__(
        self,
        opcode: int,
        offset: Optional[int] = None,
        available: int = 1,
        lines: Optional[Sequence[str]] = None,
    ):
        self.opcode = opcode
        self.available = available
        super().__init__(
            f"truncated instruction after opcode 0x{opcode:02X} "
            f"({available} byte(s) available)",
            offset=offset,
            lines=lines,
        )
