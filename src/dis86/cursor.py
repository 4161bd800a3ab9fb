"""
Byte Cursor
===========

Sequential access to the byte buffer being disassembled. The cursor owns
the buffer and a read position; decoders consume bytes through it and never
index the buffer directly, so the position always marks the first byte not
yet decoded.

Invariant: 0 <= position <= len(buffer). The buffer is stored as `bytes`
and is never modified.

Usage:
    cursor = ByteCursor(b"\\x89\\xd9")
    opcode = cursor.read()        # 0x89
    modrm = cursor.peek()         # 0xD9, position unchanged
    cursor.unread(1)              # back to the opcode
"""

from typing import Union

from dis86.errors import EndOfBuffer, InvalidRewind


class ByteCursor:
    """
    Read position over an immutable byte buffer.

    Attributes:
        _buffer: The bytes being decoded
        _position: Index of the next byte to read
    """

    def __init__(self, buffer: Union[bytes, bytearray, memoryview]):
        self._buffer = bytes(buffer)
        self._position = 0

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        """Number of bytes left to read."""
        return len(self._buffer) - self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._buffer)

    def read(self) -> int:
        """
        Return the byte at the current position and advance by one.

        Raises:
            EndOfBuffer: If the position is at or past the end of the buffer
        """
        value = self.peek()
        self._position += 1
        return value

    def peek(self) -> int:
        """
        Return the byte at the current position without advancing.

        Raises:
            EndOfBuffer: If the position is at or past the end of the buffer
        """
        if self._position >= len(self._buffer):
            raise EndOfBuffer(self._position, len(self._buffer))
        return self._buffer[self._position]

    def unread(self, count: int) -> None:
        """
        Move the position back by `count` bytes.

        Raises:
            InvalidRewind: If the move would go before the start of the buffer
        """
        if count < 0 or self._position - count < 0:
            raise InvalidRewind(self._position, count)
        self._position -= count

    def read_int(self, size: int, signed: bool = True) -> int:
        """
        Read `size` bytes as a little-endian integer.

        Bytes are consumed one at a time through read(), so a short buffer
        raises EndOfBuffer with the position of the first missing byte.
        The bytes read before the failure stay consumed.

        Args:
            size: Number of bytes (1 or 2 for 8086 operands)
            signed: Interpret the value as two's complement

        Returns:
            The decoded integer
        """
        raw = bytes(self.read() for _ in range(size))
        return int.from_bytes(raw, byteorder="little", signed=signed)

    def slice(self, start: int, end: int) -> bytes:
        """Return buffer[start:end] (used for raw-byte listings)."""
        return self._buffer[start:end]

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._position}, length={len(self._buffer)})"
