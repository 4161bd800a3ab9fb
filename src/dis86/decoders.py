"""
MOV Instruction Decoders
========================

One decoder per MOV encoding shape. A decoder receives the fields that the
dispatcher already pulled out of the opcode byte, consumes exactly the bytes
its shape needs from the cursor, and returns an Instruction.

Encodings
---------
- **Register/Register**: 100010dw 11 reg r/m
- **Memory/Register**: 100010dw mod reg r/m [disp], mod in 00/01/10
- **Immediate-to-Register**: 1011wreg data [data-hi]

Operand order for the register/memory form follows the d bit: when d is
set the REG field is the destination, otherwise the r/m side is.

Immediates are signed at both widths, so `B0 FF` decodes as `mov al, -1`,
the same way an 8-bit displacement is sign-extended.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable

from dis86.addressing import resolve
from dis86.cursor import ByteCursor
from dis86.operands import Immediate, Operand, Register
from dis86.tables import Mod, register_name

logger = logging.getLogger(__name__)


# =============================================================================
# Bit Masks
# =============================================================================

D_MASK = 0b00000010
W_MASK = 0b00000001

IMM_W_MASK = 0b00001000
IMM_REG_MASK = 0b00000111

MOD_MASK = 0b11000000
REG_MASK = 0b00111000
RM_MASK = 0b00000111

MNEMONIC_MOV = "mov"


# =============================================================================
# Data Structures
# =============================================================================

@dataclass(frozen=True)
class DecodedFields:
    """
    The encoding fields of one instruction.

    Built by the dispatcher from the opcode byte, then completed by the
    decoder from the mod-reg-r/m byte where the shape has one.

    Attributes:
        d_flag: True when the REG field is the destination
        w_flag: True for 16-bit operands
        mod: 2-bit addressing mode
        reg: 3-bit register selector
        rm: 3-bit register/memory selector
    """
    d_flag: bool = False
    w_flag: bool = False
    mod: int = Mod.REGISTER
    reg: int = 0
    rm: int = 0

    @classmethod
    def from_register_memory_opcode(cls, opcode: int) -> "DecodedFields":
        """Extract d and w from a 100010dw opcode."""
        return cls(d_flag=bool(opcode & D_MASK), w_flag=bool(opcode & W_MASK))

    @classmethod
    def from_immediate_opcode(cls, opcode: int) -> "DecodedFields":
        """Extract w and reg from a 1011wreg opcode."""
        return cls(w_flag=bool(opcode & IMM_W_MASK), reg=opcode & IMM_REG_MASK)

    def with_modrm(self, modrm: int) -> "DecodedFields":
        """Return a copy completed with the fields of a mod-reg-r/m byte."""
        return replace(
            self,
            mod=(modrm & MOD_MASK) >> 6,
            reg=(modrm & REG_MASK) >> 3,
            rm=modrm & RM_MASK,
        )


@dataclass(frozen=True)
class Instruction:
    """
    A single decoded instruction.

    Attributes:
        mnemonic: The instruction mnemonic ("mov")
        destination: Destination operand
        source: Source operand
        offset: Buffer offset of the opcode byte
        raw_bytes: All bytes comprising this instruction
    """
    mnemonic: str
    destination: Operand
    source: Operand
    offset: int = 0
    raw_bytes: bytes = b""

    @property
    def size(self) -> int:
        return len(self.raw_bytes)

    def __str__(self) -> str:
        """Format as assembly line: MNEMONIC DEST, SRC"""
        return f"{self.mnemonic} {self.destination}, {self.source}"

    def to_listing(self) -> str:
        """Format with the offset and raw bytes as a trailing comment."""
        hex_bytes = " ".join(f"{b:02X}" for b in self.raw_bytes)
        return f"{str(self):<32}; {self.offset:04X}: {hex_bytes}"


Decoder = Callable[[DecodedFields, ByteCursor], Instruction]


# =============================================================================
# Decoders
# =============================================================================

def decode_register_memory(fields: DecodedFields, cursor: ByteCursor) -> Instruction:
    """
    Decode the 100010dw form.

    Reads the mod-reg-r/m byte and hands off to the register/register or
    memory/register decoder depending on mod.
    """
    fields = fields.with_modrm(cursor.read())
    logger.debug(
        f"mod={Mod(fields.mod)} reg={fields.reg:03b} rm={fields.rm:03b} "
        f"d={int(fields.d_flag)} w={int(fields.w_flag)}"
    )

    if fields.mod == Mod.REGISTER:
        return decode_register_register(fields, cursor)
    return decode_memory_register(fields, cursor)


def decode_register_register(fields: DecodedFields, cursor: ByteCursor) -> Instruction:
    """Both operands are registers; no further bytes are consumed."""
    reg = Register(register_name(fields.reg, fields.w_flag))
    rm = Register(register_name(fields.rm, fields.w_flag))
    return _ordered(fields, reg, rm)


def decode_memory_register(fields: DecodedFields, cursor: ByteCursor) -> Instruction:
    """One operand is memory; the resolver consumes the displacement."""
    reg = Register(register_name(fields.reg, fields.w_flag))
    memory = resolve(fields.mod, fields.rm, fields.w_flag, cursor)
    return _ordered(fields, reg, memory)


def decode_immediate_to_register(fields: DecodedFields, cursor: ByteCursor) -> Instruction:
    """
    Decode the 1011wreg form.

    Reads one data byte when w is clear and two little-endian bytes when it
    is set. The destination is the register named by the opcode itself.
    """
    size = 2 if fields.w_flag else 1
    value = cursor.read_int(size, signed=True)
    destination = Register(register_name(fields.reg, fields.w_flag))
    return Instruction(MNEMONIC_MOV, destination, Immediate(value))


def _ordered(fields: DecodedFields, reg: Operand, other: Operand) -> Instruction:
    if fields.d_flag:
        return Instruction(MNEMONIC_MOV, reg, other)
    return Instruction(MNEMONIC_MOV, other, reg)
