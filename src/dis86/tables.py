"""
8086 Field Tables
=================

Static lookup tables for the fields of an 8086 MOV encoding. Every table
is a tuple indexed by a 3-bit code, so the tables cannot be modified at
runtime and can be shared freely between disassembler instances.

Instruction Fields
------------------
The register/memory MOV form is two bytes followed by an optional
displacement:

    100010dw  mod reg r/m  [disp-lo]  [disp-hi]

- **d**: direction; 1 means REG is the destination
- **w**: width; 1 means 16-bit operands
- **mod**: addressing mode (see Mod below)
- **reg**: register selector
- **r/m**: register selector (mod == 11) or memory base selector

The immediate-to-register form packs width and register into the opcode:

    1011wreg  data-lo  [data-hi]

Reference
---------
- Intel 8086 Family User's Manual, Table 4-12 (Instruction Encoding)
"""

from enum import IntEnum
from typing import Optional, Tuple


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class Mod(IntEnum):
    """
    Values of the 2-bit mod field.

    The mod field selects between register-direct operands and memory
    operands with no, 8-bit or 16-bit displacement.
    """
    MEMORY = 0b00           # [base], or direct address when r/m == 110
    MEMORY_DISP8 = 0b01     # [base + disp8], disp8 sign-extended
    MEMORY_DISP16 = 0b10    # [base + disp16]
    REGISTER = 0b11         # r/m names a register

    def __str__(self) -> str:
        """Return human-readable name for trace messages."""
        return {
            Mod.MEMORY: "memory",
            Mod.MEMORY_DISP8: "memory+disp8",
            Mod.MEMORY_DISP16: "memory+disp16",
            Mod.REGISTER: "register",
        }[self]


# Number of displacement bytes that follow the mod-reg-r/m byte
DISPLACEMENT_SIZE = {
    Mod.MEMORY: 0,
    Mod.MEMORY_DISP8: 1,
    Mod.MEMORY_DISP16: 2,
    Mod.REGISTER: 0,
}

# r/m value that means "16-bit direct address" when mod == 00
RM_DIRECT_ADDRESS = 0b110


# =============================================================================
# Register Tables
# =============================================================================

REG8_NAMES: Tuple[str, ...] = ("al", "cl", "dl", "bl", "ah", "ch", "dh", "bh")
REG16_NAMES: Tuple[str, ...] = ("ax", "cx", "dx", "bx", "sp", "bp", "si", "di")

# Indexed by the w bit
REGISTER_NAMES: Tuple[Tuple[str, ...], Tuple[str, ...]] = (REG8_NAMES, REG16_NAMES)


# =============================================================================
# Effective Address Table
# =============================================================================
# Base/index registers for each r/m value when mod != 11. Entry 110 is only
# used with mod 01/10; with mod 00 it is the direct-address special case.
# =============================================================================

EFFECTIVE_ADDRESS_BASES: Tuple[Tuple[str, Optional[str]], ...] = (
    ("bx", "si"),
    ("bx", "di"),
    ("bp", "si"),
    ("bp", "di"),
    ("si", None),
    ("di", None),
    ("bp", None),
    ("bx", None),
)


# =============================================================================
# Lookup Functions
# =============================================================================

def register_name(code: int, wide: bool) -> str:
    """
    Get the register name for a 3-bit selector.

    Args:
        code: Register selector (0-7)
        wide: True for 16-bit registers, False for 8-bit

    Returns:
        Lowercase register mnemonic (e.g., "ax", "bh")
    """
    return REGISTER_NAMES[int(wide)][code & 0b111]


def base_expression(rm: int) -> str:
    """
    Get the base expression text for an r/m memory selector.

    Example:
        >>> base_expression(0b000)
        'bx + si'
        >>> base_expression(0b111)
        'bx'
    """
    base, index = EFFECTIVE_ADDRESS_BASES[rm & 0b111]
    if index is None:
        return base
    return f"{base} + {index}"
