"""
dis86 - 16-bit x86 MOV Disassembler
===================================

This package decodes raw 16-bit x86 machine code into NASM-syntax
assembly. It covers the MOV family: register/memory to/from register with
every addressing mode and displacement width, and immediate to register.

Main Components
---------------
- **cursor**: byte cursor with read, peek and unread
- **tables**: register and effective-address lookup tables
- **addressing**: mod/r-m resolution into register or memory operands
- **decoders**: one decoder per MOV encoding shape
- **disassembler**: opcode dispatch loop and listing output

Quick Start
-----------
Disassemble bytes:
    >>> from dis86 import disassemble
    >>> disassemble(bytes([0x89, 0xD9, 0xB0, 0xFF]))
    ['bits 16', 'mov cx, bx', 'mov al, -1']

Get structured instructions:
    >>> from dis86 import Disassembler
    >>> instr = Disassembler().decode(bytes([0x8B, 0x41, 0x05]))[0]
    >>> str(instr.source)
    '[bx + di + 5]'

Or use the command-line tool:
    $ dis86 program.bin

Version History
---------------
1.0.0 - Initial release with the MOV family
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from dis86.config import ListingConfig
from dis86.cursor import ByteCursor
from dis86.decoders import DecodedFields, Instruction
from dis86.disassembler import OPCODE_PATTERNS, Disassembler, OpcodePattern, disassemble
from dis86.errors import (
    Dis86Error,
    CursorError,
    EndOfBuffer,
    InvalidRewind,
    DecodeError,
    UnknownOpcode,
    TruncatedInstruction,
)
from dis86.operands import Immediate, MemoryExpression, Operand, Register

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Disassembler
    "Disassembler",
    "disassemble",
    "OpcodePattern",
    "OPCODE_PATTERNS",
    "ListingConfig",
    "ByteCursor",
    # Decoded data
    "DecodedFields",
    "Instruction",
    "Register",
    "MemoryExpression",
    "Immediate",
    "Operand",
    # Exception hierarchy
    "Dis86Error",
    "CursorError",
    "EndOfBuffer",
    "InvalidRewind",
    "DecodeError",
    "UnknownOpcode",
    "TruncatedInstruction",
]
