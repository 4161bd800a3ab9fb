"""
Unit Tests for Field Tables and the Addressing Resolver
=======================================================

Test coverage includes:
- Register and effective-address lookup tables
- Register-direct mode (mod == 11)
- Memory modes with no, 8-bit and 16-bit displacement
- The mod == 00, r/m == 110 direct-address case
- Zero-displacement elision and negative displacements
- Operand rendering
"""

import pytest

from dis86.addressing import resolve
from dis86.cursor import ByteCursor
from dis86.errors import EndOfBuffer
from dis86.operands import Immediate, MemoryExpression, Register
from dis86.tables import (
    DISPLACEMENT_SIZE,
    EFFECTIVE_ADDRESS_BASES,
    Mod,
    REG8_NAMES,
    REG16_NAMES,
    base_expression,
    register_name,
)


# =============================================================================
# Field Table Tests
# =============================================================================

class TestFieldTables:
    """Tests for the static lookup tables."""

    def test_register_names_16bit(self):
        """Test the 16-bit register table order."""
        assert [register_name(i, True) for i in range(8)] == [
            "ax", "cx", "dx", "bx", "sp", "bp", "si", "di",
        ]

    def test_register_names_8bit(self):
        """Test the 8-bit register table order."""
        assert [register_name(i, False) for i in range(8)] == [
            "al", "cl", "dl", "bl", "ah", "ch", "dh", "bh",
        ]

    def test_tables_are_immutable(self):
        """Test tables are tuples and cannot be modified."""
        assert isinstance(REG8_NAMES, tuple)
        assert isinstance(REG16_NAMES, tuple)
        assert isinstance(EFFECTIVE_ADDRESS_BASES, tuple)
        with pytest.raises(TypeError):
            REG16_NAMES[0] = "xx"

    def test_base_expressions(self):
        """
        Test base expressions for every r/m value.

        Two-register bases are written with spaces ("bx + si", not
        "bx+si"), the NASM listing form, so a displacement joins them as
        "[bx + si + 4]".
        """
        assert [base_expression(rm) for rm in range(8)] == [
            "bx + si", "bx + di", "bp + si", "bp + di", "si", "di", "bp", "bx",
        ]

    def test_displacement_sizes(self):
        """Test displacement byte counts per mod."""
        assert DISPLACEMENT_SIZE[Mod.MEMORY] == 0
        assert DISPLACEMENT_SIZE[Mod.MEMORY_DISP8] == 1
        assert DISPLACEMENT_SIZE[Mod.MEMORY_DISP16] == 2
        assert DISPLACEMENT_SIZE[Mod.REGISTER] == 0

    def test_mod_str(self):
        """Test Mod has readable names for trace output."""
        assert str(Mod.REGISTER) == "register"
        assert str(Mod.MEMORY_DISP8) == "memory+disp8"


# =============================================================================
# Resolver Tests
# =============================================================================

class TestResolve:
    """Tests for resolve()."""

    def test_register_mode_wide(self):
        """Test mod 11 returns the 16-bit register and consumes nothing."""
        cursor = ByteCursor(bytes([0xAA]))
        operand = resolve(0b11, 0b001, True, cursor)

        assert operand == Register("cx")
        assert cursor.position == 0

    def test_register_mode_byte(self):
        """Test mod 11 with w clear returns the 8-bit register."""
        operand = resolve(0b11, 0b111, False, ByteCursor(b""))
        assert str(operand) == "bh"

    def test_memory_no_displacement(self):
        """Test mod 00 returns the bare base expression."""
        cursor = ByteCursor(b"")
        operand = resolve(0b00, 0b011, True, cursor)

        assert str(operand) == "[bp + di]"
        assert cursor.position == 0

    def test_direct_address(self):
        """Test mod 00, r/m 110 reads a little-endian absolute address."""
        cursor = ByteCursor(bytes([0x34, 0x12]))
        operand = resolve(0b00, 0b110, True, cursor)

        assert str(operand) == "[4660]"
        assert operand.is_direct
        assert cursor.position == 2

    def test_direct_address_high_bit_unsigned(self):
        """Test direct addresses are unsigned."""
        operand = resolve(0b00, 0b110, False, ByteCursor(bytes([0x00, 0x80])))
        assert str(operand) == "[32768]"

    def test_disp8(self):
        """Test mod 01 reads one displacement byte."""
        cursor = ByteCursor(bytes([0x04]))
        operand = resolve(0b01, 0b000, False, cursor)

        assert str(operand) == "[bx + si + 4]"
        assert cursor.position == 1

    def test_disp8_sign_extended(self):
        """
        Test an 8-bit displacement with the high bit set is negative.

        The sign is folded into the operator: "[bx + si - 3]" rather than
        "[bx + si + -3]". Both reassemble to the same bytes.
        """
        operand = resolve(0b01, 0b000, True, ByteCursor(bytes([0xFD])))
        assert operand == MemoryExpression(base="bx + si", offset=-3)
        assert str(operand) == "[bx + si - 3]"

    def test_disp8_bp_zero(self):
        """Test mod 01, r/m 110 is [bp], not a direct address."""
        cursor = ByteCursor(bytes([0x00]))
        operand = resolve(0b01, 0b110, True, cursor)

        assert str(operand) == "[bp]"
        assert cursor.position == 1

    def test_disp16(self):
        """Test mod 10 reads a little-endian word displacement."""
        cursor = ByteCursor(bytes([0x87, 0x13]))
        operand = resolve(0b10, 0b010, True, cursor)

        assert str(operand) == "[bp + si + 4999]"
        assert cursor.position == 2

    def test_disp16_negative(self):
        """Test a 16-bit displacement is signed."""
        operand = resolve(0b10, 0b100, True, ByteCursor(bytes([0x0C, 0xFF])))
        assert str(operand) == "[si - 244]"

    def test_disp16_zero_elided(self):
        """Test a zero word displacement is not printed."""
        operand = resolve(0b10, 0b111, True, ByteCursor(bytes([0x00, 0x00])))
        assert str(operand) == "[bx]"

    def test_missing_displacement(self):
        """Test a missing displacement byte raises EndOfBuffer."""
        with pytest.raises(EndOfBuffer):
            resolve(0b01, 0b001, True, ByteCursor(b""))

    def test_short_direct_address(self):
        """Test a direct address with one byte raises EndOfBuffer."""
        with pytest.raises(EndOfBuffer):
            resolve(0b00, 0b110, True, ByteCursor(bytes([0x34])))


# =============================================================================
# Operand Rendering Tests
# =============================================================================

class TestOperands:
    """Tests for operand __str__."""

    def test_register(self):
        assert str(Register("si")) == "si"

    def test_immediate(self):
        assert str(Immediate(-12)) == "-12"
        assert str(Immediate(3948)) == "3948"

    def test_memory_forms(self):
        """Test bracketed forms for base, offset and direct address."""
        assert str(MemoryExpression(base="di")) == "[di]"
        assert str(MemoryExpression(base="bp + di", offset=7)) == "[bp + di + 7]"
        assert str(MemoryExpression(address=0)) == "[0]"
