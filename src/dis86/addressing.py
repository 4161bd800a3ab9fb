"""
Addressing Resolver
===================

Turns the mod and r/m fields of a mod-reg-r/m byte into an operand,
consuming the displacement bytes that the mode calls for.

    mod  r/m   bytes read   result
    ---  ---   ----------   ------------------------------
    11   any   0            register r/m at the declared width
    00   110   2            [address], unsigned little-endian
    00   else  0            [base]
    01   any   1            [base +/- disp8], sign-extended
    10   any   2            [base +/- disp16], signed

A zero displacement is dropped from the printed form, so `mod=10` with
displacement bytes 00 00 prints the same as `mod=00`.
"""

import logging
from typing import Union

from dis86.cursor import ByteCursor
from dis86.operands import MemoryExpression, Register
from dis86.tables import (
    DISPLACEMENT_SIZE,
    RM_DIRECT_ADDRESS,
    Mod,
    base_expression,
    register_name,
)

logger = logging.getLogger(__name__)


def resolve(
    mod: int,
    rm: int,
    wide: bool,
    cursor: ByteCursor,
) -> Union[Register, MemoryExpression]:
    """
    Resolve the r/m side of an instruction.

    Args:
        mod: 2-bit addressing mode
        rm: 3-bit register/memory selector
        wide: Operand width (only used for register-direct mode)
        cursor: Positioned on the first displacement byte, if any

    Returns:
        Register for mod == 11, MemoryExpression otherwise

    Raises:
        EndOfBuffer: If the displacement bytes are missing
    """
    mode = Mod(mod & 0b11)

    if mode == Mod.REGISTER:
        return Register(register_name(rm, wide))

    if mode == Mod.MEMORY and rm == RM_DIRECT_ADDRESS:
        address = cursor.read_int(2, signed=False)
        logger.debug(f"direct address {address:#06x}")
        return MemoryExpression(address=address)

    displacement = 0
    size = DISPLACEMENT_SIZE[mode]
    if size:
        displacement = cursor.read_int(size, signed=True)

    return MemoryExpression(base=base_expression(rm), offset=displacement)
