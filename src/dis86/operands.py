"""
Instruction Operands
====================

The three kinds of operand a MOV can carry. Each operand is an immutable
value that renders itself in NASM syntax through `__str__`.

    Register("cx")                        -> cx
    MemoryExpression("bp + si", 4)        -> [bp + si + 4]
    MemoryExpression("bx", -3)            -> [bx - 3]
    MemoryExpression(address=4660)        -> [4660]
    Immediate(-1)                         -> -1
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Register:
    """A register operand, named by its lowercase mnemonic."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MemoryExpression:
    """
    A bracketed memory operand.

    Either `base` is set (optionally with a signed `offset`), or `address`
    is set for a direct 16-bit address with no base registers.

    Attributes:
        base: Base expression text such as "bx + si" (None for direct)
        offset: Signed displacement; zero is not printed
        address: Absolute address for the direct-address form
    """
    base: Optional[str] = None
    offset: int = 0
    address: Optional[int] = None

    @property
    def is_direct(self) -> bool:
        return self.base is None

    def __str__(self) -> str:
        if self.base is None:
            return f"[{self.address or 0}]"
        if self.offset == 0:
            return f"[{self.base}]"
        sign = "-" if self.offset < 0 else "+"
        return f"[{self.base} {sign} {abs(self.offset)}]"


@dataclass(frozen=True)
class Immediate:
    """A signed immediate value, printed in decimal."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


Operand = Union[Register, MemoryExpression, Immediate]
