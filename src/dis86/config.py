"""
dis86 - Listing Configuration
=============================

Settings that control how decoded instructions are turned into output
lines. The defaults produce the plain NASM-compatible listing:

    bits 16
    mov cx, bx
    mov ax, [bp + si + 4]

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from typing import Optional


# Width-context directive emitted before the first instruction
DEFAULT_DIRECTIVE = "bits 16"


@dataclass
class ListingConfig:
    """
    Configuration for listing output.

    Attributes:
        directive: Line emitted before the instructions (default: "bits 16")
        show_bytes: Append "; OFFSET: HEX BYTES" to each instruction line
        header: Optional comment placed above the directive, without the
                leading "; " (e.g., the input file name)
    """
    directive: str = DEFAULT_DIRECTIVE
    show_bytes: bool = False
    header: Optional[str] = None

    def preamble(self) -> list[str]:
        """Lines that precede the first instruction."""
        lines = []
        if self.header:
            lines.append(f"; {self.header}")
        lines.append(self.directive)
        return lines
