# src/bytesift/utils/__init__.py
"""
Utility modules for byte-level arithmetic.
"""
from .byte_arithmetic import (
    from_int,
    is_zero,
    saturating_subtract,
    shift_right,
    to_int,
    zeroed,
)

__all__ = [
    "from_int",
    "is_zero",
    "saturating_subtract",
    "shift_right",
    "to_int",
    "zeroed",
]
