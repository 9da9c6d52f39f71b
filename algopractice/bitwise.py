"""Shift and exclusive-or helpers."""


def left_shift(value: int, bits: int) -> int:
    """Shift ``value`` left by ``bits``: a multiplication by ``2 ** bits``."""
    return value << bits


def right_shift(value: int, bits: int) -> int:
    """Shift ``value`` right by ``bits``: a floor division by ``2 ** bits``."""
    return value >> bits


def xor(a: int, b: int) -> int:
    """Bitwise exclusive or: zero exactly where the bits agree."""
    return a ^ b