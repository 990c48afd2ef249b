"""Cyclic redundancy check over lists of bits by modulo-2 long division."""

from __future__ import annotations

from typing import Sequence


def _bits(values: Sequence[int], name: str) -> list[int]:
    bits = list(values)
    if not bits:
        raise ValueError(f"{name} must not be empty")
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"{name} must contain only 0 and 1")
    return bits


def _divide(dividend: list[int], generator: list[int], steps: int) -> list[int]:
    work = list(dividend)
    for i in range(steps):
        if work[i] >= generator[0]:
            for offset, bit in enumerate(generator):
                work[i + offset] ^= bit
    return work


def crc_remainder(frame: Sequence[int], generator: Sequence[int]) -> list[int]:
    """Return the check bits of ``frame`` for ``generator``: len(generator) - 1 bits."""
    data = _bits(frame, "frame")
    divisor = _bits(generator, "generator")
    width = len(divisor) - 1
    work = _divide(data + [0] * width, divisor, len(data))
    return work[len(data):]


def encode(frame: Sequence[int], generator: Sequence[int]) -> list[int]:
    """Return ``frame`` followed by its check bits."""
    return list(frame) + crc_remainder(frame, generator)


def check(received: Sequence[int], generator: Sequence[int]) -> bool:
    """Tell whether a received frame with check bits divides evenly by ``generator``."""
    data = _bits(received, "received frame")
    divisor = _bits(generator, "generator")
    width = len(divisor) - 1
    if len(data) <= width:
        raise ValueError("received frame is shorter than the check bits")
    work = _divide(data, divisor, len(data) - width)
    return not any(work[len(data) - width:])