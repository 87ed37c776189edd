"""Field arithmetic and round operations for Poseidon over BN254, width 5."""

from __future__ import annotations

import string
from functools import lru_cache
from typing import Sequence

from .constants import (
    FIELD_BITS,
    FULL_ROUNDS,
    MODULUS,
    PARTIAL_ROUNDS,
    WIDTH,
    mds_raw,
    round_constants_raw,
)

__all__ = [
    "MODULUS",
    "WIDTH",
    "FULL_ROUNDS",
    "PARTIAL_ROUNDS",
    "hex_to_field",
    "sbox",
    "sbox_inv",
    "round_constants_count",
    "round_constants",
    "load_round_constants",
    "mds",
    "apply_round_constants",
    "apply_mds",
]

_FIELD_BYTES = 32
_WIDE_BYTES = 64
_FIELD_MASK = (1 << FIELD_BITS) - 1

# Little-endian 64-bit limbs of the inverse of 5 modulo (MODULUS - 1).
_INV_ALPHA_LIMBS = (
    14981214993055009997,
    6006880321387387405,
    10624953561019755799,
    2789598613442376532,
)
_INV_ALPHA = sum(limb << (64 * index) for index, limb in enumerate(_INV_ALPHA_LIMBS))


def hex_to_field(s: str) -> int:
    """Decode a prefixed big-endian hex string into a field element.

    The two leading characters are dropped as the prefix. Bits at or above
    the field's bit size are discarded; a remaining value that is not below
    the modulus, or malformed hex, raises ValueError.
    """
    digits = s[2:]
    if len(digits) % 2 or any(ch not in string.hexdigits for ch in digits):
        raise ValueError(f"invalid hex field element: {s!r}")
    raw = bytes.fromhex(digits)
    if len(raw) > _WIDE_BYTES:
        raise ValueError(f"hex field element too long: {s!r}")
    little_endian = raw[::-1][:_FIELD_BYTES]
    value = int.from_bytes(little_endian, "little") & _FIELD_MASK
    if value >= MODULUS:
        raise ValueError(f"value is not a canonical field element: {s!r}")
    return value


def sbox(value: int) -> int:
    """Return value**5 in the field."""
    return pow(value, 5, MODULUS)


def sbox_inv(value: int) -> int:
    """Return the fifth root of value in the field."""
    return pow(value, _INV_ALPHA, MODULUS)


def round_constants_count() -> int:
    """Return the number of round constants used by one permutation."""
    return (PARTIAL_ROUNDS + FULL_ROUNDS) * WIDTH


@lru_cache(maxsize=None)
def _round_constants() -> tuple[int, ...]:
    constants = tuple(hex_to_field(entry) for entry in round_constants_raw())
    if len(constants) != round_constants_count():
        raise ValueError(
            f"expected {round_constants_count()} round constants, got {len(constants)}"
        )
    return constants


def round_constants() -> tuple[int, ...]:
    """Return all round constants as field elements."""
    return _round_constants()


def load_round_constants(round_index: int, constants: Sequence[int]) -> tuple[int, ...]:
    """Return the WIDTH constants belonging to the given round."""
    if round_index < 0:
        raise IndexError(f"negative round index: {round_index}")
    start = round_index * WIDTH
    if start + WIDTH > len(constants):
        raise IndexError(f"round {round_index} is out of range")
    return tuple(constants[start : start + WIDTH])


@lru_cache(maxsize=None)
def _mds() -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(hex_to_field(item) for item in row) for row in mds_raw())


def mds() -> tuple[tuple[int, ...], ...]:
    """Return the MDS matrix as rows of field elements."""
    return _mds()


def _check_width(values: Sequence[int], what: str) -> None:
    if len(values) != WIDTH:
        raise ValueError(f"{what} must have {WIDTH} elements, got {len(values)}")


def apply_round_constants(state: Sequence[int], constants: Sequence[int]) -> tuple[int, ...]:
    """Add round constants to the state element by element."""
    _check_width(state, "state")
    _check_width(constants, "round constants")
    return tuple((s + c) % MODULUS for s, c in zip(state, constants))


def apply_mds(state: Sequence[int]) -> tuple[int, ...]:
    """Multiply the MDS matrix by the state vector."""
    _check_width(state, "state")
    return tuple(
        sum(m * s for m, s in zip(row, state)) % MODULUS for row in mds()
    )