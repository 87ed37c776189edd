import pytest

from lazytower.constants import mds_raw, round_constants_raw
from lazytower.params import (
    MODULUS,
    WIDTH,
    apply_mds,
    apply_round_constants,
    hex_to_field,
    load_round_constants,
    mds,
    round_constants,
    round_constants_count,
    sbox,
    sbox_inv,
)


def test_hex_to_field_small_values():
    assert hex_to_field("0x" + "00" * 31 + "01") == 1
    assert hex_to_field("0x" + "00" * 32) == 0
    assert hex_to_field("0x04") == 4


def test_hex_to_field_round_trip():
    value = 0x0EB544FEE2815DDA7F53E29CCAC98ED7D889BB4EBD47C3864F3C2BD81A6DA891
    assert hex_to_field(f"0x{value:064x}") == value


def test_hex_to_field_masks_high_bits():
    assert hex_to_field("0xc0" + "00" * 30 + "01") == 1


def test_hex_to_field_rejects_modulus():
    with pytest.raises(ValueError):
        hex_to_field(f"0x{MODULUS:064x}")


@pytest.mark.parametrize("text", ["0xzz", "0x123", "0x" + "00" * 65])
def test_hex_to_field_rejects_malformed(text):
    with pytest.raises(ValueError):
        hex_to_field(text)


def test_sbox_small_value():
    assert sbox(2) == 32


def test_sbox_of_minus_one():
    assert sbox(MODULUS - 1) == MODULUS - 1


@pytest.mark.parametrize("value", [0, 1, 2, 12345, MODULUS - 1, MODULUS // 3])
def test_sbox_inverse_round_trip(value):
    assert sbox_inv(sbox(value)) == value
    assert sbox(sbox_inv(value)) == value


def test_round_constants_count_and_values():
    constants = round_constants()
    assert round_constants_count() == len(constants)
    assert all(0 <= c < MODULUS for c in constants)
    raw = round_constants_raw()
    assert constants[0] == int(raw[0], 16)
    assert constants[-1] == int(raw[-1], 16)


def test_load_round_constants_slices_by_round():
    constants = round_constants()
    assert load_round_constants(0, constants) == tuple(constants[:WIDTH])
    assert load_round_constants(3, constants) == tuple(constants[15:20])


def test_load_round_constants_out_of_range():
    constants = round_constants()
    with pytest.raises(IndexError):
        load_round_constants(len(constants) // WIDTH, constants)


def test_mds_matches_raw_strings():
    matrix = mds()
    raw = mds_raw()
    assert len(matrix) == WIDTH
    assert all(len(row) == WIDTH for row in matrix)
    assert matrix[0][0] == int(raw[0][0], 16)
    assert matrix[4][4] == int(raw[4][4], 16)


def test_apply_round_constants_on_zero_state():
    constants = load_round_constants(1, round_constants())
    assert apply_round_constants((0,) * WIDTH, constants) == constants


def test_apply_round_constants_wraps_modulus():
    state = (MODULUS - 1,) * WIDTH
    assert apply_round_constants(state, (1,) * WIDTH) == (0,) * WIDTH


def test_apply_round_constants_rejects_wrong_width():
    with pytest.raises(ValueError):
        apply_round_constants((0, 0), (0,) * WIDTH)


@pytest.mark.parametrize("column", range(WIDTH))
def test_apply_mds_on_unit_vector_gives_column(column):
    unit = tuple(1 if i == column else 0 for i in range(WIDTH))
    assert apply_mds(unit) == tuple(row[column] for row in mds())


def test_apply_mds_is_linear():
    a = (1, 2, 3, 4, 5)
    b = (MODULUS - 7, 11, 0, 99, 123456789)
    total = apply_round_constants(a, b)
    assert apply_mds(total) == apply_round_constants(apply_mds(a), apply_mds(b))


def test_apply_mds_zero_state():
    assert apply_mds((0,) * WIDTH) == (0,) * WIDTH


def test_apply_mds_rejects_wrong_width():
    with pytest.raises(ValueError):
        apply_mds((1, 2, 3))