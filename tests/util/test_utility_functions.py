import pytest

from zkparams.util.utility_functions import (
    bitmask_to_boolean_list,
    boolean_list_to_bitmask,
    boolean_list_to_bytes,
    byte_size,
    next_power_of_two,
    two_adicity,
)

BLS12_381_R = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001


@pytest.mark.parametrize(
    ("function", "inputs", "expected"),
    [
        (boolean_list_to_bitmask, {"boolean_list": [True, False, True]}, 5),
        (boolean_list_to_bitmask, {"boolean_list": [False, False, True]}, 4),
        (bitmask_to_boolean_list, {"bitmask": 5, "list_length": 3}, [True, False, True]),
        (bitmask_to_boolean_list, {"bitmask": 0, "list_length": 2}, [False, False]),
        (boolean_list_to_bytes, {"boolean_list": [True] + [False] * 7 + [True]}, b"\x01\x01"),
        (boolean_list_to_bytes, {"boolean_list": []}, b""),
        (boolean_list_to_bytes, {"boolean_list": [False, True]}, b"\x02"),
    ],
)
def test_bit_conversions(function, inputs, expected):
    assert function(**inputs) == expected


@pytest.mark.parametrize("data", [b"", b"\x00", b"xyz", bytes(range(256))])
def test_bytes_survive_bit_decomposition(data):
    bits = bitmask_to_boolean_list(int.from_bytes(data, byteorder="little"), 8 * len(data))

    assert boolean_list_to_bytes(bits) == data


def test_bitmask_too_large():
    with pytest.raises(ValueError):  # noqa: PT011
        bitmask_to_boolean_list(8, 3)


@pytest.mark.parametrize(("n", "expected"), [(0, 1), (1, 1), (2, 2), (3, 4), (40000, 65536), (65536, 65536)])
def test_next_power_of_two(n, expected):
    assert next_power_of_two(n) == expected


@pytest.mark.parametrize(("modulus", "expected"), [(BLS12_381_R, 32), (17, 4), (7, 1)])
def test_two_adicity(modulus, expected):
    assert two_adicity(modulus) == expected


@pytest.mark.parametrize(("modulus", "expected"), [(255, 1), (256, 2), (2**255 - 19, 32), (BLS12_381_R, 32)])
def test_byte_size(modulus, expected):
    assert byte_size(modulus) == expected
