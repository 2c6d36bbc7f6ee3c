import logging

import pytest

from eventlens.decoding.values import decode_indexed, decode_non_indexed, is_integer_type

ADDR = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
ADDR_CHECKSUM = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
ADDR_TOPIC = "0x000000000000000000000000" + ADDR[2:]


def word(n: int) -> str:
    return f"{n:064x}"


@pytest.mark.parametrize(
    "typ,expected",
    [
        ("uint256", True),
        ("int24", True),
        ("uint", True),
        ("uint256[]", False),
        ("address", False),
        ("bytes32", False),
    ],
)
def test_is_integer_type(typ, expected):
    assert is_integer_type(typ) is expected


def test_indexed_address_is_checksummed():
    assert decode_indexed("address", ADDR_TOPIC) == ADDR_CHECKSUM


def test_indexed_integer_is_unsigned():
    assert decode_indexed("uint256", "0x" + word(1000)) == 1000
    assert decode_indexed("int256", "0x" + "f" * 64) == 2**256 - 1


@pytest.mark.parametrize("typ", ["bytes32", "string", "bytes", "uint256[]", "bool"])
def test_indexed_other_types_pass_through(typ):
    topic = "0x" + "ab" * 32
    assert decode_indexed(typ, topic) == topic


def test_indexed_malformed_topic_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        assert decode_indexed("uint256", "0xnothex") == "0xnothex"
    assert "Failed to decode indexed" in caplog.text


def test_non_indexed_exact_length_decodes():
    data = "0x" + word(7) + word(8)
    assert decode_non_indexed(["uint256", "uint256"], data) == [7, 8]


def test_non_indexed_short_data_is_none(caplog):
    data = "0x" + word(7) + word(8)[:-2]
    with caplog.at_level(logging.WARNING):
        assert decode_non_indexed(["uint256", "uint256"], data) is None
    assert "Data is too short to decode" in caplog.text


def test_non_indexed_no_types():
    assert decode_non_indexed([], "0x") == []
    assert decode_non_indexed([], "0x" + word(1)) == []


def test_non_indexed_address_and_bool():
    data = "0x" + "0" * 24 + ADDR[2:] + word(1)
    assert decode_non_indexed(["address", "bool"], data) == [ADDR_CHECKSUM, True]


def test_non_indexed_bytes_render_as_hex():
    data = "0x" + "11" * 32
    assert decode_non_indexed(["bytes32"], data) == ["0x" + "11" * 32]


def test_non_indexed_dynamic_array():
    data = "0x" + word(32) + word(2) + word(5) + word(6)
    assert decode_non_indexed(["uint256[]"], data) == [[5, 6]]


def test_non_indexed_invalid_hex_is_none():
    assert decode_non_indexed(["uint256"], "0xzz" + "0" * 62) is None


def test_non_indexed_accepts_bytes():
    assert decode_non_indexed(["uint256"], bytes.fromhex(word(42))) == [42]
