import pytest

from eventlens.core.constants import TRANSFER_T0
from eventlens.decoding.field_names import (
    FieldNameInferrer,
    lookup_known_field_names,
    param_type_fingerprint,
    synthesize_field_names,
    unique_name,
)
from eventlens.decoding.known_events import KNOWN_EVENT_FIELD_NAMES
from eventlens.decoding.signature import split_params


def test_known_table_shapes_are_consistent():
    for event, shapes in KNOWN_EVENT_FIELD_NAMES.items():
        for fingerprint, names in shapes.items():
            assert len(split_params(fingerprint)) == len(names), (event, fingerprint)
            assert len(set(names)) == len(names), (event, fingerprint)


def test_fingerprint():
    assert param_type_fingerprint(["address", "uint256"]) == "address,uint256"


def test_known_lookup_exact_match_only():
    assert lookup_known_field_names("Transfer", ["address", "address", "uint256"]) == ["from", "to", "value"]
    assert lookup_known_field_names("Transfer", ["address", "address", "uint256", "bytes"]) is None
    assert lookup_known_field_names("NoSuchEvent", ["address"]) is None


def test_known_lookup_distinguishes_swap_shapes():
    v2 = ["address", "uint256", "uint256", "uint256", "uint256", "address"]
    v3 = ["address", "address", "int256", "int256", "uint160", "uint128", "int24"]
    assert lookup_known_field_names("Swap", v2)[-1] == "to"
    assert lookup_known_field_names("Swap", v3)[-1] == "tick"


def test_unique_name():
    assert unique_name("hash", []) == "hash"
    assert unique_name("hash", ["hash"]) == "hash1"
    assert unique_name("hash", ["hash", "hash1"]) == "hash2"


class TestSynthesizeFieldNames:
    def test_transfer_like(self):
        names = synthesize_field_names("TokensTransferred", ["address", "address", "uint256"])
        assert names == ["from", "to", "amount"]

    def test_receive(self):
        assert synthesize_field_names("EtherReceived", ["address", "uint256"]) == ["to", "param1"]

    def test_generic_addresses(self):
        names = synthesize_field_names("Configured", ["address", "address", "address", "address"])
        assert names == ["user", "recipient", "account", "account1"]

    def test_second_address_requires_first_address(self):
        assert synthesize_field_names("Linked", ["bytes32", "address"]) == ["hash", "account"]

    def test_amount_only_near_the_end(self):
        names = synthesize_field_names("Deposited", ["uint256", "uint256", "uint256"])
        assert names == ["param0", "amount", "amount1"]

    def test_amount_requires_integer(self):
        assert synthesize_field_names("Withdraw", ["bool"]) == ["status"]

    def test_repeated_types_get_suffixes(self):
        names = synthesize_field_names("Flags", ["bool", "bool", "bool"])
        assert names == ["status", "status1", "status2"]

    def test_hashes(self):
        assert synthesize_field_names("Committed", ["bytes32", "bytes32"]) == ["hash", "hash1"]

    def test_unmapped_uint256_is_positional(self):
        assert synthesize_field_names("CustomEvent", ["uint256", "uint256"]) == ["param0", "param1"]

    def test_names_are_unique(self):
        types = ["address", "address", "bool", "bool", "uint128", "uint128", "uint256", "uint256"]
        names = synthesize_field_names("SendMany", types)
        assert len(names) == len(types)
        assert len(set(names)) == len(names)


@pytest.mark.asyncio
async def test_infer_uses_named_signature(resolver, mock_lookup):
    named = "Transfer(address indexed src, address indexed dst, uint256 wad)"
    mock_lookup.lookup.return_value = [named]
    inferrer = FieldNameInferrer(resolver)

    names = await inferrer.infer("Transfer", ["address", "address", "uint256"], TRANSFER_T0)

    assert names == ["src", "dst", "wad"]
    assert inferrer.cached_names(named) == ["src", "dst", "wad"]


@pytest.mark.asyncio
async def test_infer_type_only_signature_falls_back_to_table(resolver, mock_lookup):
    mock_lookup.lookup.return_value = ["Transfer(address,address,uint256)"]
    inferrer = FieldNameInferrer(resolver)

    names = await inferrer.infer("Transfer", ["address", "address", "uint256"], TRANSFER_T0)

    assert names == ["from", "to", "value"]
    assert inferrer.cached_names("Transfer(address,address,uint256)") is None


@pytest.mark.asyncio
async def test_infer_name_count_mismatch_falls_back(resolver, mock_lookup):
    mock_lookup.lookup.return_value = ["Odd(address who, uint256 amount)"]
    inferrer = FieldNameInferrer(resolver)

    names = await inferrer.infer("Odd", ["address", "uint256", "bool"], "0x01")

    assert names == ["user", "param1", "status"]


@pytest.mark.asyncio
async def test_infer_unresolved_hash_falls_back_to_heuristics(resolver):
    inferrer = FieldNameInferrer(resolver)

    assert await inferrer.infer("CustomEvent", ["uint256", "uint256"], "0x02") == ["param0", "param1"]


@pytest.mark.asyncio
async def test_infer_without_resolver():
    inferrer = FieldNameInferrer()

    assert await inferrer.infer("Approval", ["address", "address", "uint256"], "0x03") == ["owner", "spender", "value"]
