import json

import pytest

from eventlens.abi_events import (
    AbiEvent,
    AbiLoadError,
    get_event_signature,
    get_event_topic0,
    get_events_from_abi,
    get_named_event_signature,
    make_signature_table_from_abi,
)
from eventlens.core.constants import APPROVAL_T0, TRANSFER_T0
from eventlens.decoding.signature import parse_names, parse_types

ERC20_ABI = [
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            {"name": "from", "type": "address", "indexed": True, "internalType": "address"},
            {"name": "to", "type": "address", "indexed": True, "internalType": "address"},
            {"name": "value", "type": "uint256", "indexed": False, "internalType": "uint256"},
        ],
    },
    {
        "type": "event",
        "name": "Approval",
        "inputs": [
            {"name": "owner", "type": "address", "indexed": True},
            {"name": "spender", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
    },
    {"type": "function", "name": "totalSupply", "inputs": [], "outputs": [{"name": "", "type": "uint256"}]},
    {
        "type": "event",
        "name": "Anon",
        "anonymous": True,
        "inputs": [{"name": "x", "type": "uint256", "indexed": False}],
    },
]

TUPLE_EVENT = AbiEvent.model_validate(
    {
        "type": "event",
        "name": "OrderPlaced",
        "inputs": [
            {
                "name": "orders",
                "type": "tuple[]",
                "indexed": False,
                "components": [
                    {"name": "maker", "type": "address"},
                    {"name": "amount", "type": "uint256"},
                ],
            },
            {"name": "", "type": "bytes32", "indexed": True},
        ],
    }
)


def test_topic0_matches_erc20_constants():
    events = {e.name: e for e in get_events_from_abi(ERC20_ABI)}
    assert get_event_topic0(events["Transfer"]) == TRANSFER_T0
    assert get_event_topic0(events["Approval"]) == APPROVAL_T0


def test_named_signature_round_trips_through_parsers():
    transfer = get_events_from_abi(ERC20_ABI)[0]
    named = get_named_event_signature(transfer)

    assert named == "Transfer(address indexed from,address indexed to,uint256 value)"
    assert parse_types(named) == ["address", "address", "uint256"]
    assert parse_names(named) == ["from", "to", "value"]


def test_tuple_inputs_are_canonicalized():
    assert get_event_signature(TUPLE_EVENT) == "OrderPlaced((address,uint256)[],bytes32)"
    assert get_named_event_signature(TUPLE_EVENT) == "OrderPlaced((address,uint256)[] orders,bytes32 indexed)"
    assert parse_names(get_named_event_signature(TUPLE_EVENT)) == ["orders", ""]


def test_signature_table_skips_anonymous_and_functions():
    table = make_signature_table_from_abi(ERC20_ABI)
    assert set(table) == {TRANSFER_T0, APPROVAL_T0}


def test_signature_table_from_artifact_file(tmp_path):
    path = tmp_path / "Token.json"
    path.write_text(json.dumps({"contractName": "Token", "abi": ERC20_ABI}))

    assert make_signature_table_from_abi(path)[APPROVAL_T0] == (
        "Approval(address indexed owner,address indexed spender,uint256 value)"
    )


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"contractName": "Token", "bytecode": "0x"}),
        json.dumps(42),
        json.dumps([{"type": "event", "name": "Broken"}]),
    ],
)
def test_malformed_abi_file_raises_load_error(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content)

    with pytest.raises(AbiLoadError):
        make_signature_table_from_abi(path)
