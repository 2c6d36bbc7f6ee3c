from eventlens.core.models import DecodedColumns, DecodedLog, RawLog


def _raw(i: int) -> RawLog:
    return RawLog(address="0xabc", topics=("0x01",), tx_hash="0xfeed", block_number=10, log_index=i)


def test_from_rpc_normalizes_fields():
    log = RawLog.from_rpc(
        {
            "address": "0xabc",
            "topics": ["0xDDF2"],
            "data": None,
            "transactionHash": "0xfeed",
            "blockNumber": "0xa",
            "logIndex": "0x0",
        }
    )
    assert log.topics == ("0xddf2",)
    assert log.data == "0x"
    assert log.block_number == 10
    assert log.log_index == 0


def test_columns_are_created_lazily_and_padded():
    first = DecodedLog(
        address="0xabc",
        event_type="Transfer",
        raw_topics=("0x01",),
        raw_data="0x",
        event_signature="Transfer(address,address,uint256)",
        formatted_data={"from": "0x1", "value": 2**255, "tokenAddress": "0xabc"},
    )
    second = DecodedLog(
        address="0xabc",
        event_type="Batch",
        raw_topics=("0x02",),
        raw_data="0x",
        event_signature="Batch(uint256[])",
        formatted_data={"amounts": [1, 2], "tokenAddress": "0xabc"},
    )
    unknown = DecodedLog(address="0xabc", event_type="Unknown", raw_topics=("0x03",), raw_data="0x")

    buf = DecodedColumns.from_logs([_raw(0), _raw(1), _raw(2)], [first, second, unknown])
    table = buf.to_arrow_table()

    assert buf.size() == 3
    assert table.column_names[:6] == ["block_number", "tx_hash", "log_index", "address", "event", "signature"]
    assert table.column("value").to_pylist() == [str(2**255), None, None]
    assert table.column("amounts").to_pylist() == [None, "[1,2]", None]
    assert table.column("event").to_pylist() == ["Transfer", "Batch", "Unknown"]
    assert table.column("signature").to_pylist()[2] is None


def test_field_named_like_base_column_is_kept_under_suffix():
    dl = DecodedLog(
        address="0xabc",
        event_type="Permit",
        raw_topics=("0x01",),
        raw_data="0x",
        event_signature="Permit(address owner,bytes signature)",
        formatted_data={"address": "0xdef", "signature": "0xdeadbeef", "signature1": "x", "tokenAddress": "0xabc"},
    )
    table = DecodedColumns.from_logs([_raw(0)], [dl]).to_arrow_table()

    assert table.column("address").to_pylist() == ["0xabc"]
    assert table.column("address1").to_pylist() == ["0xdef"]
    assert table.column("signature").to_pylist() == ["Permit(address owner,bytes signature)"]
    assert table.column("signature2").to_pylist() == ["0xdeadbeef"]
    assert table.column("signature1").to_pylist() == ["x"]
    assert len(set(table.column_names)) == table.num_columns


def test_from_rpc_bare_hex_is_none():
    log = RawLog.from_rpc({"address": "0xabc", "topics": [], "blockNumber": "0x", "logIndex": None})
    assert log.block_number is None
    assert log.log_index is None


def test_empty_buffer():
    table = DecodedColumns.empty().to_arrow_table()
    assert table.num_rows == 0
    assert table.num_columns == 6
