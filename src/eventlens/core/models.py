"""Core data models and dynamic column buffer.

This module defines:
- `RawLog`: a log entry as emitted by a contract (topics + data), minimally normalized.
- `ParsedSignature`: event name and ordered parameter types of a text signature.
- `EventParam` / `DecodedLog`: the decoded, human-labeled record per log.
- `DecodedColumns`: dynamic, append-only columnar buffer where every field
   name seen in `formatted_data` becomes its own Arrow column.

Design notes
------------
- `formatted_data` keeps declaration order (indexed first, then data params).
- Dynamic columns are stored as strings for Arrow safety (big ints, hex).
- Base columns are always present; missing provenance is stored as null.
- A field named like a base column is exported as `<name>1` (`<name>2`, ...).
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import pyarrow as pa

from eventlens.core.constants import UNKNOWN_EVENT

# === Base schema (Arrow) ===

_BASE_FIELDS: list[tuple[str, pa.DataType]] = [
    ("block_number", pa.uint64()),
    ("tx_hash", pa.string()),
    ("log_index", pa.uint64()),
    ("address", pa.string()),
    ("event", pa.string()),
    ("signature", pa.string()),
]


def _hex_to_int(value: Any) -> int | None:
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.startswith("0x") and len(value) > 2:
        return int(value, 16)
    return None  # missing, pending, or bare "0x"


# === Input record ===


@dataclass(slots=True, frozen=True)
class RawLog:
    """Raw log as found in a transaction receipt or an eth_getLogs result."""

    address: str
    topics: tuple[str, ...]  # topics[0] is the event signature hash
    data: str = "0x"  # ABI-encoded non-indexed params
    tx_hash: str | None = None
    block_number: int | None = None
    log_index: int | None = None

    @classmethod
    def from_rpc(cls, rl: dict[str, Any]) -> RawLog:
        """Build a RawLog from a JSON-RPC log object."""
        topics = tuple((t if isinstance(t, str) else t.decode()).lower() for t in rl.get("topics", []))
        return cls(
            address=rl["address"],
            topics=topics,
            data=str(rl.get("data") or "0x"),
            tx_hash=(rl.get("transactionHash") or rl.get("transaction_hash") or None),
            block_number=_hex_to_int(rl.get("blockNumber")),
            log_index=_hex_to_int(rl.get("logIndex")),
        )


# === Derived records ===


@dataclass(slots=True, frozen=True)
class ParsedSignature:
    """Event name plus ordered parameter type tokens."""

    event_name: str
    param_types: tuple[str, ...]


@dataclass(slots=True)
class EventParam:
    name: str
    type: str
    value: Any
    indexed: bool = False


@dataclass(slots=True)
class DecodedLog:
    """Decoded, human-labeled log record.

    `formatted_data` is None when the signature could not be resolved.
    """

    address: str
    event_type: str
    raw_topics: tuple[str, ...]
    raw_data: str
    event_signature: str | None = None
    formatted_data: dict[str, Any] | None = None
    params: list[EventParam] = field(default_factory=list)

    @property
    def is_unknown(self) -> bool:
        return self.formatted_data is None and self.event_type == UNKNOWN_EVENT

    def to_dict(self) -> dict[str, Any]:
        """Render the presentation-layer shape (camelCase keys)."""
        out: dict[str, Any] = {
            "address": self.address,
            "eventType": self.event_type,
            "rawTopics": list(self.raw_topics),
            "rawData": self.raw_data,
            "formattedData": None if self.formatted_data is None else dict(self.formatted_data),
        }
        if self.event_signature is not None:
            out["eventSignature"] = self.event_signature
        return out


# === Dynamic column buffer ===


def _to_cell(v: Any) -> str | None:
    if v is None:
        return None
    if isinstance(v, (list, tuple)):
        return json.dumps(v, default=str, separators=(",", ":"))
    return str(v)


@dataclass(slots=True)
class DecodedColumns:
    """Dynamic columnar buffer over decoded logs.

    - Base columns are always present.
    - Dynamic columns are created lazily upon first field-name appearance.
    - All dynamic values are stored as *strings* (or None) to avoid Arrow
      overflow and preserve exactness (e.g., uint256).
    """

    block_number: list[int | None] = field(default_factory=list)
    tx_hash: list[str | None] = field(default_factory=list)
    log_index: list[int | None] = field(default_factory=list)
    address: list[str] = field(default_factory=list)
    event: list[str] = field(default_factory=list)
    signature: list[str | None] = field(default_factory=list)

    dyn: dict[str, list[str | None]] = field(default_factory=dict)
    _rows: int = 0

    @staticmethod
    def empty() -> DecodedColumns:
        return DecodedColumns()

    @staticmethod
    def from_logs(raw_logs: Iterable[RawLog], decoded: Iterable[DecodedLog]) -> DecodedColumns:
        """Build a buffer from raw logs and their decoded counterparts (same order)."""
        buf = DecodedColumns()
        for raw, dl in zip(raw_logs, decoded):
            buf.append_decoded(raw, dl)
        return buf

    def size(self) -> int:
        return self._rows

    def _append_base(self, raw: RawLog, decoded: DecodedLog) -> None:
        """Append one row to base columns and pad existing dynamic cols."""
        self.block_number.append(raw.block_number)
        self.tx_hash.append(raw.tx_hash)
        self.log_index.append(raw.log_index)
        self.address.append(decoded.address)
        self.event.append(decoded.event_type)
        self.signature.append(decoded.event_signature)
        self._rows += 1
        for col in self.dyn.values():
            col.append(None)

    def _ensure_dyn_col(self, name: str) -> list[str | None]:
        """Ensure a dynamic column exists and is aligned to current row count."""
        col = self.dyn.get(name)
        if col is None:
            col = [None] * self._rows
            self.dyn[name] = col
        return col

    def append_decoded(self, raw: RawLog, decoded: DecodedLog) -> None:
        """Append a decoded log into the buffer (all field names become columns)."""
        self._append_base(raw, decoded)
        for k, v in (decoded.formatted_data or {}).items():
            self._ensure_dyn_col(k)[-1] = _to_cell(v)

    def to_arrow_table(self) -> pa.Table:
        """Convert the buffer to an Arrow table with deterministic schema."""
        fields = [pa.field(n, t) for n, t in _BASE_FIELDS]
        arrays: dict[str, pa.Array] = {
            "block_number": pa.array(self.block_number, type=pa.uint64()),
            "tx_hash": pa.array(self.tx_hash, type=pa.string()),
            "log_index": pa.array(self.log_index, type=pa.uint64()),
            "address": pa.array(self.address, type=pa.string()),
            "event": pa.array(self.event, type=pa.string()),
            "signature": pa.array(self.signature, type=pa.string()),
        }
        taken = set(arrays) | set(self.dyn)
        for name in sorted(self.dyn.keys()):
            col_name = name
            if name in arrays:
                # field named like a base column: keep it under name1, name2, ...
                suffix = 1
                while f"{name}{suffix}" in taken:
                    suffix += 1
                col_name = f"{name}{suffix}"
                taken.add(col_name)
            fields.append(pa.field(col_name, pa.string()))
            arrays[col_name] = pa.array(self.dyn[name], type=pa.string())
        return pa.Table.from_pydict(arrays, schema=pa.schema(fields))
