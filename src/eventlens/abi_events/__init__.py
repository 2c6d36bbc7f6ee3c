"""ABI event entries → named signatures keyed by topic0.

Loading a contract ABI gives the resolver source-of-truth parameter names:
`make_signature_table_from_abi(abi)` returns `{topic0: named signature}`,
ready for `SignatureResolver.preload`.
"""

import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal, Optional

from eth_utils import keccak
from pydantic import BaseModel, ValidationError


class AbiInput(BaseModel):
    name: str = ""
    type: str
    indexed: bool = False
    internalType: Optional[str] = None
    components: Optional[Sequence["AbiInput"]] = None


AbiInput.model_rebuild()


class AbiEvent(BaseModel):
    anonymous: bool = False
    inputs: Sequence[AbiInput]
    name: str
    type: Literal["event"]


def get_canonical_type(event_input: AbiInput) -> str:
    """Expand `tuple`/`tuple[]` into `(t1,t2,...)` suffixed with any array dims."""
    if event_input.type.startswith("tuple"):
        inner = ",".join(get_canonical_type(c) for c in event_input.components or ())
        return f"({inner}){event_input.type[len('tuple'):]}"
    return event_input.type


def get_event_signature(event: AbiEvent) -> str:
    return f"{event.name}({','.join(get_canonical_type(event_input) for event_input in event.inputs)})"


def get_named_event_signature(event: AbiEvent) -> str:
    """`Transfer(address indexed from,address indexed to,uint256 value)`."""
    params = []
    for event_input in event.inputs:
        parts = [get_canonical_type(event_input)]
        if event_input.indexed:
            parts.append("indexed")
        if event_input.name:
            parts.append(event_input.name)
        params.append(" ".join(parts))
    return f"{event.name}({','.join(params)})"


def get_event_topic0(event: AbiEvent) -> str:
    return "0x" + keccak(text=get_event_signature(event)).hex()


class AbiLoadError(ValueError):
    """An ABI file or artifact could not be read as a list of ABI entries."""


AbiJson = Iterable[dict[str, Any]]
AbiSource = AbiJson | Path


def _load_abi(abi: AbiSource) -> AbiJson:
    if not isinstance(abi, Path):
        return abi
    try:
        loaded = json.loads(abi.read_text())
    except (OSError, ValueError) as e:
        raise AbiLoadError(f"{abi}: {e}") from e
    # Artifact files (Hardhat/Foundry) wrap the ABI under "abi".
    if isinstance(loaded, dict):
        if "abi" not in loaded:
            raise AbiLoadError(f'{abi}: JSON object has no "abi" key')
        loaded = loaded["abi"]
    if not isinstance(loaded, list):
        raise AbiLoadError(f"{abi}: expected a list of ABI entries, got {type(loaded).__name__}")
    return loaded


def get_events_from_abi(abi: AbiSource) -> list[AbiEvent]:
    try:
        return [
            AbiEvent.model_validate(entry)
            for entry in _load_abi(abi)
            if isinstance(entry, dict) and entry.get("type") == "event"
        ]
    except ValidationError as e:
        raise AbiLoadError(f"invalid ABI event entry: {e}") from e


def make_signature_table_from_events(events: Iterable[AbiEvent]) -> dict[str, str]:
    # Anonymous events have no topic0.
    return {get_event_topic0(event): get_named_event_signature(event) for event in events if not event.anonymous}


def make_signature_table_from_abi(abi: AbiSource) -> dict[str, str]:
    return make_signature_table_from_events(get_events_from_abi(abi))
