"""Log assembly: raw log → resolved signature → names → values → DecodedLog.

Per log:
- UNRESOLVED: resolve topics[0]; failure (or no topics) → UNKNOWN record
  with `formatted_data=None` and the raw topics/data preserved.
- RESOLVED: parse types, infer names (reusing the cached signature), decode
  the first `len(topics) - 1` params from topics and the rest from data,
  merge in declaration order and append `tokenAddress` → DECODED.

A data section that cannot be decoded leaves the non-indexed fields as None;
indexed values are kept.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from eventlens.core.constants import TOKEN_ADDRESS_FIELD, UNKNOWN_EVENT
from eventlens.core.models import DecodedLog, EventParam, RawLog
from eventlens.decoding.field_names import FieldNameInferrer, unique_name
from eventlens.decoding.resolver import SignatureResolver, normalize_hash
from eventlens.decoding.signature import parse_signature
from eventlens.decoding.values import decode_indexed, decode_non_indexed

logger = logging.getLogger(__name__)


def _final_names(names: Sequence[str], count: int) -> list[str]:
    """Fill blanks with param{i} and suffix duplicates; `tokenAddress` is reserved."""
    used: set[str] = {TOKEN_ADDRESS_FIELD}
    out: list[str] = []
    for i in range(count):
        base = names[i] if i < len(names) and names[i] else f"param{i}"
        name = unique_name(base, used)
        used.add(name)
        out.append(name)
    return out


def _unknown(log: RawLog) -> DecodedLog:
    return DecodedLog(
        address=log.address,
        event_type=UNKNOWN_EVENT,
        raw_topics=log.topics,
        raw_data=log.data,
    )


class LogAssembler:
    """Combine resolver, name inference and value decoding into DecodedLog records."""

    def __init__(self, resolver: SignatureResolver, inferrer: FieldNameInferrer | None = None) -> None:
        self.resolver = resolver
        self.inferrer = inferrer or FieldNameInferrer(resolver)

    async def assemble(self, log: RawLog) -> DecodedLog:
        if not log.topics:
            logger.debug("Log from %s has no topics (anonymous event)", log.address)
            return _unknown(log)
        return await self._build(log, await self.resolver.resolve(log.topics[0]))

    async def _build(self, log: RawLog, signature: str | None) -> DecodedLog:
        if signature is None:
            return _unknown(log)

        parsed = parse_signature(signature)
        param_types = list(parsed.param_types)
        names = _final_names(
            await self.inferrer.infer(parsed.event_name, param_types, log.topics[0]),
            len(param_types),
        )

        indexed_count = min(len(param_types), len(log.topics) - 1)
        params: list[EventParam] = [
            EventParam(
                name=names[i],
                type=param_types[i],
                value=decode_indexed(param_types[i], log.topics[i + 1]),
                indexed=True,
            )
            for i in range(indexed_count)
        ]

        data_types = param_types[indexed_count:]
        data_values = decode_non_indexed(data_types, log.data)
        if data_values is None:
            logger.debug("Non-indexed params of %s at %s left undecoded", parsed.event_name, log.address)
        for j, typ in enumerate(data_types):
            params.append(
                EventParam(
                    name=names[indexed_count + j],
                    type=typ,
                    value=None if data_values is None else data_values[j],
                )
            )

        formatted = {p.name: p.value for p in params}
        formatted[TOKEN_ADDRESS_FIELD] = log.address

        return DecodedLog(
            address=log.address,
            event_type=parsed.event_name,
            event_signature=signature,
            raw_topics=log.topics,
            raw_data=log.data,
            formatted_data=formatted,
            params=params,
        )

    async def assemble_many(self, logs: Sequence[RawLog]) -> list[DecodedLog]:
        """Decode a batch of logs; distinct topic hashes are resolved once, up front."""
        signatures = await self.resolver.resolve_many(log.topics[0] for log in logs if log.topics)
        return list(
            await asyncio.gather(
                *(self._build(log, signatures[normalize_hash(log.topics[0])] if log.topics else None) for log in logs)
            )
        )
