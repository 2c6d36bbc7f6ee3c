"""Text-signature parsing: parameter types, parameter names, event name.

Both parsers share `split_params`, a bracket-aware comma splitter: commas
nested inside tuples `(...)` or fixed arrays `[...]` never split a parameter.
Neither parser raises; malformed input is logged and reported as an empty
type list / missing names.
"""

from __future__ import annotations

import logging

from eventlens.core.models import ParsedSignature

logger = logging.getLogger(__name__)

_OPEN = "(["
_CLOSE = ")]"
_INDEXED = "indexed"


def split_params(params_str: str) -> list[str]:
    """Split a parameter list by top-level commas.

    Raises ValueError on unbalanced brackets.
    """
    items: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in params_str:
        if ch in _OPEN:
            depth += 1
            buf.append(ch)
        elif ch in _CLOSE:
            depth -= 1
            if depth < 0:
                raise ValueError(f"Unbalanced brackets in parameter list: {params_str!r}")
            buf.append(ch)
        elif ch == "," and depth == 0:
            items.append("".join(buf).strip())
            buf = []
        else:
            buf.append(ch)
    if depth != 0:
        raise ValueError(f"Unbalanced brackets in parameter list: {params_str!r}")
    if buf:
        items.append("".join(buf).strip())
    return [i for i in items if i]


def _param_section(signature: str) -> str:
    """Return the text between the first '(' and the last ')'."""
    open_paren = signature.find("(")
    close_paren = signature.rfind(")")
    if open_paren == -1 or close_paren == -1 or close_paren < open_paren:
        raise ValueError(f"Invalid event signature: {signature!r}")
    return signature[open_paren + 1 : close_paren]


def _param_tokens(param: str) -> list[str]:
    """Split one parameter chunk on top-level whitespace, dropping `indexed`.

    A tuple type such as `(address a, uint256 b)[]` stays a single token.
    """
    tokens: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in param:
        if ch in _OPEN:
            depth += 1
        elif ch in _CLOSE:
            depth -= 1
        if ch.isspace() and depth == 0:
            if buf:
                tokens.append("".join(buf))
                buf = []
            continue
        buf.append(ch)
    if buf:
        tokens.append("".join(buf))
    return [t for t in tokens if t != _INDEXED]


def event_name(signature: str) -> str:
    """Return the event name, i.e. everything before the first '('."""
    return signature.split("(", 1)[0].strip()


def parse_types(signature: str) -> list[str]:
    """Parse a signature into its ordered parameter type tokens.

    `Swap(address indexed sender, (uint256,uint256) amounts)` ->
    `["address", "(uint256,uint256)"]`. Returns [] on malformed input.
    """
    try:
        types: list[str] = []
        for param in split_params(_param_section(signature)):
            tokens = _param_tokens(param)
            if tokens:
                types.append(tokens[0])
        return types
    except ValueError as e:
        logger.warning("Failed to parse parameter types from %r: %s", signature, e)
        return []


def parse_names(full_signature: str) -> list[str] | None:
    """Parse the declared parameter names of a named signature.

    A parameter without a name yields "". Returns None when no parameter
    carries a name, or when the signature cannot be parsed.
    """
    try:
        params = split_params(_param_section(full_signature))
    except ValueError as e:
        logger.warning("Failed to parse parameter names from %r: %s", full_signature, e)
        return None

    if not params:
        return []

    names: list[str] = []
    for param in params:
        tokens = _param_tokens(param)
        names.append(tokens[-1] if len(tokens) > 1 else "")

    if all(name == "" for name in names):
        return None
    return names


def parse_signature(signature: str) -> ParsedSignature:
    """Parse a signature into (event name, parameter types)."""
    return ParsedSignature(event_name=event_name(signature), param_types=tuple(parse_types(signature)))
