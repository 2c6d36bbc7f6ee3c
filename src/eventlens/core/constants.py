from __future__ import annotations

FOURBYTE_EVENT_SIGNATURES_URL = "https://www.4byte.directory/api/v1/event-signatures/"

UNKNOWN_EVENT = "Unknown"
TOKEN_ADDRESS_FIELD = "tokenAddress"

# topic0 constants (lowercase, 0x-prefixed)
TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
APPROVAL_T0 = "0x8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925"

# Named signatures for the ERC-20 events, usable as a resolver preload table.
BUILTIN_EVENT_SIGNATURES: dict[str, str] = {
    TRANSFER_T0: "Transfer(address indexed from,address indexed to,uint256 value)",
    APPROVAL_T0: "Approval(address indexed owner,address indexed spender,uint256 value)",
}
