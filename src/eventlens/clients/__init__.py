"""External collaborators: JSON-RPC node and signature database clients."""

from eventlens.clients.fourbyte import FourByteClient, SignatureLookupError
from eventlens.clients.rpc import RPC, RPCError

__all__ = [
    "FourByteClient",
    "SignatureLookupError",
    "RPC",
    "RPCError",
]
