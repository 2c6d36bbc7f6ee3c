from unittest.mock import AsyncMock

import pytest

from eventlens.core.config import ResolverConfig
from eventlens.decoding.assembler import LogAssembler
from eventlens.decoding.resolver import SignatureResolver


@pytest.fixture
def mock_lookup():
    lookup = AsyncMock()
    lookup.lookup = AsyncMock(return_value=[])
    lookup.aclose = AsyncMock()
    return lookup


@pytest.fixture
def resolver(mock_lookup):
    return SignatureResolver(mock_lookup, ResolverConfig(timeout_s=1.0))


@pytest.fixture
def assembler(resolver):
    return LogAssembler(resolver)
