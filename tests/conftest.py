"""Shared test fixtures.

HTTP is never real: the client's httpx.AsyncClient is replaced by an
AsyncMock whose post() answers per JSON-RPC method.
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from src.rpc.client import SolanaRpcClient
from tests.helpers import RPC_URL


@pytest.fixture
def mock_http() -> AsyncMock:
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def client(mock_http: AsyncMock) -> SolanaRpcClient:
    return SolanaRpcClient(RPC_URL, http=mock_http)


@pytest.fixture
def route_methods(mock_http: AsyncMock) -> Callable[[dict[str, Any]], None]:
    """Answer each JSON-RPC method with its own canned response (or raise it)."""

    def _route(responses: dict[str, Any]) -> None:
        async def _post(url: str, *, json: dict, **kwargs: Any) -> Any:
            answer = responses[json["method"]]
            if isinstance(answer, Exception):
                raise answer
            return answer

        mock_http.post.side_effect = _post

    return _route
