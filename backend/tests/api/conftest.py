"""API test fixtures — FastAPI app driven through httpx.

Invariants:
    - Requests go through the real middleware and error handler stack
    - raise_app_exceptions=False: Starlette re-raises after the catch-all
      handler has answered, the client must still see the 500 response
"""

import pytest
from httpx import ASGITransport, AsyncClient

from people_api.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
