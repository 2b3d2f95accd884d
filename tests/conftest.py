from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient

from webhook_http import HttpActions, HttpActionsConfig, RequestExecutor


@pytest.fixture
def base_url() -> str:
    return "https://webhooks.example.com"


@pytest.fixture
def token() -> str:
    return "test-token"


@pytest.fixture
def user_agent() -> str:
    return "webhook-http/test"


@pytest.fixture
def config(user_agent: str) -> HttpActionsConfig:
    return HttpActionsConfig(user_agent=user_agent)


@pytest_asyncio.fixture
async def actions(config: HttpActionsConfig) -> AsyncGenerator[HttpActions, None]:
    async with HttpActions(config) as http_actions:
        yield http_actions


@pytest_asyncio.fixture
async def executor() -> AsyncGenerator[RequestExecutor, None]:
    async with AsyncClient() as client:
        yield RequestExecutor(client)
