"""Pytest fixtures for testing"""

import pytest
import httpx
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from digital_world_frontend.api.dependencies import get_actor
from digital_world_frontend.api.main import create_app
from digital_world_frontend.domain.models import ViewState
from digital_world_frontend.infrastructure.clients.actor import HttpActor
from mocks.backend_server import main as backend


@pytest.fixture
def state() -> ViewState:
    """Freshly loaded page"""
    return ViewState()


@pytest.fixture
def actor() -> AsyncMock:
    """Backend actor double with successful default replies"""
    actor = AsyncMock(spec=HttpActor)
    actor.greet.return_value = "Hello, Ana!"
    actor.buy_item.return_value = True
    actor.claim_sale.return_value = 200
    return actor


@pytest.fixture
def client(actor: AsyncMock) -> TestClient:
    """Create FastAPI test client wired to the actor double"""
    app = create_app()
    app.dependency_overrides[get_actor] = lambda: actor
    return TestClient(app)


@pytest.fixture
def backend_app():
    """Mock backend with freshly seeded items"""
    backend.reset_state()
    yield backend.app
    backend.reset_state()


@pytest.fixture
def backend_actor(backend_app) -> HttpActor:
    """Real actor client talking to the in-process mock backend"""
    return HttpActor(
        canister_id="bkyz2-fmaaa-aaaaa-qaaaq-cai",
        host="http://backend.test",
        transport=httpx.ASGITransport(app=backend_app),
    )
