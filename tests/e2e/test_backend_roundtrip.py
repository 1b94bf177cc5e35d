"""
E2E tests against the in-process mock backend.

The real actor client talks to mocks/backend_server over httpx.ASGITransport,
so no server needs to be running.
"""

import pytest
from fastapi.testclient import TestClient

from digital_world_frontend.api.dependencies import get_actor
from digital_world_frontend.api.main import create_app
from digital_world_frontend.domain.controller import ViewController
from digital_world_frontend.domain.models import ViewState
from digital_world_frontend.infrastructure.clients.actor import HttpActor

pytestmark = pytest.mark.integration


async def test_greet_roundtrip(backend_actor: HttpActor):
    state = ViewState()
    await ViewController(state, backend_actor).submit_greeting("Alice")
    assert state.greeting == "Hello, Alice! Welcome to the Digital World."


async def test_buy_then_claim(backend_actor: HttpActor):
    """Test a purchase is recorded and its sale can then be claimed"""
    state = ViewState()
    controller = ViewController(state, backend_actor)
    controller.set_digital_world_id("3")
    controller.set_amount("10")

    await controller.submit_purchase()
    assert state.result == "Compra realizada com sucesso: Item 3 comprado por 2vxsx-fae"

    await controller.submit_claim()
    assert state.result == "Reivindicação de venda realizada: Venda do item 3 reivindicada por 2vxsx-fae"


async def test_buy_with_insufficient_amount(backend_actor: HttpActor):
    state = ViewState(digital_world_id="1", amount="99")
    await ViewController(state, backend_actor).submit_purchase()
    assert state.result == "Erro ao realizar compra: Valor insuficiente para comprar o item"


async def test_buy_with_amount_beyond_64_bits(backend_actor: HttpActor):
    """Test arbitrary-precision amounts survive the wire"""
    state = ViewState(digital_world_id="7", amount="250000000000000000000000")
    await ViewController(state, backend_actor).submit_purchase()
    assert state.result == "Compra realizada com sucesso: Item 7 comprado por 2vxsx-fae"


async def test_claim_without_sale(backend_actor: HttpActor):
    state = ViewState(digital_world_id="3")
    await ViewController(state, backend_actor).submit_claim()
    assert state.result == "Erro ao reivindicar venda: Item não encontrado nas vendas"


@pytest.mark.parametrize("digital_world_id", ["abc", "1.5", "-1"])
async def test_invalid_identifier_rejected(backend_actor: HttpActor, digital_world_id: str):
    """Scenario D against the real client: the call fails on its nat64 argument"""
    state = ViewState(digital_world_id=digital_world_id, amount="10")
    await ViewController(state, backend_actor).submit_purchase()
    assert state.result.startswith("Erro ao realizar compra: Invalid nat64 argument: ")


def test_page_against_mock_backend(backend_actor: HttpActor):
    """Test the whole page flow with the real actor client"""
    app = create_app()
    app.dependency_overrides[get_actor] = lambda: backend_actor
    client = TestClient(app)

    response = client.post("/buy", data={"digital_world_id": "abc", "amount": "10"})
    assert "Erro ao realizar compra: Invalid nat64 argument: NaN" in response.text

    response = client.post("/buy", data={"digital_world_id": "3", "amount": "ten"})
    assert "Erro ao realizar compra: Cannot convert ten to a BigInt" in response.text

    response = client.post("/claim", data={"digital_world_id": "99"})
    assert "Erro ao reivindicar venda: Item não encontrado nas vendas" in response.text


async def test_buy_with_amount_beyond_str_digits_limit(backend_actor: HttpActor):
    """Test a 5000-digit amount is accepted end to end"""
    state = ViewState(digital_world_id="3", amount="1" * 5000)
    await ViewController(state, backend_actor).submit_purchase()
    assert state.result == "Compra realizada com sucesso: Item 3 comprado por 2vxsx-fae"


async def test_identifier_beyond_nat64_shown_as_javascript_number(backend_actor: HttpActor):
    """Test 2**64 typed as text is rejected and rendered with JavaScript digits"""
    state = ViewState(digital_world_id="18446744073709551616", amount="10")
    await ViewController(state, backend_actor).submit_purchase()
    assert state.result == "Erro ao realizar compra: Invalid nat64 argument: 18446744073709552000"
