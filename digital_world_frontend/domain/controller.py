"""Call orchestration between page submissions, the backend actor and the view state"""

import time

from digital_world_frontend.domain.conversions import to_bigint, to_number
from digital_world_frontend.domain.models import Actor, ViewState
from digital_world_frontend.infrastructure.observability.logging import log_view_update
from digital_world_frontend.infrastructure.observability.metrics import record_view_update
from digital_world_frontend.utils.js_format import format_js_value

PURCHASE_SUCCESS = "Compra realizada com sucesso: {}"
PURCHASE_FAILURE = "Erro ao realizar compra: {}"
CLAIM_SUCCESS = "Reivindicação de venda realizada: {}"
CLAIM_FAILURE = "Erro ao reivindicar venda: {}"


class ViewController:
    """
    Owns the view state and binds each page action to exactly one actor call.

    Each submit awaits its call and applies a single field write. Nothing
    guards against overlapping submissions: purchase and claim both write
    ``result``, and whichever call completes last wins.
    """

    def __init__(self, state: ViewState, actor: Actor, request_id: str = "unknown"):
        self.state = state
        self.actor = actor
        self.request_id = request_id

    def set_digital_world_id(self, text: str) -> None:
        self.state.digital_world_id = text

    def set_amount(self, text: str) -> None:
        self.state.amount = text

    async def submit_greeting(self, name: str) -> None:
        """
        Ask the backend to greet ``name`` and show the reply.

        Failures are not handled here: they propagate to the caller and the
        greeting keeps its previous value.
        """
        start_time = time.time()
        self.state.greeting = await self.actor.greet(name)
        self._record("greet", "success", start_time)

    async def submit_purchase(self) -> None:
        """Buy ``amount`` of the current Digital World item"""
        start_time = time.time()
        try:
            value = await self.actor.buy_item(
                to_number(self.state.digital_world_id),
                to_bigint(self.state.amount),
            )
            self.state.result = PURCHASE_SUCCESS.format(format_js_value(value))
            outcome = "success"
        except Exception as e:
            self.state.result = PURCHASE_FAILURE.format(e)
            outcome = "failure"
        self._record("buy_item", outcome, start_time)

    async def submit_claim(self) -> None:
        """Claim the sale of the current Digital World item"""
        start_time = time.time()
        try:
            value = await self.actor.claim_sale(to_number(self.state.digital_world_id))
            self.state.result = CLAIM_SUCCESS.format(format_js_value(value))
            outcome = "success"
        except Exception as e:
            self.state.result = CLAIM_FAILURE.format(e)
            outcome = "failure"
        self._record("claim_sale", outcome, start_time)

    def _record(self, operation: str, outcome: str, start_time: float) -> None:
        duration_ms = (time.time() - start_time) * 1000
        record_view_update(operation, outcome)
        log_view_update(self.request_id, operation, outcome, duration_ms)
