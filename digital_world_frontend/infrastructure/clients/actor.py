"""Backend actor HTTP client for the Digital World canister"""

import json
import time
from typing import Any, Callable, List, Sequence, Tuple

import httpx
from pydantic import ValidationError

from digital_world_frontend.config import settings
from digital_world_frontend.domain.exceptions import (
    ActorRejectError,
    ActorTransportError,
    ArgumentEncodingError,
    CallResultError,
)
from digital_world_frontend.infrastructure.clients.encoding import (
    decode_result,
    encode_nat,
    encode_nat64,
    encode_text,
)
from digital_world_frontend.infrastructure.clients.wire import CallRequest, CallResponse
from digital_world_frontend.infrastructure.observability.logging import log_actor_call
from digital_world_frontend.infrastructure.observability.metrics import (
    actor_latency_histogram,
    record_actor_call,
)


class HttpActor:
    """Remote handle whose methods call the backend canister over HTTP"""

    def __init__(
        self,
        canister_id: str | None = None,
        host: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.canister_id = canister_id or settings.canister_id
        self.host = (host or settings.backend_host).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.actor_timeout_seconds
        self.transport = transport

    @property
    def call_url(self) -> str:
        return f"{self.host}/api/canister/{self.canister_id}/call"

    async def greet(self, name: str) -> str:
        args = self._encode_args("greet", [(encode_text, name)])
        return await self._call("greet", args)

    async def buy_item(self, digital_world_id: float, amount: int) -> Any:
        args = self._encode_args("buy_item", [(encode_nat64, digital_world_id), (encode_nat, amount)])
        return await self._call("buy_item", args, returns_result=True)

    async def claim_sale(self, digital_world_id: float) -> Any:
        args = self._encode_args("claim_sale", [(encode_nat64, digital_world_id)])
        return await self._call("claim_sale", args, returns_result=True)

    def _encode_args(self, method_name: str, typed_args: Sequence[Tuple[Callable[[Any], Any], Any]]) -> List[Any]:
        try:
            return [encode(value) for encode, value in typed_args]
        except ArgumentEncodingError:
            record_actor_call(method_name, "invalid_argument")
            raise

    async def _call(self, method_name: str, args: List[Any], returns_result: bool = False) -> Any:
        """
        Issue one call and return its reply value.

        Raises:
            ActorRejectError: backend rejected the call
            CallResultError: method replied with an Err variant
            ActorTransportError: timeout, HTTP error, or malformed envelope
        """
        start_time = time.time()
        outcome = "transport_error"
        try:
            with actor_latency_histogram.labels(method=method_name).time():
                response = await self._post(CallRequest(method_name=method_name, args=args))

            if response.status == "rejected":
                outcome = "rejected"
                raise ActorRejectError(
                    response.reject_message or f"Call to {method_name} was rejected",
                    reject_code=response.reject_code,
                )

            if not returns_result:
                outcome = "replied"
                return response.reply

            try:
                value = decode_result(response.reply)
            except CallResultError:
                outcome = "err"
                raise
            outcome = "replied"
            return value
        finally:
            record_actor_call(method_name, outcome)
            log_actor_call(method_name, outcome, (time.time() - start_time) * 1000)

    async def _post(self, request: CallRequest) -> CallResponse:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(self.call_url, json=request.model_dump())
                response.raise_for_status()
                return CallResponse.model_validate(response.json())

            except httpx.TimeoutException as e:
                raise ActorTransportError(f"Backend actor timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ActorTransportError(f"Backend actor error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ActorTransportError(f"Backend actor unreachable: {e}") from e
            except (json.JSONDecodeError, ValidationError) as e:
                raise ActorTransportError(f"Invalid response from backend actor: {e}") from e


def create_actor(canister_id: str | None = None, **kwargs: Any) -> HttpActor:
    """Build the actor handle for a canister (defaults from settings)"""
    return HttpActor(canister_id=canister_id, **kwargs)
