"""Domain models - view state and the actor contract the controller talks to"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class ViewState:
    """Fields reflected directly into the rendered page"""

    greeting: str = ""
    result: str = ""
    digital_world_id: str = ""  # shared by the purchase and claim forms
    amount: str = ""


class Actor(Protocol):
    """Remote handle for the Digital World backend"""

    async def greet(self, name: str) -> str: ...

    async def buy_item(self, digital_world_id: float, amount: int) -> Any: ...

    async def claim_sale(self, digital_world_id: float) -> Any: ...
