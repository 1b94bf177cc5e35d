"""Mock Digital World backend speaking the actor call envelope"""

from fastapi import FastAPI, Header
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import os

from digital_world_frontend.utils.js_format import decimal_to_int

app = FastAPI(title="Mock Digital World Backend", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/backend_stub") if os.path.exists("/backend_stub") else Path(__file__).resolve().parents[1] / "backend_stub"

ANONYMOUS_PRINCIPAL = "2vxsx-fae"
NAT64_MAX = 2**64 - 1

CANISTER_REJECT = 4
CANISTER_ERROR = 5


class ArgumentError(Exception):
    pass


def load_items() -> Dict[int, dict]:
    data = json.loads((DATA_DIR / "items.json").read_text())
    return {item["item_id"]: {"owner": item["owner"], "price": int(item["price"])} for item in data["items"]}


ITEMS: Dict[int, dict] = load_items()
SALES: Dict[int, dict] = {}


def reset_state() -> None:
    """Reload seeded items and forget all sales"""
    ITEMS.clear()
    ITEMS.update(load_items())
    SALES.clear()


def nat64_arg(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= NAT64_MAX:
        raise ArgumentError(f"Invalid nat64 argument: {value!r}")
    return value


def nat_arg(value: Any) -> int:
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        raise ArgumentError(f"Invalid nat argument: {value!r}")
    return decimal_to_int(value)


def text_arg(value: Any) -> str:
    if not isinstance(value, str):
        raise ArgumentError(f"Invalid text argument: {value!r}")
    return value


def greet(caller: str, name: Any) -> str:
    return f"Hello, {text_arg(name)}! Welcome to the Digital World."


def buy_item(caller: str, item_id: Any, amount: Any) -> dict:
    item_id, amount = nat64_arg(item_id), nat_arg(amount)
    item = ITEMS.get(item_id)
    if item is None:
        return {"Err": "Item não encontrado"}
    if amount < item["price"]:
        return {"Err": "Valor insuficiente para comprar o item"}

    SALES[item_id] = {"buyer": caller, "amount": amount}
    return {"Ok": f"Item {item_id} comprado por {caller}"}


def claim_sale(caller: str, item_id: Any) -> dict:
    item_id = nat64_arg(item_id)
    sale = SALES.get(item_id)
    if sale is None:
        return {"Err": "Item não encontrado nas vendas"}
    return {"Ok": f"Venda do item {item_id} reivindicada por {sale['buyer']}"}


METHODS = {"greet": (greet, 1), "buy_item": (buy_item, 2), "claim_sale": (claim_sale, 1)}


def rejected(code: int, message: str) -> dict:
    return {"status": "rejected", "reject_code": code, "reject_message": message}


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/api/canister/{canister_id}/call")
def call(
    canister_id: str,
    body: Dict[str, Any],
    x_caller_principal: Optional[str] = Header(default=None),
):
    method_name = body.get("method_name")
    args: List[Any] = body.get("args", [])
    if method_name not in METHODS:
        return rejected(CANISTER_REJECT, f"Canister {canister_id} has no update method '{method_name}'")

    handler, arity = METHODS[method_name]
    if len(args) != arity:
        return rejected(CANISTER_ERROR, f"Expected {arity} arguments for {method_name}, got {len(args)}")

    try:
        reply = handler(x_caller_principal or ANONYMOUS_PRINCIPAL, *args)
    except ArgumentError as e:
        return rejected(CANISTER_ERROR, str(e))
    return {"status": "replied", "reply": reply}
