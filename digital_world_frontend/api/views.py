"""Page routes: GET / and the three form submissions"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from digital_world_frontend.api.dependencies import get_actor, get_request_id
from digital_world_frontend.api.schemas import GreetForm, ViewForm
from digital_world_frontend.api.templates import render_view
from digital_world_frontend.domain.controller import ViewController
from digital_world_frontend.domain.models import Actor, ViewState

router = APIRouter()


def build_controller(request: Request, form: ViewForm, actor: Actor) -> ViewController:
    """Rebuild the page's view state from the submitted form"""
    state = ViewState(greeting=form.greeting, result=form.result)
    controller = ViewController(state, actor, get_request_id(request))

    # Input fields as last typed on the page
    controller.set_digital_world_id(form.digital_world_id)
    controller.set_amount(form.amount)
    return controller


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Fresh page: every view field starts empty"""
    return render_view(request, ViewState())


@router.post("/greet", response_class=HTMLResponse)
async def greet(
    request: Request,
    form: Annotated[GreetForm, Form()],
    actor: Actor = Depends(get_actor),
):
    """
    Submit the greeting form.

    A failed greet call is not shown to the user: it is logged as an
    unhandled failure and the page comes back with the greeting unchanged.
    """
    controller = build_controller(request, form, actor)

    try:
        await controller.submit_greeting(form.name)
    except Exception as e:
        logging.error(f"Unhandled greeting failure: {e}", extra={"request_id": controller.request_id})

    return render_view(request, controller.state)


@router.post("/buy", response_class=HTMLResponse)
async def buy_item(
    request: Request,
    form: Annotated[ViewForm, Form()],
    actor: Actor = Depends(get_actor),
):
    """Submit the purchase form with the shared identifier and amount"""
    controller = build_controller(request, form, actor)
    await controller.submit_purchase()
    return render_view(request, controller.state)


@router.post("/claim", response_class=HTMLResponse)
async def claim_sale(
    request: Request,
    form: Annotated[ViewForm, Form()],
    actor: Actor = Depends(get_actor),
):
    """Submit the claim form with the shared identifier"""
    controller = build_controller(request, form, actor)
    await controller.submit_claim()
    return render_view(request, controller.state)
