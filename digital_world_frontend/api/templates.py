"""Template rendering utilities"""

from pathlib import Path
from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from digital_world_frontend.domain.models import ViewState

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_view(request: Request, state: ViewState) -> Response:
    """Render the page for the given view state"""
    return templates.TemplateResponse(request, "index.html", {"state": state})
