"""Pydantic schemas for page form submissions"""

from pydantic import BaseModel


class ViewForm(BaseModel):
    """View fields carried by every form on the page"""

    greeting: str = ""
    result: str = ""
    digital_world_id: str = ""
    amount: str = ""


class GreetForm(ViewForm):
    """POST /greet: the name field plus the carried view fields"""

    name: str = ""
