"""Pydantic models for the backend actor call envelope"""

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, Field


class CallRequest(BaseModel):
    """Body of POST /api/canister/{canister_id}/call"""

    method_name: str = Field(..., min_length=1)
    args: List[Any] = Field(default_factory=list)


class CallResponse(BaseModel):
    """Reply envelope: either a reply value or a rejection"""

    status: Literal["replied", "rejected"]
    reply: Any = None
    reject_code: Optional[int] = None
    reject_message: Optional[str] = None
