"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from digital_world_frontend.domain.models import Actor
from digital_world_frontend.infrastructure.clients.actor import create_actor


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_actor() -> Actor:
    """Provide backend actor handle"""
    return create_actor()
