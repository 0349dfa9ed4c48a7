"""
Connections API endpoints.

Failed business rules come back as 400 with the service's message.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_connection_service
from shared.models import ActionResult, AuthenticatedUser, PublicProfile

from .interfaces import IConnectionService
from .models import ConnectionRequestView, ConnectionView

router = APIRouter()


def _ensure_success(result: ActionResult) -> ActionResult:
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return result


@router.get("", response_model=list[ConnectionView])
async def list_connections(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> list[ConnectionView]:
    """List the current user's accepted connections."""
    return await service.list_connections(user.id)


@router.get("/pending", response_model=list[ConnectionRequestView])
async def list_pending(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> list[ConnectionRequestView]:
    """List pending requests sent to the current user."""
    return await service.list_pending_received(user.id)


@router.get("/suggestions", response_model=list[PublicProfile])
async def suggestions(
    limit: int = Query(default=10, description="Maximum number of suggestions (1-50)"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> list[PublicProfile]:
    """Suggest people to connect with, in random order."""
    return await service.suggest_users(user.id, limit)


@router.post("/request/{user_id}", response_model=ActionResult)
async def send_request(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ActionResult:
    """Send a connection request to another user."""
    return _ensure_success(await service.send_request(user.id, user_id))


@router.put("/{connection_id}/accept", response_model=ActionResult)
async def accept_request(
    connection_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ActionResult:
    """Accept a pending request addressed to the current user."""
    return _ensure_success(await service.accept_request(connection_id, user.id))


@router.put("/{connection_id}/reject", response_model=ActionResult)
async def reject_request(
    connection_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ActionResult:
    """Reject a pending request addressed to the current user."""
    return _ensure_success(await service.reject_request(connection_id, user.id))


@router.delete("/{connection_id}", response_model=ActionResult)
async def remove_connection(
    connection_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IConnectionService = Depends(get_connection_service),
) -> ActionResult:
    """Remove a connection or request the current user is part of."""
    return _ensure_success(await service.remove_connection(connection_id, user.id))
