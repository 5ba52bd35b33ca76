"""Notification API routes"""

from datetime import datetime
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..models.results import Severity
from ..services import NotificationLog, StorefrontService, get_storefront

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


class NotificationView(BaseModel):
    """Outcome message for the client to display"""
    id: str
    message: str
    severity: Severity
    created_at: datetime


@router.get("", response_model=list[NotificationView])
async def list_notifications(
    limit: int = Query(10, ge=1, le=50, description="Max results"),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Latest outcome messages, newest last"""
    if not isinstance(storefront.notifier, NotificationLog):
        return []
    return [
        NotificationView(
            id=n.id,
            message=n.message,
            severity=n.severity,
            created_at=n.created_at,
        )
        for n in storefront.notifier.recent(limit)
    ]
