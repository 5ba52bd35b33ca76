"""
Admin access dependency

Admin routes (catalog and coupon management) are open when no admin key
is configured. Once ADMIN_API_KEY is set they require a matching
X-Admin-Key header. The same check decides the price display mode.
"""

import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException

from ..core.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class AdminContext:
    """Result of the admin check for one request"""
    is_admin: bool
    key_configured: bool


class AdminDependency:
    """
    FastAPI dependency for admin access.

    Use require_admin on routes that mutate the catalog or coupon
    registry, and display_mode where only the price format depends on it.
    """

    def __init__(self, require_admin: bool = False):
        """
        Args:
            require_admin: If True, reject requests that are not admin
        """
        self.require_admin = require_admin

    async def __call__(
        self,
        x_admin_key: Optional[str] = Header(None),
        x_admin_mode: Optional[str] = Header(None),
        settings: Settings = Depends(get_settings),
    ) -> AdminContext:
        if settings.admin_protected:
            is_admin = x_admin_key is not None and hmac.compare_digest(
                x_admin_key, settings.admin_api_key
            )
        else:
            # Open store: admin screens are a display toggle
            is_admin = self.require_admin or (x_admin_mode or "").lower() in ("1", "true", "yes")

        if self.require_admin and not is_admin:
            logger.warning("Rejected admin request without a valid admin key")
            raise HTTPException(
                status_code=401,
                detail="This endpoint requires a valid X-Admin-Key header",
            )

        return AdminContext(is_admin=is_admin, key_configured=settings.admin_protected)


# Dependency instances
require_admin = AdminDependency(require_admin=True)
display_mode = AdminDependency(require_admin=False)
