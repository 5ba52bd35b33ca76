"""Coupon registry API routes"""

from fastapi import APIRouter, Depends

from ..models.coupon import (
    Coupon,
    CouponCreateRequest,
    CouponListResponse,
    CouponResponse,
)
from ..security.admin import AdminContext, require_admin
from ..services import StorefrontService, get_storefront
from .errors import raise_for_failure

router = APIRouter(prefix="/api/coupons", tags=["Coupons"])


@router.get("", response_model=CouponListResponse)
async def list_coupons(storefront: StorefrontService = Depends(get_storefront)):
    """List registered coupons"""
    coupons = storefront.list_coupons()
    return CouponListResponse(coupons=coupons, total=len(coupons))


@router.post("", response_model=CouponResponse, status_code=201)
async def create_coupon(
    request: CouponCreateRequest,
    admin: AdminContext = Depends(require_admin),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Register a coupon; codes must be unique"""
    result = storefront.create_coupon(Coupon(**request.model_dump()))
    raise_for_failure(result)
    return CouponResponse(coupon=result.data, message=result.message)


@router.delete("/{code}", response_model=CouponResponse)
async def delete_coupon(
    code: str,
    admin: AdminContext = Depends(require_admin),
    storefront: StorefrontService = Depends(get_storefront),
):
    """
    Remove a coupon from the registry.

    If the cart has this coupon selected, the selection is cleared.
    """
    result = storefront.delete_coupon(code)
    raise_for_failure(result)
    return CouponResponse(message=result.message)
