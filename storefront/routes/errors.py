"""HTTP mapping of rejected storefront outcomes"""

from fastapi import HTTPException

from ..models.results import ErrorKind, OperationResult

NOT_FOUND_ERRORS = {ErrorKind.PRODUCT_NOT_FOUND, ErrorKind.COUPON_NOT_FOUND}


def raise_for_failure(result: OperationResult) -> None:
    """Raise 404 for missing resources and 400 for rejected business rules"""
    if result.success:
        return
    status_code = 404 if result.error in NOT_FOUND_ERRORS else 400
    raise HTTPException(status_code=status_code, detail=result.message)
