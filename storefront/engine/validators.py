"""
Input validation for storefront admin forms.

The predicates never raise; they answer True/False. The `validate_*`
helpers normalize raw input and report a message when the value had to be
rejected or clamped, leaving it to the caller to surface the message.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

MAX_STOCK = 9999
MAX_DISCOUNT_AMOUNT = 100000
MAX_DISCOUNT_RATE_PERCENT = 100

COUPON_CODE_PATTERN = re.compile(r"^[A-Z0-9]{4,12}$")
_NON_DIGITS = re.compile(r"\D")
_DIGITS_ONLY = re.compile(r"^[0-9]+$")

PRICE_ERROR = "Price must be greater than 0"
STOCK_NEGATIVE_ERROR = "Stock must be 0 or more"
STOCK_RANGE_ERROR = f"Stock cannot exceed {MAX_STOCK}"
COUPON_CODE_ERROR = "Coupon codes must be 4-12 uppercase letters or digits"
DISCOUNT_RATE_ERROR = "Discount rate cannot exceed 100%"
DISCOUNT_AMOUNT_ERROR = f"Discount amount cannot exceed {MAX_DISCOUNT_AMOUNT:,}"


@dataclass(frozen=True)
class ValidatedInput:
    """Normalized input value and the error message, if any"""
    value: Any
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def is_valid_price(price: float) -> bool:
    return price > 0


def is_valid_stock(stock: int) -> bool:
    return stock >= 0


def is_valid_stock_range(stock: int, max: int = MAX_STOCK) -> bool:
    return 0 <= stock <= max


def is_valid_coupon_code(code: str) -> bool:
    """Exact match of 4-12 uppercase ASCII letters or digits"""
    return COUPON_CODE_PATTERN.fullmatch(code) is not None


def is_valid_discount_rate(rate: float) -> bool:
    return 0 <= rate <= MAX_DISCOUNT_RATE_PERCENT


def is_valid_discount_amount(amount: float, max: float = MAX_DISCOUNT_AMOUNT) -> bool:
    return 0 <= amount <= max


def extract_numbers(value: str) -> str:
    """Strip every non-digit character"""
    return _NON_DIGITS.sub("", value)


def is_numeric_string(value: str) -> bool:
    return value == "" or _DIGITS_ONLY.fullmatch(value) is not None


def _parse_number(value: Union[str, float]) -> Optional[float]:
    if not isinstance(value, str):
        return value
    # Leading integer, the way a form field is read
    match = re.match(r"\s*([+-]?\d+)", value)
    return int(match.group(1)) if match else None


def validate_price_input(value: Union[str, float]) -> ValidatedInput:
    """Parse a price field; invalid input falls back to 0"""
    if value == "":
        return ValidatedInput(0)

    number = _parse_number(value)
    if number is None or not is_valid_price(number):
        return ValidatedInput(0, PRICE_ERROR)
    return ValidatedInput(number)


def validate_stock_input(value: Union[str, int]) -> ValidatedInput:
    """Parse a stock field; negative input falls back to 0, overflow clamps to the maximum"""
    if value == "":
        return ValidatedInput(0)

    number = _parse_number(value)
    if number is None or not is_valid_stock(number):
        return ValidatedInput(0, STOCK_NEGATIVE_ERROR)
    if not is_valid_stock_range(number):
        return ValidatedInput(MAX_STOCK, STOCK_RANGE_ERROR)
    return ValidatedInput(number)


def validate_coupon_code(code: str) -> ValidatedInput:
    if not is_valid_coupon_code(code):
        return ValidatedInput(code, COUPON_CODE_ERROR)
    return ValidatedInput(code)


def validate_discount_rate(rate: float) -> ValidatedInput:
    if rate < 0:
        return ValidatedInput(0)
    if not is_valid_discount_rate(rate):
        return ValidatedInput(MAX_DISCOUNT_RATE_PERCENT, DISCOUNT_RATE_ERROR)
    return ValidatedInput(rate)


def validate_discount_amount(amount: float) -> ValidatedInput:
    if amount < 0:
        return ValidatedInput(0)
    if not is_valid_discount_amount(amount):
        return ValidatedInput(MAX_DISCOUNT_AMOUNT, DISCOUNT_AMOUNT_ERROR)
    return ValidatedInput(amount)
