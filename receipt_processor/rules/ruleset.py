# receipt_processor/rules/ruleset.py
from __future__ import annotations
from datetime import time
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Tuple

from ..schemas import Receipt
from ..utils.logging import logger

# -----------------------------
# Tunables
# -----------------------------
WEIGHTS = {
    "round_total": 50,
    "quarter_multiple": 25,
    "item_pair": 5,
    "odd_day": 6,
    "afternoon_window": 10,
}

DESCRIPTION_LENGTH_DIVISOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)

RuleResult = Tuple[int, str]
Rule = Callable[[Receipt], RuleResult]

# -----------------------------
# Helpers
# -----------------------------
def to_cents(amount: Decimal) -> int:
    """Exact integer cents for a currency amount (scale 2 assumed)."""
    return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))

def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

# -----------------------------
# Rules
# Each rule is pure: receipt in, (points, reason) out.
# -----------------------------
def alphanumeric_retailer(receipt: Receipt) -> RuleResult:
    retailer = receipt.retailer or ""
    if not retailer:
        return 0, "retailer is empty"
    count = sum(1 for ch in retailer if ch.isalnum())
    return count, f"retailer {retailer!r} has {count} alphanumeric characters"

def round_total(receipt: Receipt) -> RuleResult:
    cents = to_cents(receipt.total)
    dollars, fraction = divmod(cents, 100)
    if fraction == 0 and dollars > 0:
        return WEIGHTS["round_total"], f"total {receipt.total} has no cents"
    return 0, f"total {receipt.total} is not a round dollar amount"

def quarter_multiple(receipt: Receipt) -> RuleResult:
    if to_cents(receipt.total) % 25 == 0:
        return WEIGHTS["quarter_multiple"], f"total {receipt.total} is a multiple of 0.25"
    return 0, f"total {receipt.total} is not a multiple of 0.25"

def item_pairs(receipt: Receipt) -> RuleResult:
    pairs = len(receipt.items or []) // 2
    return pairs * WEIGHTS["item_pair"], f"{pairs} pairs of items"

def description_length(receipt: Receipt) -> RuleResult:
    total = 0
    matched = []
    for item in receipt.items or []:
        desc = item.short_description.strip()
        if not desc or len(desc) % DESCRIPTION_LENGTH_DIVISOR:
            logger.debug("item %r: trimmed length %d not a multiple of %d",
                         item.short_description, len(desc), DESCRIPTION_LENGTH_DIVISOR)
            continue
        product = item.price * DESCRIPTION_PRICE_MULTIPLIER
        earned = round_half_up(product)
        logger.debug("item %r: price %s x %s = %s -> %d",
                     desc, item.price, DESCRIPTION_PRICE_MULTIPLIER, product, earned)
        total += earned
        matched.append(desc)
    if not matched:
        return 0, "no item description has a length divisible by 3"
    return total, f"descriptions {matched} have lengths divisible by 3"

def odd_day(receipt: Receipt) -> RuleResult:
    day = receipt.purchase_date.day
    if day % 2 == 1:
        return WEIGHTS["odd_day"], f"purchase day {day} is odd"
    return 0, f"purchase day {day} is even"

def afternoon_window(receipt: Receipt) -> RuleResult:
    t = receipt.purchase_time
    if AFTERNOON_START < t < AFTERNOON_END:
        return WEIGHTS["afternoon_window"], f"purchase time {t.isoformat()} is between 2:00pm and 4:00pm"
    return 0, f"purchase time {t.isoformat()} is outside 2:00pm-4:00pm"

# Fixed evaluation order; traces are reproducible across runs.
DEFAULT_RULES: Tuple[Rule, ...] = (
    alphanumeric_retailer,
    round_total,
    quarter_multiple,
    item_pairs,
    description_length,
    odd_day,
    afternoon_window,
)
