# receipt_processor/rules/engine.py
from typing import Any, Dict, Sequence

from ..schemas import Receipt
from ..utils.logging import logger
from .ruleset import DEFAULT_RULES, Rule

def score_receipt(receipt: Receipt, rules: Sequence[Rule] = DEFAULT_RULES) -> Dict[str, Any]:
    """
    Returns:
      {
        "points": int,            # sum of every rule contribution
        "rules": {name: int},     # per-rule contribution, evaluation order
        "reasons": [str],         # per-rule trace, evaluation order
      }
    Every rule runs; nothing short-circuits.
    """
    points = 0
    breakdown: Dict[str, int] = {}
    reasons = []
    for rule in rules:
        inc, why = rule(receipt)
        logger.info("rule %s: +%d (%s)", rule.__name__, inc, why)
        breakdown[rule.__name__] = inc
        reasons.append(why)
        points += inc
    return {"points": points, "rules": breakdown, "reasons": reasons}
