# tripwizard/logic/costs.py

import math
from typing import Dict, Iterable

from tripwizard.models.trip import CostCategory, CostItem

# Amounts are assumed non-negative; CostItem rejects negative values before
# they ever reach these helpers.


def sum_by_category(items: Iterable[CostItem], category: CostCategory) -> float:
    """Sum of amounts for one category, 0 when nothing matches."""
    return math.fsum(item.amount for item in items if item.category == category)


def subtotal(items: Iterable[CostItem]) -> float:
    # fsum keeps the result independent of item order
    return math.fsum(item.amount for item in items)


def category_totals(items: Iterable[CostItem]) -> Dict[CostCategory, float]:
    """Per-category totals, with every category present."""
    items = list(items)
    return {category: sum_by_category(items, category) for category in CostCategory}
