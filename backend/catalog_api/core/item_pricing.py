"""Item Pricing: derives totalAmount from baseAmount and discount.

Invariants:
    - total_amount == base_amount - discount, missing operands count as 0
    - discount larger than base_amount is allowed (negative totals pass through)
"""


def compute_total_amount(
    base_amount: float | None, discount: float | None,
) -> float:
    """Server-side total. Client-supplied totals are never trusted."""
    return (base_amount or 0) - (discount or 0)
