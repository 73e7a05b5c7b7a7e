from typing import Optional
import math

from price_engine.schemas.models import Discount


def discount(selling_price: float, list_price: Optional[float] = None) -> Discount:
    """Discount claimed by a list price over a selling price.

    No list price, or one not above the selling price, means no discount.
    The percentage rounds half up, so 12.5% is reported as 13.
    """
    if not list_price or list_price <= selling_price:
        return Discount()

    amount = list_price - selling_price
    percentage = math.floor(amount * 100 / list_price + 0.5)
    return Discount(percentage=percentage, amount=amount)
