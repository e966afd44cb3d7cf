"""Ranking of products by recent base price change"""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..data.models import PriceChangeRecord
from ..models.analysis import PriceMover
from ..utils.time import utc_now
from .stats import PRICE_PLACES, round_to


def percent_change(old_price: float, new_price: float) -> float:
    """Percentage change from old to new, 0.0 when old is not positive"""
    if old_price <= 0:
        return 0.0
    return (new_price - old_price) / old_price * 100


def rank_price_movers(
    records: Sequence[PriceChangeRecord],
    timespan_days: int = 30,
    category_id: Optional[str] = None,
    limit: int = 10,
    as_of: Optional[datetime] = None
) -> list[PriceMover]:
    """
    Rank products by how far their price moved within a lookback window

    Each product's change is measured from the old price of its oldest
    change record in the window to its current base price. Product details
    come from the newest record. When the oldest record carries no old price
    the change is 0.0.

    Args:
        records: Price change records, any order
        timespan_days: Lookback window ending at as_of
        category_id: Only consider products in this category
        limit: Maximum number of products returned
        as_of: End of the window, defaults to now (UTC); must match the
            records' timestamps in timezone awareness

    Returns:
        Products sorted by absolute percentage change, largest first
    """
    if limit < 1:
        return []

    cutoff = (as_of or utc_now()) - timedelta(days=timespan_days)

    by_product: dict[str, list[PriceChangeRecord]] = {}
    for record in records:
        if record.timestamp < cutoff:
            continue
        if category_id and record.category_id != category_id:
            continue
        by_product.setdefault(record.product_id, []).append(record)

    movers = []
    for product_records in by_product.values():
        newest = max(product_records, key=lambda r: r.timestamp)
        oldest = min(product_records, key=lambda r: r.timestamp)

        # No reference price in the window leaves the change at zero
        if oldest.old_price is not None:
            old_price = oldest.old_price
            change = round_to(percent_change(old_price, newest.current_price), PRICE_PLACES)
        else:
            old_price = newest.old_price if newest.old_price is not None else 0.0
            change = 0.0

        movers.append(PriceMover(
            product_id=newest.product_id,
            name=newest.product_name,
            current_price=newest.current_price,
            old_price=old_price,
            percent_change=change,
            unit=newest.unit,
            category=newest.category,
            category_id=newest.category_id,
        ))

    movers.sort(key=lambda mover: abs(mover.percent_change), reverse=True)
    return movers[:limit]
