"""Stock rules as pure functions.

Deterministic and free of I/O so they can be tested without a bus or a
machine.
"""

from __future__ import annotations

from vendbus.domain.enums import EventType


def is_low_stock(stock_level: int, threshold: int) -> bool:
    """Return True when *stock_level* sits in the inclusive low band."""
    return stock_level <= threshold


def detect_crossing(old: int, new: int, threshold: int) -> EventType | None:
    """Detect a threshold crossing between two consecutive stock levels.

    Edge triggered: returns ``STOCK_LEVEL_OK`` when the level leaves the
    low band, ``LOW_STOCK_WARNING`` when it enters it, and ``None`` when
    both values sit on the same side of *threshold*.
    """
    was_low = is_low_stock(old, threshold)
    now_low = is_low_stock(new, threshold)
    if was_low and not now_low:
        return EventType.STOCK_LEVEL_OK
    if not was_low and now_low:
        return EventType.LOW_STOCK_WARNING
    return None
