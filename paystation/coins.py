# -*- coding: utf-8 -*-
"""
Coin Handling Utilities.

Purpose:
- Centralizes business rules: uses ACCEPTED_COINS and the exchange rate
  from config.
- Validates coins before any state is touched, so a rejected coin never
  leaves a partial update behind.
- Derives parking time from the cumulative amount (never per coin).
"""

from typing import Mapping

import paystation.config as cfg
from .errors import InvalidCoin


def validate_coin(value) -> int:
    """
    Validate that value is an accepted denomination and return it.

    Rules:
    - Must be an int (bool is rejected even though it subclasses int).
    - Must be one of ACCEPTED_COINS.
    - Raises InvalidCoin if validation fails.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCoin(value)
    if value not in cfg.ACCEPTED_COINS:
        raise InvalidCoin(value)
    return value


def minutes_for(amount: int) -> int:
    """
    Parking minutes bought by a cumulative amount.

    Floor division is applied to the whole amount: 5 cents buy 2 minutes,
    and 7 cents still buy only 2.
    """
    return amount // cfg.UNITS_PER_STEP * cfg.MINUTES_PER_STEP


def coin_total(coins: Mapping[int, int]) -> int:
    """Weighted sum of a denomination -> count mapping."""
    return sum(denomination * count for denomination, count in coins.items())


def fmt_cents(amount: int) -> str:
    symbol = cfg.CURRENCY_SYMBOLS.get(cfg.CURRENCY, '$')
    units, cents = divmod(amount, cfg.CENTS_PER_UNIT)
    return f"{symbol}{units:,}.{cents:02d}"
