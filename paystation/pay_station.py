# -*- coding: utf-8 -*-
"""
Pay Station - single transaction state object.

- Accept payment; calculate parking time; issue receipts.
- Protect every operation with an RLock so related fields are updated
  together (no reader sees a coin counted but not yet added to the amount).
- Validate coins centrally via coins.py before touching any state.
- Returned coin mappings are copies; callers never alias internal state.
"""
from __future__ import annotations

import logging
import time
from threading import RLock
from typing import Dict

import paystation.config as cfg
from .coins import validate_coin, minutes_for, fmt_cents
from .errors import InvalidCoin
from .receipt import Receipt

logger = logging.getLogger(__name__)


class PayStation:
    def __init__(self):
        self._inserted_so_far = 0
        self._inserted_coins: Dict[int, int] = {}
        self._total = 0
        self._lock = RLock()

    def __repr__(self) -> str:
        return (f"PayStation(inserted={fmt_cents(self._inserted_so_far)}, "
                f"time_bought={self.time_bought}, total={fmt_cents(self._total)})")

    # -------- transaction --------
    def add_payment(self, coin_value: int) -> None:
        try:
            coin = validate_coin(coin_value)
        except InvalidCoin:
            logger.warning("Rejected coin %r", coin_value)
            raise
        with self._lock:
            count = self._inserted_coins.get(coin, 0)
            amount = self._inserted_so_far
            if cfg.SIM_CRIT_DELAY_SEC > 0:
                time.sleep(cfg.SIM_CRIT_DELAY_SEC)
            self._inserted_coins[coin] = count + 1
            self._inserted_so_far = amount + coin
            logger.debug("Accepted %s coin, display now %d min",
                         coin, self.time_bought)

    @property
    def time_bought(self) -> int:
        """Minutes bought by the current transaction, derived from the amount."""
        with self._lock:
            return minutes_for(self._inserted_so_far)

    def read_display(self) -> int:
        return self.time_bought

    def buy(self) -> Receipt:
        with self._lock:
            receipt = Receipt(self.time_bought)
            amount = self._inserted_so_far
            if cfg.SIM_CRIT_DELAY_SEC > 0:
                time.sleep(cfg.SIM_CRIT_DELAY_SEC)
            self._total += amount
            self._reset()
        logger.info("Sold %d min for %s", receipt.value, fmt_cents(amount))
        return receipt

    def cancel(self) -> Dict[int, int]:
        """Abort the transaction and return the coins to hand back."""
        with self._lock:
            returned = dict(self._inserted_coins)
            amount = self._inserted_so_far
            self._reset()
        logger.info("Cancelled transaction, returning %s", fmt_cents(amount))
        return returned

    def _reset(self) -> None:
        self._inserted_so_far = 0
        self._inserted_coins = {}

    # -------- administration --------
    def empty(self) -> int:
        with self._lock:
            collected = self._total
            self._total = 0
        logger.info("Emptied station, collected %s", fmt_cents(collected))
        return collected

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    @property
    def inserted(self) -> int:
        with self._lock:
            return self._inserted_so_far

    def get_inserted(self) -> int:
        return self.inserted

    def get_coin_count(self, denomination: int) -> int:
        """Count of one denomination in this transaction; 0 if none inserted."""
        with self._lock:
            return self._inserted_coins.get(denomination, 0)

    def get_inserted_coins(self) -> Dict[int, int]:
        with self._lock:
            return dict(self._inserted_coins)
