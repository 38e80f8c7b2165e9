# -*- coding: utf-8 -*-
"""
Concurrent Session Simulator

Goal:
- Drive many customers against ONE shared pay station and check that no
  money is lost or created by interleaved operations.
- Key proof: every accepted coin ends up collected (via buy), refunded
  (via cancel) or still pending in the open transaction, so drift == 0.

Collected metrics:
- attempted.total / succeeded.total / failed.total
- failed.by_reason: {invalid_coin, other}
- inserted_value, collected, refunded, pending, receipts
- avg_latency_ms, p95_latency_ms, ops_per_sec
- drift (int cents) - must be 0.
"""
from __future__ import annotations

import random
import time
from threading import Thread, Lock
from typing import Dict, List

import paystation.config as cfg
from .coins import coin_total
from .errors import InvalidCoin


INVALID_COINS = (1, 2, 3, 7, 17, 50, 100)


class SessionSimulator:
    """
    Runs concurrent insert / buy / cancel operations on a shared PayStation.

    Each user thread picks one operation at a time: buy with probability
    ``buy_prob``, cancel with ``cancel_prob``, insert an invalid coin with
    ``invalid_prob``, and otherwise insert a valid coin.
    """

    def __init__(self,
                 station,
                 users: int,
                 ops_per_user: int,
                 buy_prob: float = 0.2,
                 cancel_prob: float = 0.1,
                 invalid_prob: float = 0.1,
                 seed: int | None = None):
        assert users > 0 and ops_per_user > 0
        self.station = station
        self.users = users
        self.ops_per_user = ops_per_user
        self.buy_prob = max(0.0, min(1.0, float(buy_prob)))
        self.cancel_prob = max(0.0, min(1.0, float(cancel_prob)))
        self.invalid_prob = max(0.0, min(1.0, float(invalid_prob)))
        self._rng = random.Random(seed)
        self._rng_lock = Lock()

        # Shared metrics
        self._mtx = Lock()
        self._attempted = 0
        self._succeeded = 0
        self._failed = 0
        self._failed_by_reason = {
            'invalid_coin': 0,
            'other': 0,
        }
        self._inserted_value = 0
        self._refunded = 0
        self._receipts = 0
        self._latencies: List[float] = []  # seconds per op

    # ---------- helpers ----------
    def _pick_op(self):
        with self._rng_lock:
            r = self._rng.random()
            if r < self.buy_prob:
                return 'buy', None
            r -= self.buy_prob
            if r < self.cancel_prob:
                return 'cancel', None
            r -= self.cancel_prob
            if r < self.invalid_prob:
                return 'insert', self._rng.choice(INVALID_COINS)
            return 'insert', self._rng.choice(cfg.ACCEPTED_COINS)

    def _do_op(self):
        """Perform one operation and record its outcome and latency."""
        op, coin = self._pick_op()
        inserted = refunded = receipts = 0
        reason = None
        t0 = time.perf_counter()
        try:
            if op == 'insert':
                self.station.add_payment(coin)
                inserted = coin
            elif op == 'buy':
                self.station.buy()
                receipts = 1
            else:
                refunded = coin_total(self.station.cancel())
        except InvalidCoin:
            reason = 'invalid_coin'
        except Exception:
            reason = 'other'
        t1 = time.perf_counter()
        with self._mtx:
            self._attempted += 1
            self._latencies.append(t1 - t0)
            if reason is None:
                self._succeeded += 1
                self._inserted_value += inserted
                self._refunded += refunded
                self._receipts += receipts
            else:
                self._failed += 1
                self._failed_by_reason[reason] += 1

    def _worker(self):
        for _ in range(self.ops_per_user):
            self._do_op()

    # ---------- public ----------
    def run(self) -> Dict:
        """
        Run all user threads and return the stats dict.

        The station's open transaction and total at start are taken as the
        baseline, so a station that already holds money can be simulated.
        """
        start_pending = self.station.inserted
        start_total = self.station.total
        t0 = time.perf_counter()

        threads = [Thread(target=self._worker, daemon=True) for _ in range(self.users)]
        for th in threads: th.start()
        for th in threads: th.join()

        elapsed = max(time.perf_counter() - t0, 1e-9)
        collected = self.station.total - start_total
        pending = self.station.inserted
        drift = (start_pending + self._inserted_value
                 - collected - self._refunded - pending)

        lats = sorted(self._latencies)
        avg_ms = (sum(lats) / len(lats) * 1000.0) if lats else 0.0
        p95_ms = (lats[int(0.95 * (len(lats) - 1))] * 1000.0) if lats else 0.0

        return {
            'attempted': {'total': self._attempted},
            'succeeded': {'total': self._succeeded},
            'failed': {
                'total': self._failed,
                'by_reason': self._failed_by_reason.copy(),
            },
            'inserted_value': self._inserted_value,
            'collected': collected,
            'refunded': self._refunded,
            'pending': pending,
            'receipts': self._receipts,
            'ops_per_sec': float(self._attempted) / elapsed,
            'avg_latency_ms': round(avg_ms, 3),
            'p95_latency_ms': round(p95_ms, 3),
            'drift': drift,
        }
