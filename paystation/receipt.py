# -*- coding: utf-8 -*-
"""
Receipt - immutable record of parking time bought.

- Created by PayStation.buy() and handed to the caller.
- Holds only the minutes bought; it keeps no reference to the station,
  so later station activity cannot change it.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, repr=False)
class Receipt:
    """Minutes of parking time bought."""

    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", int(self.value))

    def __repr__(self) -> str:
        return f"Receipt(value={self.value} min)"
