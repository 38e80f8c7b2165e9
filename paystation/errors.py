# -*- coding: utf-8 -*-
"""
Custom Exception Classes for the Pay Station Domain.

Purpose:
- Provide clear, domain-specific errors for pay station operations.
- Let calling code (tests, simulators, front ends) catch a rejected coin
  and carry on with the same transaction.
"""


class PayStationError(Exception):
    """Base class for all pay station errors."""
    pass


class InvalidCoin(PayStationError, ValueError):
    """
    Raised when a coin is not one of the accepted denominations.

    The rejected value is kept on ``value`` so a front end can hand the
    coin straight back to the customer.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid coin: {value}")
