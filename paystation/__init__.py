# -*- coding: utf-8 -*-
"""
Package for the core logic of the parking pay station.

Exposes the PayStation state object, its Receipt value and the InvalidCoin
error. Logging goes through the standard ``logging`` module; the package
only installs a NullHandler and leaves output to the application.
"""
import logging

from .errors import InvalidCoin, PayStationError
from .pay_station import PayStation
from .receipt import Receipt

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["PayStation", "Receipt", "InvalidCoin", "PayStationError"]
