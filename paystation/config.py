"""
Central Configuration File (SSOT).
"""

# --- Business Rules ---
ACCEPTED_COINS = (5, 10, 25)

# Exchange rate: every UNITS_PER_STEP cents buys MINUTES_PER_STEP minutes
UNITS_PER_STEP: int = 5
MINUTES_PER_STEP: int = 2

CURRENCY = "USD"
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
}
CENTS_PER_UNIT: int = 100

# --- Simulation Settings ---
SIM_CRIT_DELAY_SEC: float = 0.0  # pedagogical critical-section delay
