from .bar_number import VALID_STATE_CODES, BarNumber, BarNumberFormat
from .jurisdiction import Jurisdiction, JurisdictionLevel
from .money import MAX_AMOUNT, Currency, Money

__all__ = [
    "MAX_AMOUNT",
    "VALID_STATE_CODES",
    "BarNumber",
    "BarNumberFormat",
    "Currency",
    "Jurisdiction",
    "JurisdictionLevel",
    "Money",
]
