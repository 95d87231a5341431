"""Account records for the electricity billing system."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

RATE_PER_KWH = 10.50
"""Price in PHP charged for each kilowatt-hour consumed."""

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class Reading:
    """A meter reading: kilowatt-hours registered over a number of hours."""

    kilowatt: float
    hours: float

    def kw_per_hour(self) -> float:
        """Average consumption rate; follows IEEE rules when hours is zero."""
        if self.hours == 0:
            if self.kilowatt == 0 or math.isnan(self.kilowatt):
                return math.nan
            return math.copysign(math.inf, self.kilowatt) * math.copysign(1.0, self.hours)
        return self.kilowatt / self.hours


@dataclass
class Name:
    """Account holder's name."""

    first: str
    last: str


@dataclass
class Address:
    """Service address of an account."""

    street: str
    city: str
    zip_code: str


@dataclass
class RecordDate:
    """Date on which a bill was recorded."""

    month: int
    day: int
    year: int

    def month_name(self) -> str | None:
        """English name of the month, or None when the month is out of range."""
        if 1 <= self.month <= 12:
            return _MONTH_NAMES[self.month - 1]
        return None


def compute_charge(previous: Reading, current: Reading) -> float:
    """Amount due for the consumption between two readings."""
    return (current.kilowatt - previous.kilowatt) * RATE_PER_KWH


@dataclass
class Bill:
    """One electricity bill record."""

    bill_code: int
    account_number: str
    name: Name
    address: Address
    previous: Reading
    current: Reading
    date: RecordDate | None = None
    previous_balance: int = 0

    def charge(self) -> float:
        """Amount due for this bill's consumption."""
        return compute_charge(self.previous, self.current)

    def set_previous_reading(self, reading: Reading) -> None:
        """Replace the previous reading; the charge follows it."""
        self.previous = reading

    def set_current_reading(self, reading: Reading) -> None:
        """Replace the current reading; the charge follows it."""
        self.current = reading


class BalanceStatus(enum.Enum):
    """Outcome of a balance check."""

    NO_DUE = "no_due"
    OUTSTANDING = "outstanding"
    UNKNOWN = "unknown"


def balance_status(bill: Bill) -> BalanceStatus:
    """Classify a bill by its previous balance."""
    if bill.previous_balance == 0:
        return BalanceStatus.NO_DUE
    if bill.previous_balance > 0:
        return BalanceStatus.OUTSTANDING
    return BalanceStatus.UNKNOWN