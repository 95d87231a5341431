"""In-memory collection of bill records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from elexbill.models import Bill

MAX_RECORDS = 100


class RegistryFullError(Exception):
    """Raised when a record is added to a registry at capacity."""


class AccountNotFoundError(LookupError):
    """Raised when no record matches a lookup."""


class BillRegistry:
    """Ordered collection of bills, searched by account number or bill code."""

    def __init__(self, bills: Iterable[Bill] = (), capacity: int = MAX_RECORDS) -> None:
        self.capacity = capacity
        self._bills: list[Bill] = []
        for bill in bills:
            self.add(bill)

    def add(self, bill: Bill) -> None:
        """Append a bill, raising RegistryFullError at capacity."""
        if len(self._bills) >= self.capacity:
            raise RegistryFullError("Maximum number of records reached.")
        self._bills.append(bill)

    def find_by_account(self, account_number: str) -> Bill:
        """First bill with the given account number."""
        for bill in self._bills:
            if bill.account_number == account_number:
                return bill
        raise AccountNotFoundError("Account not found.")

    def find_by_bill_code(self, bill_code: int) -> Bill:
        """First bill with the given bill code."""
        for bill in self._bills:
            if bill.bill_code == bill_code:
                return bill
        raise AccountNotFoundError("Bill Code not found.")

    def delete(self, account_number: str) -> Bill:
        """Remove and return the first bill with the given account number."""
        bill = self.find_by_account(account_number)
        self._bills.remove(bill)
        return bill

    def __len__(self) -> int:
        return len(self._bills)

    def __iter__(self) -> Iterator[Bill]:
        return iter(list(self._bills))