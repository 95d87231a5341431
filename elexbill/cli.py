"""Interactive menu for the electricity billing system."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike
from typing import TextIO

from elexbill.formatting import format_all, format_balance, format_details, format_metering
from elexbill.models import Address, Bill, Name, Reading, RecordDate
from elexbill.registry import MAX_RECORDS, AccountNotFoundError, BillRegistry, RegistryFullError
from elexbill.storage import load_bills, save_bills

DEFAULT_PATH = "bills.txt"
_EDIT_LIMIT = 9

_MENU = (
    "\n--- Electricity Bill System ---\n"
    "1. Admin Mode (Create Record)\n"
    "2. Search for an Account\n"
    "3. Print All Accounts\n"
    "4. Edit Account\n"
    "5. Delete Account\n"
    "6. Search Bill Code\n"
    "7. Print Payment Details\n"
    "8. Check Balance\n"
    "9. Save Records to File\n"
    "0. Exit\n"
    "Enter choice: "
)

_EDIT_MENU = (
    "What values would you like to change?"
    "\n\n1. BILLCODE"
    "\n\n2. ACCOUNT NUMBER"
    "\n\n3. ACCOUNT NAME"
    "\n\n4. STREET"
    "\n\n5. CITY"
    "\n\n6. ZIP CODE"
    "\n\n7. PREVIOUS READING"
    "\n\n8. CURRENT READING \n :"
)

_WORD_PATTERN = re.compile(r"\S+")


class _Scanner:
    """Whitespace-delimited reader over a text stream, read line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def word(self) -> str:
        self._skip_space()
        match = _WORD_PATTERN.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group()

    def line(self) -> str:
        self._skip_space()
        text, newline, rest = self._buffer.partition("\n")
        self._buffer = newline + rest
        return text.rstrip("\r")

    def char(self) -> str:
        self._skip_space()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def integer(self) -> int:
        return int(self.word())

    def number(self) -> float:
        return float(self.word())


@dataclass
class _Session:
    registry: BillRegistry
    scan: _Scanner
    out: TextIO
    path: str | PathLike[str]

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def ask(self, prompt: str, read: Callable[[], object]):
        self.write(prompt)
        return read()

    def clear(self) -> None:
        isatty = getattr(self.out, "isatty", None)
        if isatty is not None and isatty():
            self.write("\033[2J\033[H")

    def reading(self, prompt: str) -> Reading:
        self.write(prompt)
        kilowatt = self.scan.number()
        hours = self.scan.number()
        return Reading(kilowatt, hours)

    def save(self) -> None:
        try:
            save_bills(self.registry, self.path)
        except (OSError, ValueError):
            self.write("Error saving data to file.\n")
        else:
            self.write("Records successfully saved to file.\n")

    def again(self, prompt: str) -> bool:
        return self.ask(prompt, self.scan.char) in ("y", "Y")


def _read_bill(session: _Session) -> Bill:
    scan = session.scan
    bill_code = session.ask("Enter Billcode: ", scan.integer)
    account = session.ask("Enter Account Number: ", scan.word)
    first = session.ask("Enter First Name: ", scan.word)
    last = session.ask("Enter Last Name: ", scan.word)
    session.write("Enter Current Month, day and year(in mm/dd/yyyy format spaced): ")
    date = RecordDate(month=scan.integer(), day=scan.integer(), year=scan.integer())
    street = session.ask("Enter Street: ", scan.line)
    city = session.ask("Enter City: ", scan.line)
    zip_code = session.ask("Enter Zip Code: ", scan.word)
    balance = session.ask("Enter Previous Balance if Fully paid input 0: ", scan.integer)
    previous = session.reading("Enter Previous Reading (kWh and hours): ")
    current = session.reading("Enter Current Reading (kWh and hours): ")
    return Bill(
        bill_code=bill_code,
        account_number=account,
        name=Name(first, last),
        address=Address(street, city, zip_code),
        previous=previous,
        current=current,
        date=date,
        previous_balance=balance,
    )


def _create(session: _Session) -> None:
    while True:
        if len(session.registry) >= session.registry.capacity:
            session.write("Maximum number of records reached.\n")
            return
        bill = _read_bill(session)
        try:
            session.registry.add(bill)
        except RegistryFullError as exc:
            session.write(f"{exc}\n")
            return
        session.save()
        if not session.again("Record added and saved. Add another? (y/n): "):
            return


def _search_account(session: _Session) -> None:
    account = session.ask("Enter Account Number to search: ", session.scan.word)
    try:
        bill = session.registry.find_by_account(account)
    except AccountNotFoundError as exc:
        session.write(f"{exc}\n")
    else:
        session.write(format_details(bill))


def _print_all(session: _Session) -> None:
    session.write(format_all(session.registry))


def _edit_field(session: _Session, bill: Bill, choice: int) -> None:
    scan = session.scan

    def short(prompt: str) -> str:
        return session.ask(prompt, scan.word)[:_EDIT_LIMIT]

    if choice == 1:
        session.clear()
        bill.bill_code = session.ask("Enter New Billcode: ", scan.integer)
    elif choice == 2:
        session.clear()
        bill.account_number = short("Enter New Account Number: ")
    elif choice == 3:
        session.clear()
        first = short("Enter First Name: ")
        last = short("Enter Last Name: ")
        bill.name = Name(first, last)
    elif choice == 4:
        session.clear()
        bill.address.street = short("Enter Street: ")
    elif choice == 5:
        session.clear()
        bill.address.city = short("Enter City: ")
    elif choice == 6:
        session.clear()
        bill.address.zip_code = short("Enter ZIPCODE: ")
    elif choice == 7:
        session.clear()
        bill.set_previous_reading(
            session.reading("Enter Previous Reading(both kwh and h spaced): ")
        )
    elif choice == 8:
        session.clear()
        bill.set_current_reading(
            session.reading("Enter Current Reading(both kwh and h spaced): ")
        )
    else:
        session.write("Invalid choice. Try again.\n")


def _edit(session: _Session) -> None:
    if len(session.registry) == 0:
        session.write("No records to edit.\n")
        return
    while True:
        account = session.ask("Enter Account Number : ", session.scan.word)
        try:
            bill = session.registry.find_by_account(account)
        except AccountNotFoundError as exc:
            session.write(f"{exc}\n")
        else:
            session.write(_EDIT_MENU)
            try:
                choice = session.scan.integer()
            except ValueError:
                choice = -1
            _edit_field(session, bill, choice)
        if not session.again("Change another value from the record? (y/n): "):
            return


def _delete(session: _Session) -> None:
    if len(session.registry) == 0:
        session.write("No records to delete.\n")
        return
    account = session.ask("Enter Account Number to delete: ", session.scan.word)
    try:
        session.registry.delete(account)
    except AccountNotFoundError as exc:
        session.write(f"{exc}\n")
    else:
        session.write("Account successfully deleted.\n")


def _search_bill_code(session: _Session) -> None:
    code = session.ask("Enter Bill Code to search: ", session.scan.integer)
    try:
        bill = session.registry.find_by_bill_code(code)
    except AccountNotFoundError as exc:
        session.write(f"{exc}\n")
    else:
        session.write(format_details(bill))


def _metering(session: _Session) -> None:
    if len(session.registry) == 0:
        session.write("No records available.\n")
        return
    account = session.ask("Enter Account Number: ", session.scan.word)
    try:
        bill = session.registry.find_by_account(account)
    except AccountNotFoundError as exc:
        session.write(f"{exc}\n")
    else:
        session.clear()
        session.write(format_metering(bill))


def _check_balance(session: _Session) -> None:
    account = session.ask("Enter Account Number to check balance: ", session.scan.word)
    try:
        bill = session.registry.find_by_account(account)
    except AccountNotFoundError:
        bill = None
    session.write(format_balance(bill))


_ACTIONS: dict[int, Callable[[_Session], None]] = {
    1: _create,
    2: _search_account,
    3: _print_all,
    4: _edit,
    5: _delete,
    6: _search_bill_code,
    7: _metering,
    8: _check_balance,
    9: _Session.save,
}


def run_menu(
    registry: BillRegistry,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    path: str | PathLike[str] = DEFAULT_PATH,
) -> None:
    """Run the menu loop until exit or end of input, then save the records."""
    session = _Session(
        registry=registry,
        scan=_Scanner(stdin if stdin is not None else sys.stdin),
        out=stdout if stdout is not None else sys.stdout,
        path=path,
    )
    while True:
        session.write(_MENU)
        try:
            entry = session.scan.word()
        except EOFError:
            break
        try:
            choice = int(entry)
        except ValueError:
            choice = None
        if choice == 0:
            session.write("Exiting program...\n")
            break
        action = _ACTIONS.get(choice)
        if action is None:
            session.write("Invalid choice. Try again.\n")
            continue
        session.clear()
        try:
            action(session)
        except EOFError:
            break
        except ValueError:
            session.write("Invalid input.\n")
    session.save()


def main(argv: list[str] | None = None) -> int:
    """Load saved records, run the menu and save on exit."""
    parser = argparse.ArgumentParser(prog="elexbill", description="Electricity bill records.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="data file (default: %(default)s)")
    args = parser.parse_args(argv)

    try:
        bills = load_bills(args.file)
    except FileNotFoundError:
        print("No existing data file found. Starting fresh.")
        bills = []
    except ValueError as exc:
        print(f"Could not read data file ({exc}). Starting fresh.")
        bills = []
    else:
        print(f"{len(bills)} record(s) loaded from file.")

    registry = BillRegistry(bills[:MAX_RECORDS])
    run_menu(registry, sys.stdin, sys.stdout, args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())