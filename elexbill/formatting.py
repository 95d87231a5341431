"""Text renderings of bill records as shown to the user."""

from __future__ import annotations

from collections.abc import Iterable

from elexbill.models import BalanceStatus, Bill, Reading, balance_status

_RULE = "=" * 57


def _reading_line(label: str, reading: Reading) -> str:
    return (
        f"{label}: {reading.kilowatt:.2f} kWh / {reading.hours:.2f} hrs"
        f" = {reading.kw_per_hour():.2f} kw/hr\n"
    )


def format_details(bill: Bill) -> str:
    """Full bill details block."""
    lines = [
        "\n--- Electricity Bill Details ---\n",
        f"Bill Code: {bill.bill_code}\n",
        f"Account Number: {bill.account_number}\n",
        f"Name: {bill.name.first} {bill.name.last}\n",
    ]
    if bill.date is not None:
        month = bill.date.month_name()
        month_text = f" {month} " if month is not None else "??????"
        lines.append(f"Recorded on:{month_text}/ {bill.date.day} / {bill.date.year}\n")
    lines.append(
        f"Address: {bill.address.street}, {bill.address.city}, {bill.address.zip_code}\n"
    )
    lines.append(_reading_line("Previous Reading", bill.previous))
    lines.append(_reading_line("Current Reading", bill.current))
    lines.append(f"Total Bill: PHP {bill.charge():.2f}\n")
    return "".join(lines)


def _metering_reading(title: str, reading: Reading) -> list[str]:
    return [
        f"| {title:<54}\n",
        f"| Kilowatt       : {reading.kilowatt:<10.2f}     Hours   : {reading.hours:<10.2f} \t\t\n",
        f"| kW per hr      : {reading.kw_per_hour():<10.2f}{' ' * 21}\t\t\t\n",
    ]


def format_metering(bill: Bill) -> str:
    """Boxed power metering summary for one account."""
    lines = [
        f"\n{_RULE}\n",
        f"|{' ' * 13}POWER METERING INFORMATION{' ' * 15}\n",
        f"{_RULE}\n",
        f"| Account Number   : {bill.account_number:<20} \n",
        f"| Account Name     : {bill.name.first:<10} {bill.name.last:<10}  \n",
        f"| Address         : {bill.address.street:<15}, {bill.address.city:<10}, "
        f"{bill.address.zip_code:<6} \n",
        f"{_RULE}\n",
        *_metering_reading("Previous Reading", bill.previous),
        f"{_RULE}\n",
        *_metering_reading("Current Reading", bill.current),
        f"{_RULE}\n",
        f"| Total Bill     : PHP {bill.charge():<10.2f}{' ' * 26}\n",
        f"{_RULE}\n",
    ]
    return "".join(lines)


def format_all(bills: Iterable[Bill]) -> str:
    """Details of every bill, or a notice when there are none."""
    text = "".join(format_details(bill) for bill in bills)
    return text or "No records to show.\n"


def format_balance(bill: Bill | None) -> str:
    """Balance check message for a bill; None means the account was not found."""
    status = balance_status(bill) if bill is not None else BalanceStatus.UNKNOWN
    if status is BalanceStatus.NO_DUE:
        return "Congrats you have no DUE PAYMENT!\n"
    if status is BalanceStatus.OUTSTANDING:
        return (
            f"Warning you have a previous balance of: {bill.previous_balance}"
            f" and new a balance of: {bill.charge():.2f}, Please pay on time!\n"
        )
    return "Account not found.\n"