"""Binary persistence of bill records."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from elexbill.models import Address, Bill, Name, Reading, RecordDate

_COUNT = struct.Struct("<i")
_RECORD = struct.Struct("<ii11s30s30s50s30s10siiiffff")

_ACCOUNT_SIZE = 11
_NAME_SIZE = 30
_STREET_SIZE = 50
_CITY_SIZE = 30
_ZIP_SIZE = 10


def _pack_text(value: str, size: int, field: str) -> bytes:
    data = value.encode("utf-8")
    if len(data) >= size or b"\0" in data:
        raise ValueError(f"{field} must be at most {size - 1} bytes without NUL: {value!r}")
    return data


def _unpack_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8")


def _pack_bill(bill: Bill) -> bytes:
    date = bill.date if bill.date is not None else RecordDate(0, 0, 0)
    return _RECORD.pack(
        bill.previous_balance,
        bill.bill_code,
        _pack_text(bill.account_number, _ACCOUNT_SIZE, "account number"),
        _pack_text(bill.name.first, _NAME_SIZE, "first name"),
        _pack_text(bill.name.last, _NAME_SIZE, "last name"),
        _pack_text(bill.address.street, _STREET_SIZE, "street"),
        _pack_text(bill.address.city, _CITY_SIZE, "city"),
        _pack_text(bill.address.zip_code, _ZIP_SIZE, "zip code"),
        date.month,
        date.day,
        date.year,
        bill.previous.kilowatt,
        bill.previous.hours,
        bill.current.kilowatt,
        bill.current.hours,
    )


def _unpack_bill(raw: bytes) -> Bill:
    (
        balance,
        code,
        account,
        first,
        last,
        street,
        city,
        zip_code,
        month,
        day,
        year,
        prev_kw,
        prev_hours,
        cur_kw,
        cur_hours,
    ) = _RECORD.unpack(raw)
    date = None if (month, day, year) == (0, 0, 0) else RecordDate(month, day, year)
    return Bill(
        bill_code=code,
        account_number=_unpack_text(account),
        name=Name(_unpack_text(first), _unpack_text(last)),
        address=Address(_unpack_text(street), _unpack_text(city), _unpack_text(zip_code)),
        previous=Reading(prev_kw, prev_hours),
        current=Reading(cur_kw, cur_hours),
        date=date,
        previous_balance=balance,
    )


def save_bills(bills: Iterable[Bill], path: str | PathLike[str]) -> None:
    """Write all bills to a file, replacing its contents.

    Raises ValueError when a text field does not fit its fixed width; the
    file is left untouched in that case.
    """
    records = [_pack_bill(bill) for bill in bills]
    payload = _COUNT.pack(len(records)) + b"".join(records)
    Path(path).write_bytes(payload)


def load_bills(path: str | PathLike[str]) -> list[Bill]:
    """Read bills written by save_bills.

    Raises FileNotFoundError when the file is missing and ValueError when
    its contents are malformed.
    """
    data = Path(path).read_bytes()
    if len(data) < _COUNT.size:
        raise ValueError("data file is too short to hold a record count")
    (count,) = _COUNT.unpack_from(data)
    if count < 0:
        raise ValueError(f"negative record count: {count}")
    body = memoryview(data)[_COUNT.size:]
    if len(body) < count * _RECORD.size:
        raise ValueError(f"data file holds fewer than {count} records")
    return [
        _unpack_bill(bytes(body[offset:offset + _RECORD.size]))
        for offset in range(0, count * _RECORD.size, _RECORD.size)
    ]