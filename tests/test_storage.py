import struct

import pytest

from elexbill.models import Address, Bill, Name, Reading, RecordDate
from elexbill.storage import load_bills, save_bills


def _bill(account="ACC-001", code=101, date=RecordDate(5, 12, 2024), balance=0):
    return Bill(
        bill_code=code,
        account_number=account,
        name=Name("Juan", "Cruz"),
        address=Address("12 Mabini St", "Quezon City", "1100"),
        previous=Reading(100.0, 10.0),
        current=Reading(150.5, 12.25),
        date=date,
        previous_balance=balance,
    )


def test_round_trip(tmp_path):
    path = tmp_path / "bills.txt"
    bills = [_bill(), _bill("ACC-002", 202, balance=300)]
    save_bills(bills, path)
    assert load_bills(path) == bills


def test_round_trip_without_date(tmp_path):
    path = tmp_path / "bills.txt"
    bills = [_bill(date=None)]
    save_bills(bills, path)
    assert load_bills(path)[0].date is None


def test_empty_round_trip(tmp_path):
    path = tmp_path / "bills.txt"
    save_bills([], path)
    assert load_bills(path) == []
    assert path.read_bytes() == struct.pack("<i", 0)


def test_header_holds_count(tmp_path):
    path = tmp_path / "bills.txt"
    save_bills([_bill(), _bill("ACC-002")], path)
    (count,) = struct.unpack_from("<i", path.read_bytes())
    assert count == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bills(tmp_path / "absent.txt")


def test_account_number_too_long(tmp_path):
    path = tmp_path / "bills.txt"
    with pytest.raises(ValueError):
        save_bills([_bill(account="ACCOUNT-TOO-LONG")], path)
    assert not path.exists()


def test_truncated_file_raises(tmp_path):
    path = tmp_path / "bills.txt"
    save_bills([_bill()], path)
    path.write_bytes(path.read_bytes()[:-5])
    with pytest.raises(ValueError):
        load_bills(path)


def test_negative_count_raises(tmp_path):
    path = tmp_path / "bills.txt"
    path.write_bytes(struct.pack("<i", -1))
    with pytest.raises(ValueError):
        load_bills(path)


def test_short_header_raises(tmp_path):
    path = tmp_path / "bills.txt"
    path.write_bytes(b"\x01")
    with pytest.raises(ValueError):
        load_bills(path)