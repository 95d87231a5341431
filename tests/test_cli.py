import io

from elexbill.cli import main, run_menu
from elexbill.formatting import format_balance, format_details, format_metering
from elexbill.models import Address, Bill, Name, Reading, RecordDate
from elexbill.registry import BillRegistry
from elexbill.storage import load_bills, save_bills


def _bill(account="ACC-001", code=101, balance=0):
    return Bill(
        bill_code=code,
        account_number=account,
        name=Name("Juan", "Cruz"),
        address=Address("12 Mabini St", "Quezon City", "1100"),
        previous=Reading(100.0, 10.0),
        current=Reading(150.0, 10.0),
        date=RecordDate(5, 12, 2024),
        previous_balance=balance,
    )


def _run(registry, script, path):
    out = io.StringIO()
    run_menu(registry, io.StringIO(script), out, path)
    return out.getvalue()


CREATE_SCRIPT = (
    "1\n101\nACC-001\nJuan\nCruz\n5 12 2024\n12 Mabini St\nQuezon City\n1100\n"
    "0\n100 10\n150 10\nn\n0\n"
)


def test_create_adds_and_saves(tmp_path):
    path = tmp_path / "bills.txt"
    registry = BillRegistry()
    output = _run(registry, CREATE_SCRIPT, path)
    assert list(registry) == [_bill()]
    assert load_bills(path) == [_bill()]
    assert "Records successfully saved to file." in output
    assert "Exiting program..." in output


def test_create_at_capacity(tmp_path):
    registry = BillRegistry([_bill()], capacity=1)
    output = _run(registry, "1\n0\n", tmp_path / "bills.txt")
    assert "Maximum number of records reached." in output
    assert len(registry) == 1


def test_search_account_found(tmp_path):
    registry = BillRegistry([_bill()])
    output = _run(registry, "2\nACC-001\n0\n", tmp_path / "bills.txt")
    assert format_details(_bill()) in output


def test_search_account_missing(tmp_path):
    registry = BillRegistry([_bill()])
    output = _run(registry, "2\nACC-999\n0\n", tmp_path / "bills.txt")
    assert "Account not found." in output


def test_print_all_empty(tmp_path):
    output = _run(BillRegistry(), "3\n0\n", tmp_path / "bills.txt")
    assert "No records to show." in output


def test_delete_record(tmp_path):
    registry = BillRegistry([_bill(), _bill("ACC-002", 202)])
    output = _run(registry, "5\nACC-001\n0\n", tmp_path / "bills.txt")
    assert "Account successfully deleted." in output
    assert [b.account_number for b in registry] == ["ACC-002"]


def test_delete_empty(tmp_path):
    output = _run(BillRegistry(), "5\n0\n", tmp_path / "bills.txt")
    assert "No records to delete." in output


def test_bill_code_search(tmp_path):
    registry = BillRegistry([_bill(), _bill("ACC-002", 202)])
    output = _run(registry, "6\n202\n6\n999\n0\n", tmp_path / "bills.txt")
    assert format_details(_bill("ACC-002", 202)) in output
    assert "Bill Code not found." in output


def test_metering(tmp_path):
    registry = BillRegistry([_bill()])
    output = _run(registry, "7\nACC-001\n0\n", tmp_path / "bills.txt")
    assert format_metering(_bill()) in output


def test_metering_empty(tmp_path):
    output = _run(BillRegistry(), "7\n0\n", tmp_path / "bills.txt")
    assert "No records available." in output


def test_check_balance(tmp_path):
    bill = _bill(balance=300)
    registry = BillRegistry([bill])
    output = _run(registry, "8\nACC-001\n8\nACC-404\n0\n", tmp_path / "bills.txt")
    assert format_balance(bill) in output
    assert format_balance(None) in output


def test_edit_account_number_is_truncated(tmp_path):
    registry = BillRegistry([_bill()])
    _run(registry, "4\nACC-001\n2\nACCOUNT12345\nn\n0\n", tmp_path / "bills.txt")
    assert [b.account_number for b in registry] == ["ACCOUNT12"]


def test_edit_current_reading(tmp_path):
    registry = BillRegistry([_bill()])
    _run(registry, "4\nACC-001\n8\n200 20\nn\n0\n", tmp_path / "bills.txt")
    bill = registry.find_by_account("ACC-001")
    assert bill.current == Reading(200.0, 20.0)


def test_edit_empty(tmp_path):
    output = _run(BillRegistry(), "4\n0\n", tmp_path / "bills.txt")
    assert "No records to edit." in output


def test_invalid_choice(tmp_path):
    output = _run(BillRegistry(), "42\nabc\n0\n", tmp_path / "bills.txt")
    assert output.count("Invalid choice. Try again.") == 2


def test_end_of_input_still_saves(tmp_path):
    path = tmp_path / "bills.txt"
    registry = BillRegistry([_bill()])
    _run(registry, "", path)
    assert load_bills(path) == [_bill()]


def test_main_starts_fresh(tmp_path, monkeypatch, capsys):
    path = tmp_path / "bills.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["--file", str(path)]) == 0
    output = capsys.readouterr().out
    assert "No existing data file found. Starting fresh." in output
    assert load_bills(path) == []


def test_main_loads_existing(tmp_path, monkeypatch, capsys):
    path = tmp_path / "bills.txt"
    save_bills([_bill(), _bill("ACC-002", 202)], path)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["--file", str(path)]) == 0
    output = capsys.readouterr().out
    assert "2 record(s) loaded from file." in output
    assert len(load_bills(path)) == 2