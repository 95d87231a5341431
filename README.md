# elexbill

A small electricity billing system. It keeps records of customer accounts.
Each record holds a bill code, an account number, a name, an address, the
date of recording, any previous unpaid balance, and two meter readings
(kilowatt-hours over a number of hours). The charge is the difference
between the current and previous kilowatt readings at PHP 10.50 per kWh.

## Installing

```
pip install .
```

## The console

```
elexbill
elexbill --file records.dat
```

At start the console loads the saved records from `bills.txt` in the current
directory, or from the file named with `--file`. It reports how many records
it loaded. If the file is missing, or cannot be read as a data file, it
starts with no records. It then shows this menu:

1. Admin Mode (Create Record)
2. Search for an Account (by account number)
3. Print All Accounts
4. Edit Account (bill code, account number, name, street, city, zip code,
   previous or current reading)
5. Delete Account
6. Search Bill Code
7. Print Payment Details (a boxed power metering summary)
8. Check Balance
9. Save Records to File
0. Exit

Records are saved after each one is created, on request, and again when the
menu ends. The menu ends on `0` or at the end of input. At most 100 records
are kept.

When you edit a text field, the new value is cut to 9 characters. The screen
is cleared between actions only when output goes to a terminal.

## As a library

```python
from elexbill.models import Address, Bill, Name, Reading, RecordDate
from elexbill.registry import BillRegistry
from elexbill.formatting import format_balance, format_details, format_metering
from elexbill.storage import load_bills, save_bills

bill = Bill(
    bill_code=1,
    account_number="ACC0000001",
    name=Name("Juan", "Cruz"),
    address=Address("12 Sample St", "Sample City", "0000"),
    previous=Reading(100.0, 10.0),
    current=Reading(150.0, 10.0),
    date=RecordDate(month=5, day=14, year=2024),
    previous_balance=0,
)
print(bill.charge())                 # 525.0

registry = BillRegistry()
registry.add(bill)
print(format_details(registry.find_by_account("ACC0000001")))
print(format_metering(bill))
print(format_balance(bill))          # Congrats you have no DUE PAYMENT!

save_bills(registry, "bills.txt")
restored = load_bills("bills.txt")
```

### `elexbill.models`

- `Reading(kilowatt, hours)` is a frozen record. `kw_per_hour()` returns the
  average rate. When `hours` is zero it returns infinity or NaN, by IEEE
  rules, and does not raise.
- `Name(first, last)`, `Address(street, city, zip_code)` and
  `RecordDate(month, day, year)` are plain records.
  `RecordDate.month_name()` returns the English month name, or `None` when
  the month is out of range.
- `Bill` holds the fields shown above. `date` defaults to `None` and
  `previous_balance` defaults to `0`. `charge()` is computed from the
  readings. `set_previous_reading` and `set_current_reading` replace a
  reading.
- `compute_charge(previous, current)` gives the charge for two readings.
- `balance_status(bill)` returns a `BalanceStatus`:
  - `NO_DUE` when the previous balance is zero.
  - `OUTSTANDING` when it is positive.
  - `UNKNOWN` otherwise.

### `elexbill.registry`

`BillRegistry(bills=(), capacity=100)` is an ordered collection that
supports `len()` and iteration.

- `add` raises `RegistryFullError` at capacity.
- `find_by_account` and `find_by_bill_code` return the first match. They
  raise `AccountNotFoundError`, a `LookupError`, when nothing matches.
- `delete(account_number)` removes and returns the first matching bill.

### `elexbill.formatting`

Each function returns text as the console shows it:

- `format_details(bill)` gives the full bill details.
- `format_metering(bill)` gives the boxed metering summary.
- `format_all(bills)` gives the details of every bill, or
  `No records to show.` when there are none.
- `format_balance(bill)` gives the balance message. Pass `None` for an
  account that was not found.

### `elexbill.storage`

`save_bills(bills, path)` writes a binary file with a record count followed
by fixed-width records:

| Field          | Limit    |
|----------------|----------|
| account number | 10 bytes |
| first name     | 29 bytes |
| last name      | 29 bytes |
| street         | 49 bytes |
| city           | 29 bytes |
| zip code       | 9 bytes  |

A field that does not fit raises `ValueError`, and the file is not written.
A bill with no date is stored as 0/0/0 and loads back with `date=None`.

`load_bills(path)` reads such a file back. It raises `FileNotFoundError`
when the file is missing and `ValueError` when the file is malformed.

## Tests

```
pip install .[test]
pytest
```