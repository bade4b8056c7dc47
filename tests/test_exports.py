from datetime import date
from decimal import Decimal

from openpyxl import load_workbook

import exports
from utils.dates import DateRange
from utils.formatting import RUPIAH_NUMBER_FORMAT
from utils.ledger import LedgerAccount, Posting, general_ledger, income_statement, trial_balance
from schemas.balance import GeneralLedger

CASH = LedgerAccount(id=1, name="Cash", account_code=101, account_type=1)
SALES = LedgerAccount(id=2, name="Sales", account_code=401, account_type=4)
RENT = LedgerAccount(id=3, name="Rent", account_code=501, account_type=5)

POSTINGS = [
    Posting(1, 1, "Cash sale", date(2024, 1, 5), Decimal(100), Decimal(0)),
    Posting(2, 1, "Cash sale", date(2024, 1, 5), Decimal(0), Decimal(100)),
    Posting(3, 2, "Rent", date(2024, 1, 9), Decimal(30), Decimal(0)),
    Posting(1, 2, "Rent", date(2024, 1, 9), Decimal(0), Decimal(30)),
]


def _cells(ws):
    return [[cell.value for cell in row] for row in ws.iter_rows()]


def test_trial_balance_sheet_layout():
    report = trial_balance([CASH, SALES, RENT], POSTINGS, DateRange(date(2024, 1, 1), date(2024, 1, 31)))
    ws = load_workbook(exports.trial_balance_workbook(report))["Trial Balance"]

    assert ws["A1"].value == "TRIAL BALANCE"
    assert ws["A2"].value == "Period: 01/01/2024 - 01/31/2024"
    assert [c.value for c in ws[4]] == exports.TRIAL_BALANCE_COLUMNS
    assert ws["B5"].value == "Cash"
    assert ws["D5"].number_format == RUPIAH_NUMBER_FORMAT

    total_row = ws[8]
    assert total_row[0].value == "TOTAL"
    assert total_row[3].value == 130
    assert total_row[4].value == 130
    assert total_row[5].value == 0


def test_income_statement_sheet_has_both_sections():
    report = income_statement([CASH, SALES, RENT], POSTINGS)
    ws = load_workbook(exports.income_statement_workbook(report))["Income Statement"]
    first_column = [row[0] for row in _cells(ws)]

    assert ws["A2"].value == "Period: all dates"
    for label in ("REVENUE", "Total Revenue", "EXPENSE", "Total Expense", "NET INCOME"):
        assert label in first_column
    net_row = _cells(ws)[first_column.index("NET INCOME")]
    assert net_row[4] == -130


def test_general_ledger_sheet_lists_each_account():
    report = GeneralLedger(accounts=general_ledger([CASH, SALES], POSTINGS))
    ws = load_workbook(exports.general_ledger_workbook(report))["General Ledger"]
    first_column = [row[0] for row in _cells(ws)]

    assert "101 - Cash" in first_column
    assert "401 - Sales" in first_column
    assert first_column.count("TOTAL") == 2


def test_general_ledger_sheet_without_accounts():
    ws = load_workbook(exports.general_ledger_workbook(GeneralLedger(accounts=[])))["General Ledger"]
    assert ws["A1"].value == "GENERAL LEDGER"
    assert [c.value for c in ws[5]] == exports.LEDGER_COLUMNS
