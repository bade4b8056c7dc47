"""
Spreadsheet rendering for the ledger reports.

Each report is laid out with pandas (``DataFrame.to_excel`` through an openpyxl
writer) and then styled with openpyxl: a title row, a period row, a filled header
row, currency number formats and bold total rows. The functions only consume the
report schemas produced by ``crud.balance``/``crud.journal``.
"""
from io import BytesIO
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from fastapi.responses import StreamingResponse
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from schemas.balance import GeneralLedger, IncomeStatement, TrialBalance
from utils.dates import DateRange
from utils.formatting import RUPIAH_NUMBER_FORMAT

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Header row of a table starts below the title and period rows
TABLE_START_ROW = 3

header_fill = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
header_font = Font(bold=True, color="FFFFFF")
title_font = Font(bold=True, size=14)
bold_font = Font(bold=True)


def _period_label(start, end) -> str:
    if start is None or end is None:
        return "Period: all dates"
    return f"Period: {start.strftime('%m/%d/%Y')} - {end.strftime('%m/%d/%Y')}"


def _money(value) -> float:
    return float(value or 0)


def _write_table(writer, sheet_name: str, df: pd.DataFrame, startrow: int, currency_columns: Sequence[str]) -> int:
    """Write ``df`` at 0-based ``startrow`` and style it. Returns the last used 1-based row."""
    df.to_excel(writer, sheet_name=sheet_name, startrow=startrow, index=False)
    ws = writer.sheets[sheet_name]

    header_row = startrow + 1
    for col_idx in range(1, len(df.columns) + 1):
        cell = ws.cell(row=header_row, column=col_idx)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    for col_idx, column in enumerate(df.columns, start=1):
        if column in currency_columns:
            for row in range(header_row + 1, header_row + 1 + len(df)):
                ws.cell(row=row, column=col_idx).number_format = RUPIAH_NUMBER_FORMAT

    return header_row + len(df)


def _write_total_row(ws, row: int, label: str, values: dict, columns: List[str]) -> None:
    """Bold summary row: ``label`` in the first column, ``values`` keyed by column name."""
    label_cell = ws.cell(row=row, column=1, value=label)
    label_cell.font = bold_font
    for column, value in values.items():
        cell = ws.cell(row=row, column=columns.index(column) + 1, value=_money(value))
        cell.font = bold_font
        cell.number_format = RUPIAH_NUMBER_FORMAT


def _write_heading(ws, title: str, period: str) -> None:
    ws.cell(row=1, column=1, value=title).font = title_font
    ws.cell(row=2, column=1, value=period)


def _autosize(ws) -> None:
    for column_cells in ws.columns:
        length = max((len(str(cell.value)) for cell in column_cells if cell.value is not None), default=0)
        ws.column_dimensions[get_column_letter(column_cells[0].column)].width = min(max(length + 2, 12), 50)


def _to_buffer(build) -> BytesIO:
    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        build(writer)
        for ws in writer.sheets.values():
            _autosize(ws)
    output.seek(0)
    return output


# --- Trial balance (neraca saldo) ---
TRIAL_BALANCE_COLUMNS = ["Account Code", "Account Name", "Account Type", "Debit", "Credit", "Total"]


def trial_balance_workbook(report: TrialBalance) -> BytesIO:
    df = pd.DataFrame(
        [
            [row.account_code, row.name, row.account_type,
             _money(row.total_debit), _money(row.total_credit), _money(row.total)]
            for row in report.rows
        ],
        columns=TRIAL_BALANCE_COLUMNS,
    )

    def build(writer):
        sheet = "Trial Balance"
        last_row = _write_table(writer, sheet, df, TABLE_START_ROW, ["Debit", "Credit", "Total"])
        ws = writer.sheets[sheet]
        _write_heading(ws, "TRIAL BALANCE", _period_label(report.start_date, report.end_date))
        _write_total_row(ws, last_row + 1, "TOTAL", {
            "Debit": report.total_debit,
            "Credit": report.total_credit,
            "Total": report.total_debit - report.total_credit,
        }, TRIAL_BALANCE_COLUMNS)

    return _to_buffer(build)


# --- Income statement (pendapatan-beban) ---
INCOME_COLUMNS = ["Account Code", "Account Name", "Debit", "Credit", "Total"]


def _income_frame(rows) -> pd.DataFrame:
    return pd.DataFrame(
        [[r.account_code, r.name, _money(r.total_debit), _money(r.total_credit), _money(r.total)] for r in rows],
        columns=INCOME_COLUMNS,
    )


def income_statement_workbook(report: IncomeStatement) -> BytesIO:
    def build(writer):
        sheet = "Income Statement"
        currency = ["Debit", "Credit", "Total"]

        # section label sits on the row above each table
        revenue_start = TABLE_START_ROW + 1
        last_row = _write_table(writer, sheet, _income_frame(report.revenue), revenue_start, currency)
        ws = writer.sheets[sheet]
        _write_heading(ws, "INCOME STATEMENT", _period_label(report.start_date, report.end_date))
        ws.cell(row=revenue_start, column=1, value="REVENUE").font = bold_font
        _write_total_row(ws, last_row + 1, "Total Revenue", {"Total": report.total_revenue}, INCOME_COLUMNS)

        expense_start = last_row + 3
        last_row = _write_table(writer, sheet, _income_frame(report.expense), expense_start, currency)
        ws.cell(row=expense_start, column=1, value="EXPENSE").font = bold_font
        _write_total_row(ws, last_row + 1, "Total Expense", {"Total": report.total_expense}, INCOME_COLUMNS)

        _write_total_row(ws, last_row + 3, "NET INCOME", {"Total": report.net_income}, INCOME_COLUMNS)

    return _to_buffer(build)


# --- General ledger (buku besar) ---
LEDGER_COLUMNS = ["Date", "Journal", "Note", "Debit", "Credit", "Saldo Debit", "Saldo Kredit", "Balance"]


def general_ledger_workbook(report: GeneralLedger) -> BytesIO:
    def build(writer):
        sheet = "General Ledger"
        currency = ["Debit", "Credit", "Saldo Debit", "Saldo Kredit", "Balance"]
        row = TABLE_START_ROW + 1
        ws = None
        for ledger in report.accounts:
            df = pd.DataFrame(
                [
                    [e.journal_date, e.journal_name, e.note, _money(e.debit), _money(e.credit),
                     _money(e.saldo_debit), _money(e.saldo_kredit), _money(e.total)]
                    for e in ledger.entries
                ],
                columns=LEDGER_COLUMNS,
            )
            last_row = _write_table(writer, sheet, df, row, currency)
            ws = writer.sheets[sheet]
            for data_row in range(row + 2, last_row + 1):
                ws.cell(row=data_row, column=1).number_format = "MM/DD/YYYY"
            code = ledger.account.account_code if ledger.account.account_code is not None else "-"
            ws.cell(row=row, column=1, value=f"{code} - {ledger.account.name}").font = bold_font
            _write_total_row(ws, last_row + 1, "TOTAL", {
                "Debit": ledger.total_debit,
                "Credit": ledger.total_credit,
                "Balance": ledger.total,
            }, LEDGER_COLUMNS)
            row = last_row + 3

        if ws is None:
            # no accounts at all: still produce the header block
            _write_table(writer, sheet, pd.DataFrame(columns=LEDGER_COLUMNS), row, currency)
            ws = writer.sheets[sheet]
        _write_heading(ws, "GENERAL LEDGER", _period_label(report.start_date, report.end_date))

    return _to_buffer(build)


# --- General journal ---
JOURNAL_COLUMNS = ["Date", "Journal", "Account Code", "Account Name", "Note", "Debit", "Credit"]


def general_journal_workbook(journals: Iterable, date_range: Optional[DateRange] = None) -> BytesIO:
    rows = []
    for journal in journals:
        for detail in journal.details:
            account = detail.account
            rows.append([
                journal.journal_date,
                journal.name,
                account.account_code if account else None,
                account.name if account else None,
                detail.note,
                _money(detail.debit),
                _money(detail.credit),
            ])
    df = pd.DataFrame(rows, columns=JOURNAL_COLUMNS)

    def build(writer):
        sheet = "General Journal"
        last_row = _write_table(writer, sheet, df, TABLE_START_ROW, ["Debit", "Credit"])
        ws = writer.sheets[sheet]
        for data_row in range(TABLE_START_ROW + 2, last_row + 1):
            ws.cell(row=data_row, column=1).number_format = "MM/DD/YYYY"
        _write_heading(ws, "GENERAL JOURNAL", _period_label(*(date_range or (None, None))))
        _write_total_row(ws, last_row + 1, "TOTAL", {
            "Debit": df["Debit"].sum() if len(df) else 0,
            "Credit": df["Credit"].sum() if len(df) else 0,
        }, JOURNAL_COLUMNS)

    return _to_buffer(build)


def excel_response(buffer: BytesIO, filename: str) -> StreamingResponse:
    headers = {
        'Content-Disposition': f'attachment; filename="{filename}"'
    }
    return StreamingResponse(buffer, media_type=XLSX_MEDIA_TYPE, headers=headers)
