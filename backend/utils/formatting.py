from decimal import Decimal, ROUND_HALF_UP

# openpyxl number format for currency columns
RUPIAH_NUMBER_FORMAT = '"Rp "#,##0.00'

TWO_PLACES = Decimal("0.01")


def quantize_money(amount) -> Decimal:
    return Decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_rupiah(amount) -> str:
    """Format an amount the Indonesian way: ``Rp 1.234.567,89``."""
    if amount is None:
        return "Rp 0,00"
    amount = quantize_money(amount)
    sign = "-" if amount < 0 else ""
    integer_part, decimal_part = f"{abs(amount):.2f}".split(".")

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    return f"{sign}Rp {'.'.join(groups)},{decimal_part}"
