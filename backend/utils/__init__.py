from .formatting import format_rupiah, quantize_money
from .dates import DateRange, parse_date

__all__ = ['DateRange', 'format_rupiah', 'parse_date', 'quantize_money']
