"""Display formatting for extracted summary values."""
from decimal import Decimal

from sheetpick.models import SummaryValues


def format_number(value: float) -> str:
    """
    Render a number with thousands grouped by commas.

    Grouping always uses ``,`` (the ko-KR convention the settlement sheets
    are read in) rather than the process locale. The value keeps whatever
    fraction it has and is never shown in exponent notation.
    """
    if isinstance(value, float):
        if value.is_integer():
            return f"{int(value):,}"
        return f"{Decimal(repr(value)):,f}"
    return f"{value:,}"


def format_summary(values: SummaryValues) -> dict[str, str]:
    """Format the six summary cells and their three sums."""
    return {key: format_number(value) for key, value in values.as_dict().items()}
