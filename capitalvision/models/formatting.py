"""
Display formatting for projection figures.

Amounts are shown in euros the French way: grouped by thousands with a
narrow no-break space, no decimals, and the symbol after the amount.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field

NARROW_NO_BREAK_SPACE = "\u202f"
NO_BREAK_SPACE = "\u00a0"


class CurrencyFormatter(BaseModel):
    """Formats currency and percentage values for display."""

    currency_symbol: str = Field(default="€", description="Currency symbol")
    symbol_position: Literal["prefix", "suffix"] = Field(
        default="suffix", description="Where the currency symbol is placed"
    )
    decimal_places: int = Field(
        default=0, ge=0, le=10, description="Number of decimal places"
    )
    thousands_separator: str = Field(
        default=NARROW_NO_BREAK_SPACE, description="Thousands separator"
    )
    decimal_separator: str = Field(default=",", description="Decimal separator")
    show_currency_symbol: bool = Field(
        default=True, description="Whether to show currency symbol"
    )

    def format_currency(self, amount: float, show_symbol: Optional[bool] = None) -> str:
        """
        Format a currency amount for display.

        Args:
            amount: The amount to format
            show_symbol: Override the default symbol display setting

        Returns:
            Formatted currency string, e.g. ``"12 346 €"``
        """
        show_symbol = (
            show_symbol if show_symbol is not None else self.show_currency_symbol
        )

        rounded = Decimal(str(amount))
        if rounded.is_finite():
            # Halves round away from zero, as browsers display amounts
            rounded = rounded.quantize(
                Decimal(1).scaleb(-self.decimal_places), rounding=ROUND_HALF_UP
            )
        sign = "-" if rounded < 0 else ""

        # Group with a placeholder first so separators can be any string
        formatted = f"{abs(rounded):,.{self.decimal_places}f}"
        formatted = sign + (
            formatted.replace(",", "\x00")
            .replace(".", self.decimal_separator)
            .replace("\x00", self.thousands_separator)
        )

        if not show_symbol:
            return formatted
        if self.symbol_position == "prefix":
            return f"{self.currency_symbol}{formatted}"
        return f"{formatted}{NO_BREAK_SPACE}{self.currency_symbol}"

    def format_percentage(self, percentage: float, decimal_places: int = 2) -> str:
        """
        Format a percentage for display.

        Args:
            percentage: The value in percent (4.5 = 4.5 %)
            decimal_places: Number of decimal places to show

        Returns:
            Formatted percentage string, e.g. ``"4.50%"``
        """
        return f"{percentage:.{decimal_places}f}%"


_default_formatter = CurrencyFormatter()


def format_currency(amount: float) -> str:
    """Format an amount with the default euro formatter."""
    return _default_formatter.format_currency(amount)


def format_percentage(percentage: float) -> str:
    """Format a percentage with two decimals."""
    return _default_formatter.format_percentage(percentage)
