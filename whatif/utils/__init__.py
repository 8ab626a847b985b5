"""Shared helpers."""

from .formatting import format_currency, format_currency_list, group_indian_digits

__all__ = ["format_currency", "format_currency_list", "group_indian_digits"]
