"""Utility functions for ptaquery."""

from ptaquery.utils.date_parser import parse_date, parse_iso_date, get_date_range
from ptaquery.utils.amount_parser import parse_amount, format_amount

__all__ = ["parse_date", "parse_iso_date", "get_date_range", "parse_amount", "format_amount"]
