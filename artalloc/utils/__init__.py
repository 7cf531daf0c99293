"""Shared helpers."""

from .dates import current_month_and_date

__all__ = ["current_month_and_date"]
