"""
Application services module.
"""

from app.services.export import format_currency, render_print_view, schedule_to_csv

__all__ = ["format_currency", "render_print_view", "schedule_to_csv"]
