"""Application-level settings service for the list views.

Centralizes user preferences for paging and filtering. It is intentionally
lightweight and accessed through the `SettingsService.instance` singleton,
which tests and application bootstrap may replace with a test double.
Defaults come from `config.settings` so they can be tuned via environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from config.settings import CUSTOMER_PAGE_SIZE, DEFAULT_PAGE_SIZE, FILTER_DEBOUNCE_MS


@dataclass
class SettingsService:
    """Runtime settings for list views.

    Attributes:
        default_page_size: Rows per page for the user archive lists.
        customer_page_size: Rows per page for the customer list.
        filter_debounce_ms: Delay between the last keystroke in a search box
            and the recomputation it triggers.
        reset_page_on_filter_change: When True, editing the filter text jumps
            back to page 1. When False (default) the current page is kept and
            only clamped if the filtered result no longer reaches it.
    """

    instance: ClassVar["SettingsService"]

    default_page_size: int = DEFAULT_PAGE_SIZE
    customer_page_size: int = CUSTOMER_PAGE_SIZE
    filter_debounce_ms: int = FILTER_DEBOUNCE_MS
    reset_page_on_filter_change: bool = False


# Initialize default singleton
SettingsService.instance = SettingsService()
