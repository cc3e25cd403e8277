"""Global configuration and constants for the admin list views."""

from __future__ import annotations

import os
from typing import Final

# Rows per page for the user archive lists
DEFAULT_PAGE_SIZE: Final = int(os.environ.get("ADMINLISTS_PAGE_SIZE", "4"))
CUSTOMER_PAGE_SIZE: Final = int(os.environ.get("ADMINLISTS_CUSTOMER_PAGE_SIZE", "8"))

FILTER_DEBOUNCE_MS: Final = 250  # milliseconds
