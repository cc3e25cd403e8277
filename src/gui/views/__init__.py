"""GUI view layer (PyQt6 widgets) for the admin lists.

Exports:
 - ListTableView, FilterChoices
 - create_user_archive_view / create_customer_list_view
"""

from .list_table_view import FilterChoices, ListTableView  # noqa: F401
from .admin_lists import create_customer_list_view, create_user_archive_view  # noqa: F401
