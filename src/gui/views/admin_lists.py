"""Column schemas and view factories for the administrative lists.

Two lists share the generic `ListTableView`:
 - User archive: nurses and admins, searchable by name / e-mail / city and
   filterable by role, visibility and experience.
 - Customer list: companies with status badge, seat count and license use.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PyQt6.QtWidgets import QWidget

from gui.models import Badge, CustomerRecord, RowAction, UserRecord
from gui.services.settings_service import SettingsService
from gui.services.table_schema import ColumnDescriptor, build_schema, column
from gui.viewmodels.list_viewmodel import ListViewModel
from gui.views.list_table_view import FilterChoices, ListTableView

__all__ = [
    "USER_SEARCHABLE_FIELDS",
    "CUSTOMER_SEARCHABLE_FIELDS",
    "USER_FILTER_CHOICES",
    "user_archive_columns",
    "customer_list_columns",
    "create_user_archive_view",
    "create_customer_list_view",
]

USER_SEARCHABLE_FIELDS: Tuple[str, ...] = ("name", "email", "city")
CUSTOMER_SEARCHABLE_FIELDS: Tuple[str, ...] = ("name", "description", "type")

USER_FILTER_CHOICES: FilterChoices = {
    "role": [("RN", "RN"), ("LPN", "LPN"), ("LVN", "LVN")],
    "visibility": [("Visible", "visible"), ("Invisible", "invisible")],
    "years_of_experience": [
        ("Less than 5 years", lambda years: years is not None and years < 5),
        ("5 years or more", lambda years: years is not None and years >= 5),
    ],
}

_ROLE_TONES = {"RN": "green", "LPN": "blue"}
_CUSTOMER_TONES = {"Customer": "green", "Churned": "red"}


def user_archive_columns() -> Tuple[ColumnDescriptor, ...]:
    return build_schema(
        [
            column("name", "Name", sortable=True),
            column("email", "E-mail", sortable=True),
            column("role", "Role", render=lambda u: Badge(u.role, _ROLE_TONES.get(u.role, "yellow"))),
            column("visibility", "Visibility"),
            column("phone_number", "Phone Number"),
            column("city", "City"),
            column(
                "years_of_experience",
                "Years of Experience",
                render=lambda u: f"{u.years_of_experience} years",
                sortable=True,
            ),
            column("id", "Actions", render=lambda u: RowAction("reactivate", "Reactivate")),
        ],
        record_type=UserRecord,
    )


def customer_list_columns() -> Tuple[ColumnDescriptor, ...]:
    return build_schema(
        [
            column("name", "Company", sortable=True),
            column(
                "type", "Status", render=lambda c: Badge(c.type, _CUSTOMER_TONES.get(c.type, "yellow"))
            ),
            column("description", "Description"),
            column("users", "Users", sortable=True),
            column("license_use", "License Use", render=lambda c: f"{c.license_use}%", sortable=True),
            column(
                "actions",
                "Actions",
                render=lambda c: (RowAction("edit", "Edit"), RowAction("delete", "Delete")),
            ),
        ],
        record_type=CustomerRecord,
    )


def create_user_archive_view(
    users: Iterable[UserRecord],
    parent: Optional[QWidget] = None,
    *,
    settings: SettingsService | None = None,
) -> ListTableView:
    settings = settings or SettingsService.instance
    vm = ListViewModel(
        user_archive_columns(),
        users,
        searchable_fields=USER_SEARCHABLE_FIELDS,
        page_size=settings.default_page_size,
        settings=settings,
    )
    return ListTableView(
        vm,
        "Users Archive",
        parent,
        search_placeholder="Search users...",
        debounce_ms=settings.filter_debounce_ms,
        filter_choices=USER_FILTER_CHOICES,
    )


def create_customer_list_view(
    customers: Iterable[CustomerRecord],
    parent: Optional[QWidget] = None,
    *,
    settings: SettingsService | None = None,
) -> ListTableView:
    settings = settings or SettingsService.instance
    vm = ListViewModel(
        customer_list_columns(),
        customers,
        searchable_fields=CUSTOMER_SEARCHABLE_FIELDS,
        page_size=settings.customer_page_size,
        settings=settings,
    )
    return ListTableView(
        vm,
        "Customers",
        parent,
        search_placeholder="Search customers...",
        debounce_ms=settings.filter_debounce_ms,
    )
