"""GUI-facing lightweight models for the admin list views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

UserRole = Literal["RN", "LPN", "LVN"]
Visibility = Literal["visible", "invisible"]
CustomerType = Literal["Customer", "Churned", "Active"]


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str
    email: str
    role: UserRole
    visibility: Visibility
    phone_number: str
    city: str
    years_of_experience: int = 0


@dataclass(frozen=True)
class CustomerRecord:
    id: str
    name: str
    description: str
    type: CustomerType
    users: int
    license_use: int  # percent, 1..100
    actions: bool = False


@dataclass(frozen=True)
class Badge:
    """Rendered cell value for a colored status pill."""

    text: str
    tone: str  # "green" | "blue" | "yellow" | "red"


@dataclass(frozen=True)
class RowAction:
    """Rendered cell value for a row-level action button.

    The list view renders it as a button; clicking emits the action id along
    with the record the row was built from.
    """

    action: str
    label: str
