"""Deterministic record factories mirroring the demo data of the list screens."""

from __future__ import annotations

from typing import List

from gui.models import CustomerRecord, UserRecord

ROLES = ("RN", "LPN", "LVN")
CITIES = ("Austin", "Naperville", "Fairfield", "Orange", "Toledo")
DESCRIPTIONS = (
    "Content curating app",
    "Design software",
    "Data prediction",
    "Productivity app",
    "Web app integrations",
    "Sales CRM",
    "Automation and workflow",
)
CUSTOMER_TYPES = ("Customer", "Churned", "Active")


def make_user(i: int, **kw) -> UserRecord:
    base = dict(
        id=i,
        name=f"User {i}",
        email=f"user{i}@example.com",
        role=ROLES[i % len(ROLES)],
        visibility="visible" if i % 2 else "invisible",
        phone_number=f"({100 + i}) 555-{i:04d}",
        city=CITIES[i % len(CITIES)],
        years_of_experience=(i * 7) % 20 + 1,
    )
    base.update(kw)
    return UserRecord(**base)  # type: ignore[arg-type]


def make_users(count: int = 30) -> List[UserRecord]:
    return [make_user(i) for i in range(1, count + 1)]


def make_customer(i: int, **kw) -> CustomerRecord:
    base = dict(
        id=f"customer-{i}",
        name=f"Customer {i}",
        description=DESCRIPTIONS[i % len(DESCRIPTIONS)],
        type=CUSTOMER_TYPES[i % len(CUSTOMER_TYPES)],
        users=(i * 13) % 50 + 1,
        license_use=(i * 37) % 100 + 1,
        actions=False,
    )
    base.update(kw)
    return CustomerRecord(**base)  # type: ignore[arg-type]


def make_customers(count: int = 30) -> List[CustomerRecord]:
    return [make_customer(i) for i in range(1, count + 1)]


__all__ = [
    "make_user",
    "make_users",
    "make_customer",
    "make_customers",
]
