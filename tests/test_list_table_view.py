import time

from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QPushButton

from gui.models import Badge, RowAction
from gui.services.settings_service import SettingsService
from gui.views.admin_lists import (
    create_customer_list_view,
    create_user_archive_view,
    customer_list_columns,
)
from gui.viewmodels.list_viewmodel import ListViewModel
from gui.views.list_table_view import ListTableView

from factories import make_customers, make_users


def _texts(view, col):
    return [view.table.item(r, col).text() for r in range(view.table.rowCount())]


def _wait_for(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not condition():
        assert time.monotonic() < deadline, "condition not met before timeout"
        QTest.qWait(10)


def test_user_archive_first_page(qtbot):
    view = create_user_archive_view(make_users(30))
    qtbot.addWidget(view)
    assert view.table.rowCount() == 4
    assert view.table.columnCount() == 8
    assert _texts(view, 0) == ["User 1", "User 2", "User 3", "User 4"]
    assert view.page_label.text() == "Page 1 of 8"
    assert view.summary_label.text() == "Showing 1 to 4 of 30 results"
    assert not view.prev_button.isEnabled()
    assert view.next_button.isEnabled()
    assert len(view.page_buttons) == 8
    assert view.page_buttons[0].isChecked()


def test_next_button_and_page_buttons(qtbot):
    view = create_user_archive_view(make_users(30))
    qtbot.addWidget(view)
    view.next_button.click()
    assert _texts(view, 0) == ["User 5", "User 6", "User 7", "User 8"]
    view.page_buttons[7].click()
    assert _texts(view, 0) == ["User 29", "User 30"]
    assert not view.next_button.isEnabled()
    assert view.page_buttons[7].isChecked()


def test_filter_updates_table_and_clamps(qtbot):
    view = create_user_archive_view(make_users(30))
    qtbot.addWidget(view)
    view.go_to_page(8)
    view.set_filter_text("user 2")  # User 2, 20..29 -> 11 rows
    assert view.viewmodel.state.page == 3
    assert view.page_label.text() == "Page 3 of 3"
    view.set_filter_text("nobody")
    assert view.table.rowCount() == 0
    assert view.is_empty_state_active()
    assert view.summary_label.text() == "No results"
    assert view.page_label.text() == "Page 1 of 1"
    assert view.search_input.text() == "nobody"


def test_search_box_applies_filter_after_debounce(qtbot):
    settings = SettingsService(filter_debounce_ms=20)
    view = create_user_archive_view(make_users(30), settings=settings)
    qtbot.addWidget(view)
    view.search_input.setText("austin")  # users 5, 10 .. 30
    assert view.viewmodel.state.filter_text == ""
    assert view.summary_label.text() == "Showing 1 to 4 of 30 results"
    _wait_for(lambda: view.viewmodel.state.filter_text == "austin")
    assert view.summary_label.text() == "Showing 1 to 4 of 6 results"
    assert _texts(view, 5) == ["Austin"] * 4


def test_programmatic_filter_cancels_pending_search(qtbot):
    settings = SettingsService(filter_debounce_ms=20)
    view = create_user_archive_view(make_users(30), settings=settings)
    qtbot.addWidget(view)
    view.search_input.setText("austin")
    view.set_filter_text("toledo")
    assert view.search_input.text() == "toledo"
    QTest.qWait(60)
    assert view.viewmodel.state.filter_text == "toledo"
    assert set(_texts(view, 5)) == {"Toledo"}


def test_role_filter_dropdown(qtbot):
    users = make_users(30)
    view = create_user_archive_view(users)
    qtbot.addWidget(view)
    combo = view.filter_combos["role"]
    assert [combo.itemText(i) for i in range(combo.count())] == ["All Role", "RN", "LPN", "LVN"]
    combo.setCurrentIndex(1)
    assert view.table.rowCount() == 4
    assert _texts(view, 2) == ["RN"] * 4
    assert view.summary_label.text() == "Showing 1 to 4 of 10 results"
    view.go_to_page(3)
    assert _texts(view, 2) == ["RN"] * 2
    combo.setCurrentIndex(0)
    assert view.viewmodel.state.column_filters == {}
    assert view.summary_label.text() == "Showing 9 to 12 of 30 results"


def test_experience_filter_dropdown(qtbot):
    users = make_users(30)
    view = create_user_archive_view(users)
    qtbot.addWidget(view)
    view.filter_combos["years_of_experience"].setCurrentIndex(1)  # less than 5 years
    expected = [u for u in users if u.years_of_experience < 5]
    assert view.viewmodel.view.pagination.total_items == len(expected)
    assert view.viewmodel.view.records() == expected[:4]
    view.filter_combos["years_of_experience"].setCurrentIndex(2)
    assert all(u.years_of_experience >= 5 for u in view.viewmodel.view.records())


def test_header_click_sorts_sortable_columns(qtbot):
    view = create_user_archive_view(make_users(30))
    qtbot.addWidget(view)
    view.request_sort_column(0)  # Name asc
    assert _texts(view, 0) == ["User 1", "User 10", "User 11", "User 12"]
    assert view.table.horizontalHeaderItem(0).text() == "Name ▲"
    view.request_sort_column(0)  # Name desc
    assert _texts(view, 0) == ["User 9", "User 8", "User 7", "User 6"]
    view.request_sort_column(0)  # none
    assert _texts(view, 0) == ["User 1", "User 2", "User 3", "User 4"]
    assert view.table.horizontalHeaderItem(0).text() == "Name"
    view.request_sort_column(5)  # City is not sortable
    assert view.viewmodel.state.sort.direction.value == "none"


def test_badge_and_action_cells(qtbot):
    users = make_users(30)
    view = create_user_archive_view(users)
    qtbot.addWidget(view)
    role_item = view.table.item(0, 2)
    assert role_item.text() == users[0].role
    assert role_item.data(Qt.ItemDataRole.UserRole) in {"green", "blue", "yellow"}
    received = []
    view.rowActionRequested.connect(lambda action, record: received.append((action, record)))
    box = view.table.cellWidget(1, 7)
    box.findChildren(QPushButton)[0].click()
    assert received == [("reactivate", users[1])]


def test_customer_list_uses_customer_page_size(qtbot):
    settings = SettingsService(customer_page_size=8)
    customers = make_customers(30)
    view = create_customer_list_view(customers, settings=settings)
    qtbot.addWidget(view)
    assert view.table.rowCount() == 8
    assert view.page_label.text() == "Page 1 of 4"
    received = []
    view.rowActionRequested.connect(lambda action, record: received.append((action, record.id)))
    buttons = view.table.cellWidget(0, 5).findChildren(QPushButton)
    assert [b.text() for b in buttons] == ["Edit", "Delete"]
    buttons[1].click()
    assert received == [("delete", "customer-1")]


def test_generic_view_with_custom_viewmodel(qtbot):
    customers = make_customers(3)
    vm = ListViewModel(customer_list_columns(), customers, page_size=2)
    view = ListTableView(vm, "Customers")
    qtbot.addWidget(view)
    assert view.title_label.text() == "Customers"
    assert _texts(view, 4) == [f"{c.license_use}%" for c in customers[:2]]
    cell = vm.view.rows[0].cells[1]
    assert isinstance(cell, Badge)
    assert isinstance(vm.view.rows[0].cells[5][0], RowAction)
