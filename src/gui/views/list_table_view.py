"""ListTableView

QTableWidget-based view for an administrative list (user archive, customer
list). Rendering only: all state lives in the backing `ListViewModel`, and
every interaction (search, column filter, header click, page navigation) is
forwarded to it before the table is redrawn from the fresh view model.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from PyQt6.QtCore import QSignalBlocker, QTimer, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QComboBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from gui.models import Badge, RowAction
from gui.viewmodels.list_viewmodel import ListViewModel

__all__ = ["ListTableView", "FilterChoices"]

# column key -> [(label, criterion)]; criterion is a literal or a predicate
FilterChoices = Mapping[str, Sequence[Tuple[str, Any]]]


class ListTableView(QWidget):
    """Searchable, sortable, paginated table bound to a `ListViewModel`.

    Signals:
        rowActionRequested(action, record): a row action button was clicked.
    """

    rowActionRequested = pyqtSignal(str, object)

    def __init__(
        self,
        viewmodel: ListViewModel,
        title: str = "",
        parent: Optional[QWidget] = None,
        *,
        search_placeholder: str = "Search...",
        debounce_ms: int = 250,
        filter_choices: FilterChoices | None = None,
    ):
        super().__init__(parent)
        self.viewmodel = viewmodel
        self.page_buttons: List[QPushButton] = []
        self.filter_combos: Dict[str, QComboBox] = {}
        self._filter_criteria: Dict[str, List[Any]] = {}
        self._pending_filter: Optional[str] = None
        self._build_ui(title, search_placeholder, debounce_ms, filter_choices or {})
        self._render()

    def _build_ui(
        self, title: str, search_placeholder: str, debounce_ms: int, filter_choices: FilterChoices
    ):
        root = QVBoxLayout(self)
        self.title_label = QLabel(title)
        self.title_label.setObjectName("viewTitleLabel")
        root.addWidget(self.title_label)

        toolbar = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText(search_placeholder)
        self.search_input.textChanged.connect(self.schedule_filter_text)  # type: ignore
        toolbar.addWidget(self.search_input, 1)
        labels = {c.key: c.label for c in self.viewmodel.schema}
        for key, choices in filter_choices.items():
            combo = QComboBox()
            combo.setObjectName(f"columnFilter_{key}")
            combo.addItem(f"All {labels.get(key, key)}")
            self._filter_criteria[key] = [None]
            for label, criterion in choices:
                combo.addItem(label)
                self._filter_criteria[key].append(criterion)
            combo.currentIndexChanged.connect(  # type: ignore
                lambda index, k=key: self._on_column_filter_changed(k, index)
            )
            toolbar.addWidget(combo)
            self.filter_combos[key] = combo
        root.addLayout(toolbar)
        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(debounce_ms)
        self._debounce.timeout.connect(self._apply_pending_filter)  # type: ignore

        self.table = QTableWidget(0, len(self.viewmodel.schema))
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.sectionClicked.connect(self.request_sort_column)  # type: ignore
        root.addWidget(self.table)

        self.empty_label = QLabel("No matching records")
        self.empty_label.setObjectName("listEmptyState")
        root.addWidget(self.empty_label)

        footer = QHBoxLayout()
        self.summary_label = QLabel()
        self.summary_label.setObjectName("listSummaryLabel")
        footer.addWidget(self.summary_label)
        footer.addStretch(1)
        self.page_label = QLabel()
        footer.addWidget(self.page_label)
        self.prev_button = QPushButton("Previous")
        self.prev_button.clicked.connect(self._on_previous)  # type: ignore
        footer.addWidget(self.prev_button)
        self._page_button_row = QHBoxLayout()
        footer.addLayout(self._page_button_row)
        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self._on_next)  # type: ignore
        footer.addWidget(self.next_button)
        root.addLayout(footer)

    # Public API ---------------------------------------------------
    def schedule_filter_text(self, text: str):
        """Debounced filter setter bound to the search box."""
        self._pending_filter = text
        self._debounce.start()

    def set_filter_text(self, text: str):
        self._debounce.stop()
        self._pending_filter = None
        if self.search_input.text() != text:
            with QSignalBlocker(self.search_input):
                self.search_input.setText(text)
        self.viewmodel.set_filter_text(text)
        self._render()

    def set_column_filter(self, key: str, criterion: Any):
        self.viewmodel.set_column_filter(key, criterion)
        self._render()

    def request_sort_column(self, logical_index: int):
        schema = self.viewmodel.schema
        if not 0 <= logical_index < len(schema):
            return
        if self.viewmodel.request_sort(schema[logical_index].key):
            self._render()

    def go_to_page(self, page: int):
        self.viewmodel.go_to_page(page)
        self._render()

    def is_empty_state_active(self) -> bool:
        return not self.empty_label.isHidden()

    # Internal -----------------------------------------------------
    def _apply_pending_filter(self):
        if self._pending_filter is None:
            return
        self.set_filter_text(self._pending_filter)

    def _on_column_filter_changed(self, key: str, index: int):
        criteria = self._filter_criteria.get(key, [])
        if not 0 <= index < len(criteria):
            return
        self.set_column_filter(key, criteria[index])

    def _on_previous(self):
        self.viewmodel.previous_page()
        self._render()

    def _on_next(self):
        self.viewmodel.next_page()
        self._render()

    def _render(self):
        vm = self.viewmodel.view
        labels = []
        for col in vm.headers:
            glyph = self.viewmodel.sort_indicator(col.key)
            labels.append(f"{col.label} {glyph}" if glyph else col.label)
        self.table.setHorizontalHeaderLabels(labels)
        self.table.clearContents()
        self.table.setRowCount(len(vm.rows))
        for r, row in enumerate(vm.rows):
            for c, value in enumerate(row.cells):
                self._set_cell(r, c, value, row.record)

        p = vm.pagination
        self.empty_label.setVisible(not vm.rows)
        self.summary_label.setText(vm.summary_text())
        self.page_label.setText(f"Page {p.current_page} of {max(p.total_pages, 1)}")
        self.prev_button.setEnabled(p.has_previous)
        self.next_button.setEnabled(p.has_next)
        self._rebuild_page_buttons(p.current_page, p.total_pages)

    def _set_cell(self, r: int, c: int, value: Any, record: Any):
        actions = self._as_actions(value)
        if actions:
            self.table.setItem(r, c, QTableWidgetItem(""))
            self.table.setCellWidget(r, c, self._action_widget(actions, record))
            return
        if isinstance(value, Badge):
            item = QTableWidgetItem(value.text)
            item.setData(Qt.ItemDataRole.UserRole, value.tone)
        else:
            item = QTableWidgetItem(str(value))
        self.table.setItem(r, c, item)

    @staticmethod
    def _as_actions(value: Any) -> list[RowAction]:
        if isinstance(value, RowAction):
            return [value]
        if isinstance(value, (tuple, list)) and value and all(isinstance(v, RowAction) for v in value):
            return list(value)
        return []

    def _action_widget(self, actions: list[RowAction], record: Any) -> QWidget:
        box = QWidget()
        layout = QHBoxLayout(box)
        layout.setContentsMargins(0, 0, 0, 0)
        for act in actions:
            btn = QPushButton(act.label)
            btn.setObjectName("rowActionButton")
            btn.clicked.connect(  # type: ignore
                lambda _checked=False, a=act.action, rec=record: self.rowActionRequested.emit(a, rec)
            )
            layout.addWidget(btn)
        return box

    def _rebuild_page_buttons(self, current: int, total: int):
        while self._page_button_row.count():
            item = self._page_button_row.takeAt(0)
            w = item.widget() if item is not None else None
            if w is not None:
                w.deleteLater()
        self.page_buttons = []
        for number in range(1, total + 1):
            btn = QPushButton(str(number))
            btn.setCheckable(True)
            btn.setChecked(number == current)
            btn.clicked.connect(lambda _checked=False, n=number: self.go_to_page(n))  # type: ignore
            self._page_button_row.addWidget(btn)
            self.page_buttons.append(btn)
