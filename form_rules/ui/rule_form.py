"""PyQt6 form widget that validates QLineEdit inputs against per-field rules."""
import logging
from collections.abc import Sequence

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QFormLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from form_rules.rule_set import first_failure
from form_rules.rules import DecisionFunction

logger = logging.getLogger(__name__)

INVALID_COLOUR = QColor(255, 0, 0)


class _FieldRow:
    def __init__(self, line_edit: QLineEdit, rules: Sequence[DecisionFunction], error_label: QLabel):
        self.line_edit = line_edit
        self.rules = list(rules)
        self.error_label = error_label


class RuleForm(QWidget):
    """Form of labelled QLineEdits, each with its own ordered rules.

    validate() shows the first failing message under each invalid input and
    tints it with INVALID_COLOUR. Implements the FormAdapter contract, so it
    can be handed to ValidationContext.bind_and_validate().
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._rows: dict[str, _FieldRow] = {}
        self.form_layout = QFormLayout()
        layout = QVBoxLayout()
        layout.addLayout(self.form_layout)
        self.setLayout(layout)

    def add_field(
        self,
        name: str,
        line_edit: QLineEdit,
        rules: Sequence[DecisionFunction],
        label: str | None = None,
    ) -> QLineEdit:
        if name in self._rows:
            raise ValueError(f"Field already registered: {name}")

        error_label = QLabel("")
        error_label.setStyleSheet(
            f"QLabel {{ color: rgb({INVALID_COLOUR.red()}, {INVALID_COLOUR.green()}, {INVALID_COLOUR.blue()}); }}"
        )
        error_label.setWordWrap(True)
        error_label.setHidden(True)

        column = QVBoxLayout()
        column.setSpacing(2)
        column.addWidget(line_edit)
        column.addWidget(error_label)
        self.form_layout.addRow(label or name, column)

        self._rows[name] = _FieldRow(line_edit, rules, error_label)
        return line_edit

    def field_names(self) -> list[str]:
        return list(self._rows)

    def line_edit(self, name: str) -> QLineEdit:
        return self._rows[name].line_edit

    def values(self) -> dict[str, str]:
        """Current text of every registered field."""
        return {name: row.line_edit.text() for name, row in self._rows.items()}

    def error_for(self, name: str) -> str | None:
        row = self._rows[name]
        if row.error_label.isHidden():
            return None
        return row.error_label.text()

    def validate(self) -> bool:
        valid = True
        for name, row in self._rows.items():
            message = first_failure(row.rules, row.line_edit.text(), name)
            self._show_error(row, message)
            if message is not None:
                logger.debug("Field %s failed: %s", name, message)
                valid = False
        return valid

    def clear_errors(self) -> None:
        for row in self._rows.values():
            self._show_error(row, None)

    def _show_error(self, row: _FieldRow, message: str | None) -> None:
        if message is None:
            row.error_label.setText("")
            row.error_label.setHidden(True)
            row.line_edit.setToolTip("")
            row.line_edit.setStyleSheet("")
            return
        row.error_label.setText(message)
        row.error_label.setHidden(False)
        row.line_edit.setToolTip(message)
        row.line_edit.setStyleSheet(
            f"QLineEdit {{ background-color: rgba({INVALID_COLOUR.red()}, {INVALID_COLOUR.green()}, {INVALID_COLOUR.blue()}, 0.10); }}"
        )
