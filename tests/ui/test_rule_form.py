"""Tests for the PyQt6 RuleForm widget and the sign-up window (offscreen)."""
import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PyQt6.QtWidgets import QApplication, QLineEdit
except ImportError:  # Qt libraries unavailable on this machine
    QApplication = None

from form_rules.context import ValidationContext
from form_rules.rules import required, min_length, matches

if QApplication is not None:
    from form_rules.ui import RuleForm
    from app_signup import SignupService, SignupWindow, USERNAME_TAKEN, EMAIL_TAKEN


def _app():
    return QApplication.instance() or QApplication([])


@unittest.skipIf(QApplication is None, "PyQt6 not available")
class TestRuleForm(unittest.TestCase):
    def setUp(self) -> None:
        self.app = _app()
        self.form = RuleForm()
        self.name_input = self.form.add_field("name", QLineEdit(), [required("missing"), min_length(3, "short")])

    def test_first_failure_is_shown(self) -> None:
        self.assertFalse(self.form.validate())
        self.assertEqual(self.form.error_for("name"), "missing")
        self.assertEqual(self.name_input.toolTip(), "missing")

        self.name_input.setText("ab")
        self.assertFalse(self.form.validate())
        self.assertEqual(self.form.error_for("name"), "short")

    def test_valid_input_clears_message(self) -> None:
        self.form.validate()
        self.name_input.setText("Anna")
        self.assertTrue(self.form.validate())
        self.assertIsNone(self.form.error_for("name"))
        self.assertEqual(self.name_input.styleSheet(), "")

    def test_duplicate_field_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.form.add_field("name", QLineEdit(), [])

    def test_matches_reads_other_input_at_validation_time(self) -> None:
        password = self.form.add_field("password", QLineEdit(), [])
        confirm = self.form.add_field("confirm", QLineEdit(), [matches(password.text, "mismatch")])
        self.name_input.setText("Anna")
        password.setText("secret")
        confirm.setText("secret")
        self.assertTrue(self.form.validate())
        password.setText("changed")
        self.assertFalse(self.form.validate())
        self.assertEqual(self.form.error_for("confirm"), "mismatch")

    def test_server_error_shown_then_cleared(self) -> None:
        ctx = ValidationContext()
        form = RuleForm()
        field = form.add_field("email", QLineEdit(), [ctx.api_error_rule("taken", "already used")])
        field.setText("a@b.co")
        self.assertTrue(ctx.bind_and_validate(form))
        ctx.report_server_error("taken")
        self.assertEqual(form.error_for("email"), "already used")
        self.assertTrue(form.validate())
        self.assertIsNone(form.error_for("email"))


@unittest.skipIf(QApplication is None, "PyQt6 not available")
class TestSignupWindow(unittest.TestCase):
    def setUp(self) -> None:
        self.app = _app()
        self.service = SignupService({"admin"}, {"used@example.com"})
        self.window = SignupWindow(self.service)

    def _fill(self, **values) -> None:
        for name, text in values.items():
            self.window.form.line_edit(name).setText(text)

    def test_invalid_form_not_sent(self) -> None:
        self._fill(username="x", email="bad", password="short", confirm_password="other")
        self.assertFalse(self.window.submit())
        self.assertEqual(self.window.form.error_for("username"), "Min 3 characters allowed.")
        self.assertEqual(self.window.form.error_for("email"), "Invalid email address format.")
        self.assertEqual(self.window.form.error_for("confirm_password"), "Passwords must match.")

    def test_taken_username_reported_on_field(self) -> None:
        self._fill(
            username="admin",
            email="new@example.com",
            phone="555-123-4567",
            password="longenough",
            confirm_password="longenough",
        )
        self.assertFalse(self.window.submit())
        self.assertEqual(self.window.form.error_for("username"), "This username is already taken.")
        self.assertIsNone(self.window.form.error_for("email"))
        self.assertEqual(self.window.validation.active_server_error_codes, frozenset())

    def test_successful_signup(self) -> None:
        self._fill(
            username="new_user",
            email="new@example.com",
            phone="555-123-4567",
            password="longenough",
            confirm_password="longenough",
        )
        self.assertTrue(self.window.submit())
        self.assertIn("new_user", self.service.taken_usernames)


class TestSignupService(unittest.TestCase):
    def test_returns_single_error_code(self) -> None:
        if QApplication is None:
            self.skipTest("PyQt6 not available")
        service = SignupService({"admin"}, {"used@example.com"})
        self.assertEqual(service.register({"username": "Admin", "email": "x@y.co"}), USERNAME_TAKEN)
        self.assertEqual(service.register({"username": "bob", "email": "used@example.com"}), EMAIL_TAKEN)
        self.assertIsNone(service.register({"username": "bob", "email": "bob@example.com"}))
        self.assertEqual(service.register({"username": "bob", "email": "other@example.com"}), USERNAME_TAKEN)


if __name__ == "__main__":
    unittest.main()
