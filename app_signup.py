"""Sign-up window demonstrating field rules and server-reported errors."""
import logging
import sys

from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QLineEdit,
    QPushButton,
    QMessageBox,
)

from form_rules import (
    ValidationContext,
    required,
    email,
    phone,
    matches,
    max_length,
    min_length,
    username,
)
from form_rules.app_config import AppConfig
from form_rules.ui import RuleForm

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "auth/username-taken"
EMAIL_TAKEN = "auth/email-taken"


class SignupService:
    """In-process stand-in for the sign-up endpoint.

    Returns a single error code for a rejected request, or None on success.
    """

    def __init__(self, taken_usernames=frozenset(), taken_emails=frozenset()):
        self.taken_usernames = set(taken_usernames)
        self.taken_emails = set(taken_emails)

    def register(self, values: dict[str, str]) -> str | None:
        name = values.get("username", "").lower()
        address = values.get("email", "").lower()
        if name in self.taken_usernames:
            return USERNAME_TAKEN
        if address in self.taken_emails:
            return EMAIL_TAKEN
        self.taken_usernames.add(name)
        self.taken_emails.add(address)
        logger.info("Registered user %s", name)
        return None


class SignupWindow(QMainWindow):
    """Main window: sign-up form plus submit button."""

    def __init__(self, service: SignupService):
        super().__init__()
        self.setWindowTitle("Sign Up")
        self.service = service
        self.validation = ValidationContext()
        self.init_ui()

    def init_ui(self):
        central = QWidget()
        layout = QVBoxLayout()
        central.setLayout(layout)
        self.setCentralWidget(central)

        self.form = RuleForm()
        v = self.validation

        self.form.add_field("username", QLineEdit(), [
            required(),
            username(),
            min_length(3),
            max_length(20),
            v.api_error_rule(USERNAME_TAKEN, "This username is already taken."),
        ], label="Username")
        self.form.add_field("email", QLineEdit(), [
            required(),
            email(),
            v.api_error_rule(EMAIL_TAKEN, "An account with this email already exists."),
        ], label="Email")
        self.form.add_field("phone", QLineEdit(), [phone()], label="Phone")

        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.form.add_field("password", self.password_input, [
            required(),
            min_length(8),
        ], label="Password")

        confirm_input = QLineEdit()
        confirm_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.form.add_field("confirm_password", confirm_input, [
            required(),
            matches(self.password_input.text, "Passwords must match."),
        ], label="Confirm password")

        layout.addWidget(self.form)

        self.submit_button = QPushButton("Sign up")
        self.submit_button.clicked.connect(self.submit)
        layout.addWidget(self.submit_button)

    def submit(self) -> bool:
        """Validate, send to the service and surface any error code it returns."""
        if not self.validation.bind_and_validate(self.form):
            logger.info("Sign-up form has invalid fields")
            return False

        values = self.form.values()
        try:
            error_code = self.service.register(values)
        except Exception as e:
            logger.error("Sign-up request failed: %s", e)
            QMessageBox.critical(self, "Sign Up", f"Sign-up request failed: {e}")
            return False

        if error_code:
            logger.info("Sign-up rejected with %s", error_code)
            self.validation.report_server_error(error_code)
            return False

        self.form.clear_errors()
        return True


def main():
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level)
    app = QApplication(sys.argv)
    service = SignupService(config.taken_usernames, config.taken_emails)
    window = SignupWindow(service)
    window.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
