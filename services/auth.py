"""Login / registration field checks.

There is no account backend; these only mirror the form checks a user sees
before being forwarded to the dashboard.
"""
from domain.models import ValidationResult

MIN_PASSWORD_LENGTH = 8


def _fail(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, errors=[message])


def validate_login(email: str, password: str) -> ValidationResult:
    if not (email or '').strip() or not password:
        return _fail('Please fill in all fields')
    return ValidationResult(is_valid=True)


def validate_registration(name: str, email: str, password: str, confirm: str) -> ValidationResult:
    if not (name or '').strip() or not (email or '').strip() or not password or not confirm:
        return _fail('All fields are required')
    if len(password) < MIN_PASSWORD_LENGTH:
        return _fail(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    if password != confirm:
        return _fail('Passwords do not match')
    return ValidationResult(is_valid=True)
