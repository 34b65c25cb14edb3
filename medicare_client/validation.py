"""Client-side form validation.

Validation errors are caught before any network call and never reach the
stores. Each validator returns {field: message}; an empty dict means valid.
"""
import re
from typing import Any, Dict, Mapping

from medicare_client.envelope import Envelope, Failure
from medicare_client.notifications import Notifier

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

# At least 8 characters with one lowercase, one uppercase and one digit
PASSWORD_PATTERN = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d]{8,}$')

PHONE_PATTERN = re.compile(r'^\d{10,15}$')

PASSWORD_RULES = "Password must be at least 8 characters with 1 uppercase, 1 lowercase, and 1 number"

MIN_PASSWORD_CHANGE_LENGTH = 6


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def is_valid_password(password: str) -> bool:
    return bool(PASSWORD_PATTERN.match(password or ""))


def is_valid_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.match(phone or ""))


def _validate_name(values: Mapping[str, Any], errors: Dict[str, str]) -> None:
    name = values.get("name")
    if not name:
        errors["name"] = "Name is required"
    elif len(name) < 3:
        errors["name"] = "Name must be at least 3 characters"


def validate_login_form(values: Mapping[str, Any]) -> Dict[str, str]:
    errors = {}

    if not values.get("email"):
        errors["email"] = "Email is required"
    elif not is_valid_email(values["email"]):
        errors["email"] = "Invalid email format"

    if not values.get("password"):
        errors["password"] = "Password is required"

    return errors


def validate_registration_form(values: Mapping[str, Any]) -> Dict[str, str]:
    """Validate sign-up fields, including doctor-only fields."""
    errors = {}
    _validate_name(values, errors)

    if not values.get("email"):
        errors["email"] = "Email is required"
    elif not is_valid_email(values["email"]):
        errors["email"] = "Invalid email format"

    if not values.get("password"):
        errors["password"] = "Password is required"
    elif not is_valid_password(values["password"]):
        errors["password"] = PASSWORD_RULES

    if values.get("password") != values.get("confirmPassword"):
        errors["confirmPassword"] = "Passwords do not match"

    if not values.get("gender"):
        errors["gender"] = "Gender is required"

    if values.get("role") == "doctor" and not values.get("specialization"):
        errors["specialization"] = "Specialization is required"

    return errors


def validate_profile_form(values: Mapping[str, Any]) -> Dict[str, str]:
    errors = {}
    _validate_name(values, errors)

    if values.get("phone") and not is_valid_phone(str(values["phone"])):
        errors["phone"] = "Invalid phone number format"

    if values.get("role") == "doctor":
        if not values.get("specialization"):
            errors["specialization"] = "Specialization is required"

        price = values.get("ticketPrice")
        if not price:
            errors["ticketPrice"] = "Ticket price is required"
        else:
            try:
                positive = float(price) > 0
            except (TypeError, ValueError):
                positive = False
            if not positive:
                errors["ticketPrice"] = "Ticket price must be a positive number"

    return errors


def validate_password_form(values: Mapping[str, Any]) -> Dict[str, str]:
    errors = {}

    if not values.get("currentPassword"):
        errors["currentPassword"] = "Current password is required"

    if not values.get("newPassword"):
        errors["newPassword"] = "New password is required"
    elif not is_valid_password(values["newPassword"]):
        errors["newPassword"] = PASSWORD_RULES

    if values.get("newPassword") != values.get("confirmPassword"):
        errors["confirmPassword"] = "Passwords do not match"

    return errors


def submit_password_update(
    user_service,
    notifier: Notifier,
    current_password: str,
    new_password: str,
    confirm_password: str
) -> Envelope:
    """
    Change the password after local checks.

    Mismatched or too-short passwords are rejected with a notification and
    no request is sent.

    Returns:
        The service envelope, or a local Failure
    """
    if new_password != confirm_password:
        notifier.error("New passwords do not match")
        return Failure(message="New passwords do not match")

    if len(new_password) < MIN_PASSWORD_CHANGE_LENGTH:
        message = f"New password must be at least {MIN_PASSWORD_CHANGE_LENGTH} characters long"
        notifier.error(message)
        return Failure(message=message)

    result = user_service.update_password({
        "currentPassword": current_password,
        "newPassword": new_password,
    })

    if result.success:
        notifier.success("Password updated successfully")
    else:
        notifier.error(result.message or "Failed to update password")
    return result
