"""
Adapter: Registration Field Rules.

Validates the user-registration and address payloads. Checks run in a
fixed order and only the first violation is reported.
"""

import logging
import re
from dataclasses import asdict
from typing import Any, Mapping

from idcheck.core.entities.registration import AddressFields, Role, UserRegistrationFields
from idcheck.core.entities.validation_result import ValidationResult
from idcheck.core.interfaces.validators import IFieldValidator

logger = logging.getLogger(__name__)

REQUIRED_USER_FIELDS = ("username", "name", "surname", "email", "password")
REQUIRED_ADDRESS_FIELDS = ("user_id", "street", "number", "neighborhood", "city", "state", "zip_code")

# Wire names reported back to clients
ADDRESS_LABELS = {"user_id": "userId", "zip_code": "zipCode"}

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ZIP_CODE_PATTERN = re.compile(r"\d{5}(-\d{4})?", re.ASCII)
PASSWORD_SPECIALS = "@$!%*?&"
MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8

PASSWORD_ERROR = (
    "Password must be at least 8 characters long and include an uppercase letter, "
    "a lowercase letter, and a number."
)
STRICT_PASSWORD_ERROR = (
    "Password must be at least 8 characters long and include an uppercase letter, "
    "a lowercase letter, a number, and a special character."
)
ROLE_ERROR = 'Invalid role. Allowed values are "User" or "Admin".'


def _password_ok(password: str, strict: bool) -> bool:
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    has_upper = any("A" <= c <= "Z" for c in password)
    has_lower = any("a" <= c <= "z" for c in password)
    has_digit = any("0" <= c <= "9" for c in password)
    if not (has_upper and has_lower and has_digit):
        return False
    return not strict or any(c in PASSWORD_SPECIALS for c in password)


class FieldRulesEngine(IFieldValidator):
    """
    Regras para campos de cadastro.

    Ordem (contrato observável):
        1. Campos obrigatórios
        2. Tamanho mínimo — name, surname, username
        3. Formato do email
        4. Força da senha
        5. Papel (User | Admin)
    """

    def validate_user(
        self,
        fields: UserRegistrationFields | Mapping[str, Any],
        required: bool = True,
        strict_password: bool = False,
    ) -> ValidationResult:
        if not isinstance(fields, UserRegistrationFields):
            fields = UserRegistrationFields.from_mapping(fields)

        if required:
            values = asdict(fields)
            missing = [name for name in REQUIRED_USER_FIELDS if not values.get(name)]
            if missing:
                logger.debug(f"Registration rejected: missing {missing}")
                return ValidationResult.format_error(f"Missing required fields: {', '.join(missing)}")

        for label, value in (("Name", fields.name), ("Surname", fields.surname), ("Username", fields.username)):
            if value and not isinstance(value, str):
                return ValidationResult.format_error(f"{label} must be a string.")
            if value and len(value) < MIN_NAME_LENGTH:
                return ValidationResult.format_error(f"{label} must be at least 2 characters long.")

        if fields.email and (not isinstance(fields.email, str) or EMAIL_PATTERN.fullmatch(fields.email) is None):
            return ValidationResult.format_error("Invalid email format.")

        if fields.password and (
            not isinstance(fields.password, str) or not _password_ok(fields.password, strict_password)
        ):
            return ValidationResult.format_error(STRICT_PASSWORD_ERROR if strict_password else PASSWORD_ERROR)

        if fields.role and (not isinstance(fields.role, str) or fields.role not in {r.value for r in Role}):
            return ValidationResult.format_error(ROLE_ERROR)

        return ValidationResult.ok()

    def validate_address(
        self,
        fields: AddressFields | Mapping[str, Any],
        required: bool = False,
    ) -> ValidationResult:
        """Address payload: presence (when required), then per-field type checks, then ZIP shape."""
        if not isinstance(fields, AddressFields):
            fields = AddressFields.from_mapping(fields)

        if required:
            values = asdict(fields)
            missing = [
                ADDRESS_LABELS.get(name, name) for name in REQUIRED_ADDRESS_FIELDS if values.get(name) is None
            ]
            if missing:
                return ValidationResult.format_error(f"Missing required fields: {', '.join(missing)}")

        # bool is an int subclass but never a valid user id
        if fields.user_id and (not isinstance(fields.user_id, (int, float)) or isinstance(fields.user_id, bool)):
            return ValidationResult.format_error("Invalid userId: must be a number.")
        if fields.street and not isinstance(fields.street, str):
            return ValidationResult.format_error("Invalid street: must be a string.")
        if fields.number and not isinstance(fields.number, (int, float, str)):
            return ValidationResult.format_error("Invalid number: must be a string or number.")

        for name in ("complement", "neighborhood", "city", "state"):
            value = getattr(fields, name)
            if value and not isinstance(value, str):
                return ValidationResult.format_error(f"Invalid {name}: must be a string.")

        if fields.zip_code and (
            not isinstance(fields.zip_code, str) or ZIP_CODE_PATTERN.fullmatch(fields.zip_code) is None
        ):
            return ValidationResult.format_error(
                "Invalid zipCode: must be a valid ZIP code (e.g., 12345 or 12345-6789)."
            )

        if fields.country and not isinstance(fields.country, str):
            return ValidationResult.format_error("Invalid country: must be a string.")

        return ValidationResult.ok()
