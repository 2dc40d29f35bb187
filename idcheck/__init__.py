"""
idcheck — identity-document and registration-field validation.

Module-level helpers delegate to one shared, stateless service:

    >>> from idcheck import DocumentKind, validate_field
    >>> validate_field(DocumentKind.CPF, "453.178.287-91").valid
    True
"""

from typing import Any, Mapping

from idcheck.core.entities.document import DocumentKind, Passport
from idcheck.core.entities.registration import AddressFields, Role, UserRegistrationFields
from idcheck.core.entities.validation_result import FailureKind, ValidationResult
from idcheck.core.use_cases.validate_identity import IdentityValidationService
from idcheck.infrastructure.rules.document_rules import DocumentRulesEngine
from idcheck.infrastructure.rules.field_rules import FieldRulesEngine
from idcheck.infrastructure.rules.passport_rules import PassportRulesEngine

__version__ = "1.0.0"

__all__ = [
    "AddressFields",
    "DocumentKind",
    "FailureKind",
    "IdentityValidationService",
    "Passport",
    "Role",
    "UserRegistrationFields",
    "ValidationResult",
    "build_service",
    "validate_address_fields",
    "validate_field",
    "validate_fields",
    "validate_passport",
]


def build_service() -> IdentityValidationService:
    """Factory — service wired with the default rule tables."""
    return IdentityValidationService(
        document_validator=DocumentRulesEngine(),
        passport_validator=PassportRulesEngine(),
        field_validator=FieldRulesEngine(),
    )


_service = build_service()


def validate_field(kind: DocumentKind | Passport | str, value: Any) -> ValidationResult:
    return _service.validate_field(kind, value)


def validate_passport(passport_number: Any, country_code: Any) -> ValidationResult:
    return _service.validate_passport(passport_number, country_code)


def validate_fields(
    fields: UserRegistrationFields | Mapping[str, Any],
    required: bool = True,
    strict_password: bool = False,
) -> ValidationResult:
    return _service.validate_fields(fields, required=required, strict_password=strict_password)


def validate_address_fields(fields: AddressFields | Mapping[str, Any], required: bool = False) -> ValidationResult:
    return _service.validate_address_fields(fields, required=required)
