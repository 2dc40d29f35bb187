"""
Use Case: Validate Identity.

Single entry point for the three public operations:
    validate_field    — document number (any DocumentKind, or a Passport)
    validate_passport — passport number + issuing country
    validate_fields   — user-registration payload

Stateless: the same instance can serve any number of concurrent callers.
"""

import logging
from typing import Any, Mapping

from idcheck.core.entities.document import DocumentKind, Passport
from idcheck.core.entities.registration import AddressFields, UserRegistrationFields
from idcheck.core.entities.validation_result import ValidationResult
from idcheck.core.interfaces.validators import (
    IDocumentValidator,
    IFieldValidator,
    IPassportValidator,
)

logger = logging.getLogger(__name__)


def resolve_document_kind(raw: Any) -> DocumentKind | None:
    """Accepts a slug ("pis-pasep") or a member name ("PIS"); None when unknown."""
    if not isinstance(raw, str):
        return None
    try:
        return DocumentKind(raw.strip().lower())
    except ValueError:
        return DocumentKind.__members__.get(raw.strip().upper())


class IdentityValidationService:
    """
    Use Case: recebe um valor bruto → roda a validação certa → retorna o veredito.

    Dependency Injection: os três validadores vêm pelo construtor.
    """

    def __init__(
        self,
        document_validator: IDocumentValidator,
        passport_validator: IPassportValidator,
        field_validator: IFieldValidator,
    ):
        self._documents = document_validator
        self._passports = passport_validator
        self._fields = field_validator

    def validate_field(self, kind: DocumentKind | Passport | str, value: Any) -> ValidationResult:
        """Dispatch on the tagged union; unknown kind strings come back as a format error."""
        if isinstance(kind, Passport):
            return self.validate_passport(value, kind.country_code)

        if not isinstance(kind, DocumentKind):
            resolved = resolve_document_kind(kind)
            if resolved is None:
                logger.debug(f"Unsupported document kind requested: {kind!r}")
                return ValidationResult.format_error(f"Unsupported document kind: {kind}")
            kind = resolved

        return self._documents.validate(kind, value)

    def validate_passport(self, passport_number: Any, country_code: Any) -> ValidationResult:
        return self._passports.validate(passport_number, country_code)

    def validate_fields(
        self,
        fields: UserRegistrationFields | Mapping[str, Any],
        required: bool = True,
        strict_password: bool = False,
    ) -> ValidationResult:
        return self._fields.validate_user(fields, required=required, strict_password=strict_password)

    def validate_address_fields(
        self,
        fields: AddressFields | Mapping[str, Any],
        required: bool = False,
    ) -> ValidationResult:
        return self._fields.validate_address(fields, required=required)

    @property
    def document_kinds(self) -> list[DocumentKind]:
        return self._documents.supported_kinds()

    @property
    def passport_countries(self) -> list[str]:
        return self._passports.supported_countries()
