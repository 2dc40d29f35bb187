"""
Contract: Validators

Ports implemented by the rules adapters. Each validator is a pure
function of its input: no I/O, no shared mutable state, and invalid
input is reported as a ValidationResult, never raised.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from idcheck.core.entities.document import DocumentKind
from idcheck.core.entities.registration import AddressFields, UserRegistrationFields
from idcheck.core.entities.validation_result import ValidationResult


class IDocumentValidator(ABC):
    """
    Port: Document Validator

    Format gate followed by the kind's checksum (when it has one).
    """

    @abstractmethod
    def validate(self, kind: DocumentKind, value: Any) -> ValidationResult:
        """
        Validates one document number.

        Args:
            kind: Document kind to validate against.
            value: Raw document number as supplied by the caller.

        Returns:
            ValidationResult with a single format or checksum reason on failure.
        """
        ...

    @abstractmethod
    def supported_kinds(self) -> list[DocumentKind]:
        ...


class IPassportValidator(ABC):
    """Port: Passport Validator (country-keyed format + checksum family)."""

    @abstractmethod
    def validate(self, passport_number: Any, country_code: Any) -> ValidationResult:
        ...

    @abstractmethod
    def supported_countries(self) -> list[str]:
        ...


class IFieldValidator(ABC):
    """Port: registration/address field validation, first violation wins."""

    @abstractmethod
    def validate_user(
        self,
        fields: UserRegistrationFields | Mapping[str, Any],
        required: bool = True,
        strict_password: bool = False,
    ) -> ValidationResult:
        ...

    @abstractmethod
    def validate_address(
        self,
        fields: AddressFields | Mapping[str, Any],
        required: bool = False,
    ) -> ValidationResult:
        ...
