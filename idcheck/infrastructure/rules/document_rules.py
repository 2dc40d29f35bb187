"""
Adapter: Document Rules Engine.

Format gate + checksum dispatch for every non-passport document kind.
Each row of DOCUMENT_RULES is static data: a regular expression, an
optional shape check, an optional checksum function and the exact error
strings callers forward to their clients.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

from idcheck.core.entities.document import DocumentKind
from idcheck.core.entities.validation_result import ValidationResult
from idcheck.core.interfaces.validators import IDocumentValidator
from idcheck.infrastructure.rules import checksums

logger = logging.getLogger(__name__)

INVALID_INPUT_TYPE = "Invalid input type expected string"


@dataclass(frozen=True)
class DocumentRule:
    """Uma linha da tabela de regras: formato → (checagem extra) → checksum."""
    kind: DocumentKind
    pattern: re.Pattern
    format_error: str
    checksum: Callable[[str], bool] | None = None
    checksum_error: str | None = None
    normalize: Callable[[str], str] | None = None
    shape_check: Callable[[str], str | None] | None = None   # returns a format error or None


def _rule(kind, pattern, format_error, checksum=None, checksum_error=None,
          normalize=None, shape_check=None) -> DocumentRule:
    return DocumentRule(
        kind=kind,
        pattern=re.compile(pattern, re.ASCII),
        format_error=format_error,
        checksum=checksum,
        checksum_error=checksum_error,
        normalize=normalize,
        shape_check=shape_check,
    )


def _only_digits(value: str) -> str:
    return re.sub(r"[^0-9]", "", value)


def _strip(value: str) -> str:
    return value.strip()


def _rrn_shape(rrn: str) -> str | None:
    if checksums.rrn_century(rrn) is None:
        return "Invalid gender digit in RRN"
    if checksums.rrn_birthdate(rrn) is None:
        return "Invalid birthdate in RRN"
    return None


def _rg_checksum(value: str) -> bool:
    return checksums.rg_checksum(re.sub(r"[.-]", "", value).upper())


PROFESSIONAL_REGISTRATION_PATTERN = r"\d{4,6}/[A-Z]{2}"


def _professional_registration(kind: DocumentKind, label: str) -> DocumentRule:
    """CRM / OAB / CREA share one format and carry no checksum."""
    return _rule(kind, PROFESSIONAL_REGISTRATION_PATTERN, f"Invalid {label} format",
                 normalize=_strip)


DOCUMENT_RULES: tuple[DocumentRule, ...] = (
    # ── Brasil ──
    _rule(DocumentKind.CPF, r"\d{11}", "Invalid CPF format",
          checksums.cpf_checksum, "Invalid CPF checksum", normalize=_only_digits),
    _rule(DocumentKind.RG, r"\d{2}\.?\d{3}\.?\d{3}-?[0-9Xx]|\d{9}", "Invalid RG format",
          _rg_checksum, "Invalid RG checksum", normalize=_strip),
    _rule(DocumentKind.SUS, r"\d{15}", "Invalid SUS format",
          checksums.sus_checksum, "Invalid SUS checksum"),
    _rule(DocumentKind.CNH, r"\d{11}", "Invalid CNH format",
          checksums.cnh_checksum, "Invalid CNH checksum"),
    _rule(DocumentKind.CTPS, r"[0-9]{7,8}[-\s]?[0-9]{1,2}", "Invalid CTPS format",
          checksums.ctps_checksum, "Invalid CTPS checksum"),
    _professional_registration(DocumentKind.CRM, "CRM"),
    _professional_registration(DocumentKind.OAB, "OAB"),
    _professional_registration(DocumentKind.CREA, "CREA"),
    _rule(DocumentKind.PIS, r"\d{11}", "Invalid PIS/PASEP format",
          checksums.pis_checksum, "Invalid PIS/PASEP number"),
    _rule(DocumentKind.CNPJ, r"\d{14}", "Invalid CNPJ format",
          checksums.cnpj_checksum, "Invalid CNPJ number"),

    # ── United States ──
    _rule(DocumentKind.US_DRIVERS_LICENSE, r"[A-Z0-9]{4,16}", "Invalid US Driver's License format"),
    _rule(DocumentKind.US_SSN, r"(?!000|666|9\d{2})\d{3}-(?!00)\d{2}-(?!0000)\d{4}", "Invalid SSN format"),
    _rule(DocumentKind.US_MILITARY_ID, r"[A-Z0-9]{10,12}", "Invalid US Military ID format"),
    _rule(DocumentKind.US_GREEN_CARD, r"[A-Z]{3}\d{10}|[A-Z]\d{8,9}", "Invalid Green Card format"),
    _rule(DocumentKind.US_EAD, r"[A-Z]{3}\d{10}", "Invalid EAD format"),
    _rule(DocumentKind.US_BIRTH_CERTIFICATE, r"[A-Z]{2}\d{6,8}", "Invalid US Birth Certificate format"),
    _rule(DocumentKind.US_MEDICARE_MEDICAID, r"[1-9][A-Z]\d{2}-[A-Z]\d{4}-[A-Z]\d{2}",
          "Invalid Medicare/Medicaid format"),
    _rule(DocumentKind.US_VETERAN_ID, r"[A-Z0-9]{8,12}", "Invalid Veteran ID format"),

    # ── United Kingdom ──
    _rule(DocumentKind.UK_DRIVING_LICENCE, r"[A-Z]{5}\d{6}[A-Z]{2}\d{2}", "Invalid UK Driving Licence format"),
    _rule(DocumentKind.UK_BIRTH_CERTIFICATE, r"[A-Z]{2}\d{6,8}", "Invalid UK Birth Certificate format"),
    _rule(DocumentKind.UK_ARMED_FORCES_ID, r"[A-Z]{2}\d{6}", "Invalid UK Armed Forces ID format"),
    _rule(DocumentKind.UK_NI_NUMBER, r"(?!BG|GB|NK|KN|TN|NT|ZZ)[A-Z]{2}\d{6}[ABCD]", "Invalid UK NI Number format"),
    _rule(DocumentKind.UK_RESIDENCE_CARD, r"[A-Z0-9]{12}", "Invalid UK Residence Card format"),

    # ── Canada / Mexico / South Korea / Germany ──
    _rule(DocumentKind.CANADIAN_SIN, r"\d{9}", "Invalid SIN format",
          checksums.luhn_even_index_checksum, "Invalid SIN number"),
    _rule(DocumentKind.MEXICAN_CURP, r"[A-Z]{4}\d{6}[HM][A-Z]{5}\d{2}", "Invalid CURP format",
          checksums.curp_checksum, "Invalid CURP checksum"),
    _rule(DocumentKind.SOUTH_KOREAN_RRN, r"\d{13}", "Invalid RRN format",
          checksums.rrn_checksum, "Invalid RRN number", shape_check=_rrn_shape),
    _rule(DocumentKind.GERMAN_PERSONALAUSWEIS, r"\d{10}", "Invalid format: Must be exactly 10 digits",
          checksums.personalausweis_checksum, "Invalid checksum"),
)

RULES_BY_KIND: dict[DocumentKind, DocumentRule] = {r.kind: r for r in DOCUMENT_RULES}

# Every DocumentKind must have exactly one row
_missing = set(DocumentKind) - set(RULES_BY_KIND)
if _missing or len(RULES_BY_KIND) != len(DOCUMENT_RULES):
    raise RuntimeError(f"Document rule table out of sync with DocumentKind: {sorted(k.value for k in _missing)}")


def passes_format(rule: DocumentRule, value: str) -> bool:
    """Format gate only (pattern + shape check), on the normalized value."""
    candidate = rule.normalize(value) if rule.normalize else value
    if rule.pattern.fullmatch(candidate) is None:
        return False
    return rule.shape_check is None or rule.shape_check(candidate) is None


class DocumentRulesEngine(IDocumentValidator):
    """
    Motor de regras para números de documento.

    Ordem fixa por chamada:
        1. Tipo de entrada (string)
        2. Normalização da regra (se houver)
        3. Formato (regex, match completo)
        4. Checagem de forma extra (ex: data de nascimento do RRN)
        5. Checksum (somente se 3 e 4 passaram)
    """

    RULES_VERSION = "1.0.0"

    def __init__(self, rules: dict[DocumentKind, DocumentRule] | None = None):
        self._rules = rules if rules is not None else RULES_BY_KIND

    def supported_kinds(self) -> list[DocumentKind]:
        return list(self._rules)

    def rule_for(self, kind: DocumentKind) -> DocumentRule:
        return self._rules[kind]

    def validate(self, kind: DocumentKind, value: Any) -> ValidationResult:
        rule = self._rules[kind]

        if not isinstance(value, str):
            logger.debug(f"{kind.value}: rejected non-string input ({type(value).__name__})")
            return ValidationResult.format_error(INVALID_INPUT_TYPE)

        candidate = rule.normalize(value) if rule.normalize else value

        if rule.pattern.fullmatch(candidate) is None:
            logger.debug(f"{kind.value}: format mismatch")
            return ValidationResult.format_error(rule.format_error)

        if rule.shape_check is not None:
            shape_error = rule.shape_check(candidate)
            if shape_error is not None:
                logger.debug(f"{kind.value}: {shape_error}")
                return ValidationResult.format_error(shape_error)

        if rule.checksum is not None and not rule.checksum(candidate):
            logger.debug(f"{kind.value}: checksum mismatch")
            return ValidationResult.checksum_error(rule.checksum_error)

        return ValidationResult.ok()
