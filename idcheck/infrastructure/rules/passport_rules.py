"""
Passport-number Rules Engine.

Validates a passport number against its issuing country:
- Input shape (non-empty number, 2-letter country code)
- Character set (A-Z, 0-9 after uppercasing)
- Country-specific format pattern
- Checksum family per country: ICAO 9303 7-3-1, Mod-11, or none
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from idcheck.core.entities.validation_result import ValidationResult
from idcheck.core.interfaces.validators import IPassportValidator
from idcheck.infrastructure.rules.checksums import icao_checksum, mod11_checksum

logger = logging.getLogger(__name__)


class ChecksumFamily(str, Enum):
    ICAO = "ICAO"
    MOD11 = "MOD11"


@dataclass(frozen=True)
class CountryPassportRule:
    country_code: str
    format_pattern: re.Pattern
    checksum: Optional[ChecksumFamily] = None


def _row(code: str, pattern: str, checksum: Optional[ChecksumFamily] = None) -> CountryPassportRule:
    return CountryPassportRule(code, re.compile(pattern, re.ASCII), checksum)


ICAO = ChecksumFamily.ICAO
MOD11 = ChecksumFamily.MOD11

# ── Country table ───────────────────────────────────────────────────
PASSPORT_RULES: Dict[str, CountryPassportRule] = {r.country_code: r for r in (
    _row("BR", r"[A-Z]{2}\d{6}"),                          # Brazil
    _row("UK", r"[A-Z0-9]{9}", ICAO),                      # United Kingdom
    _row("US", r"\d{9}", ICAO),                            # United States
    _row("JP", r"[A-Z]{2}\d{7}"),                          # Japan
    _row("KR", r"[A-Z]{2}\d{7}"),                          # South Korea
    _row("CN", r"G\d{8}|E\d{7}"),                          # China
    _row("SG", r"[A-Z]\d{7}[A-Z]"),                        # Singapore
    _row("AR", r"[A-Z]{3}\d{6}"),                          # Argentina
    _row("FR", r"\d{2}[A-Z]{2}\d{5}", ICAO),               # France
    _row("DE", r"[CFGHJKLMNPRTVWXYZ][CFGHJKLMNPRTVWXYZ0-9]{8}", ICAO),  # Germany
    _row("RU", r"\d{9}", ICAO),                            # Russia
    _row("CA", r"[A-Z]{2}\d{6}"),                          # Canada
    _row("AU", r"[A-Z]\d{7}"),                             # Australia
    _row("IN", r"[A-Z]\d{7}"),                             # India
    _row("IT", r"[A-Z]{2}\d{7}", ICAO),                    # Italy
    _row("ES", r"[A-Z]{2}\d{6}"),                          # Spain
    _row("MX", r"\d{8}|[A-Z]{2}\d{6}|[A-Z0-9]{9}"),        # Mexico
    _row("TR", r"[A-Z]\d{8}"),                             # Turkey
    _row("SA", r"[A-Z]{2}\d{7}"),                          # Saudi Arabia
    _row("NL", r"[A-Z]{2}\d{7}", ICAO),                    # Netherlands
    _row("SE", r"\d{8}", ICAO),                            # Sweden
    _row("CH", r"[A-Z]\d{7}", ICAO),                       # Switzerland
    _row("NZ", r"[A-Z]{2}\d{6}"),                          # New Zealand
    _row("ZA", r"[A-Z]{2}\d{7}"),                          # South Africa
    _row("AE", r"\d{9}"),                                  # United Arab Emirates
    _row("TH", r"[A-Z]\d{7}"),                             # Thailand
    _row("ID", r"[A-Z]\d{7}"),                             # Indonesia
    _row("MY", r"[A-Z]\d{8}"),                             # Malaysia
    _row("PH", r"[A-Z]\d{7}"),                             # Philippines
    _row("EG", r"[A-Z]\d{8}"),                             # Egypt
    _row("GR", r"[A-Z]{2}\d{7}", ICAO),                    # Greece
    _row("PL", r"[A-Z]{2}\d{7}", ICAO),                    # Poland
    _row("BE", r"[A-Z]{2}\d{6}"),                          # Belgium
    _row("AT", r"[A-Z]\d{7}"),                             # Austria
    _row("NO", r"\d{8}", MOD11),                           # Norway
    _row("DK", r"\d{9}"),                                  # Denmark
    _row("FI", r"\d{8}", MOD11),                           # Finland
    _row("IE", r"[A-Z]{2}\d{7}", ICAO),                    # Ireland
    _row("IL", r"\d{7}|\d{8}"),                            # Israel
    _row("PT", r"[A-Z]{2}\d{6}"),                          # Portugal
    _row("HU", r"[A-Z]{2}\d{6}"),                          # Hungary
    _row("CZ", r"[A-Z]{2}\d{7}"),                          # Czech Republic
    _row("SK", r"[A-Z]{2}\d{7}"),                          # Slovakia
    _row("RO", r"[A-Z]{2}\d{7}"),                          # Romania
    _row("BG", r"[A-Z]{2}\d{7}"),                          # Bulgaria
    _row("HR", r"[A-Z]{2}\d{7}"),                          # Croatia
    _row("SI", r"[A-Z]{2}\d{7}"),                          # Slovenia
    _row("LT", r"[A-Z]{2}\d{7}"),                          # Lithuania
    _row("LV", r"[A-Z]{2}\d{7}"),                          # Latvia
    _row("EE", r"[A-Z]{2}\d{7}"),                          # Estonia
    _row("IS", r"[A-Z]{2}\d{7}"),                          # Iceland
    _row("MT", r"[A-Z]{2}\d{7}"),                          # Malta
    _row("CY", r"[A-Z]{2}\d{7}"),                          # Cyprus
)}

CHECKSUM_FUNCTIONS = {
    ChecksumFamily.ICAO: icao_checksum,
    ChecksumFamily.MOD11: mod11_checksum,
}

CHECKSUM_ERRORS = {
    ChecksumFamily.ICAO: "Invalid ICAO checksum.",
    ChecksumFamily.MOD11: "Invalid Mod-11 checksum.",
}

_PASSPORT_CHARS = re.compile(r"[A-Z0-9]+", re.ASCII)


class PassportRulesEngine(IPassportValidator):
    """
    Passport number validation — 5 ordered steps, first failure wins:
    1. Required input (number non-empty, country code of 2 characters)
    2. Character set
    3. Country supported
    4. Country format pattern
    5. Country checksum family (if any)
    """

    RULES_VERSION = "passport-v1.0"

    def __init__(self, rules: Dict[str, CountryPassportRule] | None = None):
        self._rules = rules if rules is not None else PASSPORT_RULES

    def supported_countries(self) -> List[str]:
        return sorted(self._rules)

    def checksum_countries(self) -> List[str]:
        return sorted(code for code, rule in self._rules.items() if rule.checksum is not None)

    def validate(self, passport_number: Any, country_code: Any) -> ValidationResult:
        if not isinstance(passport_number, str) or not passport_number.strip():
            return ValidationResult.format_error(
                "Passport number is required and must be a non-empty string."
            )
        if not isinstance(country_code, str) or len(country_code.strip()) != 2:
            return ValidationResult.format_error("Country code must be a 2-character string.")

        number = passport_number.strip().upper()
        country = country_code.strip().upper()

        if _PASSPORT_CHARS.fullmatch(number) is None:
            return ValidationResult.format_error("Passport number contains invalid characters.")

        rule = self._rules.get(country)
        if rule is None:
            logger.debug(f"Passport: unsupported country '{country}'")
            return ValidationResult.format_error("Invalid or unsupported country code.")

        if rule.format_pattern.fullmatch(number) is None:
            logger.debug(f"Passport[{country}]: format mismatch")
            return ValidationResult.format_error("Passport number does not match the country's format.")

        if rule.checksum is not None and not CHECKSUM_FUNCTIONS[rule.checksum](number):
            logger.debug(f"Passport[{country}]: {rule.checksum.value} checksum mismatch")
            return ValidationResult.checksum_error(CHECKSUM_ERRORS[rule.checksum])

        return ValidationResult.ok()
