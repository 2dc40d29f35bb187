"""
Entity: Document

Identity-document kinds known to the validation engine.
Pure domain model — no framework or storage dependency.
"""

from dataclasses import dataclass
from enum import Enum


class DocumentKind(str, Enum):
    """Closed set of non-passport document kinds. Values double as URL slugs."""

    # Brazil
    CPF = "cpf"
    RG = "rg"
    SUS = "sus"
    CNH = "cnh"
    CTPS = "ctps"
    CRM = "crm"
    OAB = "oab"
    CREA = "crea"
    PIS = "pis-pasep"
    CNPJ = "cnpj"

    # United States
    US_DRIVERS_LICENSE = "us-license"
    US_SSN = "us-ssn"
    US_MILITARY_ID = "us-military-id"
    US_GREEN_CARD = "us-greencard-number"
    US_EAD = "us-ead"
    US_BIRTH_CERTIFICATE = "us-birth-certificate"
    US_MEDICARE_MEDICAID = "us-medicare-medicaid"
    US_VETERAN_ID = "us-veteran-id"

    # United Kingdom
    UK_DRIVING_LICENCE = "uk-driving-licence"
    UK_BIRTH_CERTIFICATE = "uk-birth-certificate"
    UK_ARMED_FORCES_ID = "uk-armed-forces-id"
    UK_NI_NUMBER = "uk-ni"
    UK_RESIDENCE_CARD = "uk-residence-card"

    # Others
    CANADIAN_SIN = "ca-sin"
    MEXICAN_CURP = "mx-curp"
    SOUTH_KOREAN_RRN = "kr-rrn"
    GERMAN_PERSONALAUSWEIS = "de-personalausweis"


@dataclass(frozen=True)
class Passport:
    """Passport document kind, parameterized by issuing country (ISO-like 2-letter code)."""
    country_code: str


# Tagged union accepted by the document dispatcher
AnyDocumentKind = DocumentKind | Passport
