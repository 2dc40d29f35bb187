from .document_rules import DOCUMENT_RULES, DocumentRule, DocumentRulesEngine
from .field_rules import FieldRulesEngine
from .passport_rules import PASSPORT_RULES, ChecksumFamily, CountryPassportRule, PassportRulesEngine

__all__ = [
    "DOCUMENT_RULES",
    "DocumentRule",
    "DocumentRulesEngine",
    "FieldRulesEngine",
    "PASSPORT_RULES",
    "ChecksumFamily",
    "CountryPassportRule",
    "PassportRulesEngine",
]
