"""
Checksum Engine.

Independent, pure check-digit algorithms. Every function expects input
that already passed the document's format gate (digits / uppercase
alphanumerics of the right length) and returns a bool or a check digit.
"""

import re
from datetime import date


# ── ICAO 9303 character values (A=10 … Z=35) ─────────────────────────
ICAO_CHAR_VALUES = {}
for i in range(10):
    ICAO_CHAR_VALUES[str(i)] = i
for i, c in enumerate("ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
    ICAO_CHAR_VALUES[c] = 10 + i

ICAO_WEIGHTS = (7, 3, 1)
MOD11_PASSPORT_WEIGHTS = (7, 3, 1, 7, 3, 1, 7, 3)

# ── Brazilian weight tables ───────────────────────────────────────────
CPF_WEIGHTS_1 = tuple(range(10, 1, -1))                  # 10..2
CPF_WEIGHTS_2 = tuple(range(11, 1, -1))                  # 11..2
CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
PIS_WEIGHTS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
RG_WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2)

CURP_ALPHABET = "0123456789ABCDEFGHIJKLMNÑOPQRSTUVWXYZ"
RRN_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5)
PERSONALAUSWEIS_WEIGHTS = (7, 3, 1, 7, 3, 1, 7, 3, 1)


def _weighted_sum(digits: str, weights) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights))


# ─── Mod-11 family ──────────────────────────────────────────────────

def weighted_remainder_digit(digits: str, weights) -> int:
    """Mod-11 check digit used by CPF/CNPJ/PIS: remainder < 2 → 0, else 11 - remainder."""
    remainder = _weighted_sum(digits, weights) % 11
    return 0 if remainder < 2 else 11 - remainder


def cpf_checksum(digits: str) -> bool:
    """Valida os 2 dígitos verificadores do CPF (11 dígitos, sem máscara)."""
    if digits == digits[0] * len(digits):
        return False
    d1 = weighted_remainder_digit(digits[:9], CPF_WEIGHTS_1)
    if d1 != int(digits[9]):
        return False
    d2 = weighted_remainder_digit(digits[:10], CPF_WEIGHTS_2)
    return d2 == int(digits[10])


def cnpj_checksum(digits: str) -> bool:
    """Valida os 2 dígitos verificadores do CNPJ (14 dígitos)."""
    d1 = weighted_remainder_digit(digits[:12], CNPJ_WEIGHTS_1)
    d2 = weighted_remainder_digit(digits[:13], CNPJ_WEIGHTS_2)
    return d1 == int(digits[12]) and d2 == int(digits[13])


def pis_checksum(digits: str) -> bool:
    """PIS/PASEP: one Mod-11 digit over the first 10 digits."""
    return weighted_remainder_digit(digits[:10], PIS_WEIGHTS) == int(digits[10])


def rg_check_character(digits: str) -> str:
    """RG check character for an 8-digit prefix: 10 → 'X', 11 → '0'."""
    computed = 11 - (_weighted_sum(digits, RG_WEIGHTS) % 11)
    if computed == 10:
        return "X"
    if computed == 11:
        return "0"
    return str(computed)


def rg_checksum(cleaned: str) -> bool:
    """`cleaned` is 8 digits + check character, punctuation removed and uppercased."""
    body, check = cleaned[:8], cleaned[8]
    # All-zero or single repeated digit bodies are never issued
    if body == body[0] * len(body):
        return False
    return rg_check_character(body) == check


def sus_checksum(digits: str) -> bool:
    """Cartão SUS: weights 15..1 over all 15 digits, sum must be divisible by 11."""
    return _weighted_sum(digits, range(15, 0, -1)) % 11 == 0


def cnh_check_digits(digits: str) -> tuple[int, int]:
    """Two independent Mod-11 digits over the first 9 digits; remainder 10 → 0."""
    dv1 = _weighted_sum(digits[:9], range(9, 0, -1)) % 11
    dv2 = _weighted_sum(digits[:9], range(1, 10)) % 11
    return (0 if dv1 == 10 else dv1), (0 if dv2 == 10 else dv2)


def cnh_checksum(digits: str) -> bool:
    dv1, dv2 = cnh_check_digits(digits)
    return dv1 == int(digits[9]) and dv2 == int(digits[10])


def normalize_ctps(value: str) -> str:
    """Strip separators and left-pad to 9 digits."""
    return re.sub(r"[-\s]", "", value).zfill(9)


def ctps_check_digit(number_part: str) -> int:
    """Weights descend from len+1; digit = (11 - sum % 11) % 10."""
    n = len(number_part)
    total = sum(int(d) * (n + 1 - i) for i, d in enumerate(number_part))
    return (11 - (total % 11)) % 10


def ctps_checksum(value: str) -> bool:
    digits = normalize_ctps(value)
    number_part, check_part = digits[:-2], digits[-2:]
    return ctps_check_digit(number_part) == int(check_part)


# ─── Passports ──────────────────────────────────────────────────────

def icao_check_digit(data: str) -> int:
    """ICAO 9303 check digit (7-3-1 weighted sum mod 10)."""
    total = 0
    for i, char in enumerate(data):
        total += ICAO_CHAR_VALUES[char] * ICAO_WEIGHTS[i % 3]
    return total % 10


def icao_checksum(number: str) -> bool:
    """Last character is the ICAO check digit of everything before it."""
    body, check = number[:-1], number[-1]
    if not check.isdigit() or any(c not in ICAO_CHAR_VALUES for c in body):
        return False
    return icao_check_digit(body) == int(check)


def mod11_checksum(number: str) -> bool:
    """Norway/Finland style: weights 7,3,1,7,3,1,7,3; remainder 10 is invalid (no wraparound)."""
    if not number.isascii() or not number.isdigit():
        return False
    body, check = number[:-1], number[-1]
    total = sum(
        int(d) * MOD11_PASSPORT_WEIGHTS[i % len(MOD11_PASSPORT_WEIGHTS)]
        for i, d in enumerate(body)
    )
    expected = total % 11
    if expected == 10:
        return False
    return expected == int(check)


# ─── International IDs ──────────────────────────────────────────────

def luhn_even_index_checksum(digits: str) -> bool:
    """Canadian SIN: double digits at even zero-based index, minus 9 when > 9."""
    total = 0
    for i, d in enumerate(digits):
        value = int(d)
        if i % 2 == 0:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return total % 10 == 0


def curp_check_digit(curp: str) -> int:
    """Weight 18 - i over the first 17 characters of the custom alphabet."""
    total = sum(CURP_ALPHABET.index(c) * (18 - i) for i, c in enumerate(curp[:17]))
    digit = 10 - (total % 10)
    return 0 if digit == 10 else digit


def curp_checksum(curp: str) -> bool:
    return curp_check_digit(curp) == int(curp[17])


def rrn_birthdate(rrn: str) -> date | None:
    """Birthdate embedded in a Korean RRN; None when the gender digit or date is invalid."""
    century = rrn_century(rrn)
    if century is None:
        return None
    yy, mm, dd = int(rrn[0:2]), int(rrn[2:4]), int(rrn[4:6])
    try:
        return date(century + yy, mm, dd)
    except ValueError:
        return None


def rrn_century(rrn: str) -> int | None:
    """Gender digit (index 6): 1/2 → 1900s, 3/4 → 2000s."""
    gender = rrn[6]
    if gender in ("1", "2"):
        return 1900
    if gender in ("3", "4"):
        return 2000
    return None


def rrn_checksum(rrn: str) -> bool:
    expected = (11 - (_weighted_sum(rrn[:12], RRN_WEIGHTS) % 11)) % 10
    return expected == int(rrn[12])


def personalausweis_checksum(number: str) -> bool:
    """Weights 7,3,1 over positions 1-9 (position 0 is the issuer code); sum % 10 vs digit 9."""
    total = _weighted_sum(number[1:10], PERSONALAUSWEIS_WEIGHTS)
    return total % 10 == int(number[9])
