"""Tests for DocumentRulesEngine — Brazilian document kinds."""

import pytest

from idcheck.core.entities.document import DocumentKind
from idcheck.core.entities.validation_result import FailureKind, ValidationResult
from idcheck.infrastructure.rules import DocumentRulesEngine

engine = DocumentRulesEngine()


def _check(kind: DocumentKind, value) -> ValidationResult:
    return engine.validate(kind, value)


def _assert_format(result: ValidationResult, message: str) -> None:
    assert not result.valid
    assert result.status == 400
    assert result.failure is FailureKind.FORMAT
    assert result.error == message


def _assert_checksum(result: ValidationResult, message: str) -> None:
    assert not result.valid
    assert result.status == 400
    assert result.failure is FailureKind.CHECKSUM
    assert result.error == message


# ---------------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------------


class TestCPF:
    @pytest.mark.parametrize("value", ["453.178.287-91", "45317828791"])
    def test_valid(self, value: str) -> None:
        assert _check(DocumentKind.CPF, value) == ValidationResult(valid=True, error=None, status=200)

    def test_repeated_digits(self) -> None:
        _assert_checksum(_check(DocumentKind.CPF, "00000000000"), "Invalid CPF checksum")

    def test_wrong_check_digit(self) -> None:
        _assert_checksum(_check(DocumentKind.CPF, "453.178.287-90"), "Invalid CPF checksum")

    def test_non_digits_are_stripped_before_length_check(self) -> None:
        # "a" is dropped, leaving 10 digits
        _assert_format(_check(DocumentKind.CPF, "453a7828791"), "Invalid CPF format")

    def test_non_string_input(self) -> None:
        _assert_format(_check(DocumentKind.CPF, 45317828791), "Invalid input type expected string")


# ---------------------------------------------------------------------------
# RG
# ---------------------------------------------------------------------------


class TestRG:
    @pytest.mark.parametrize("value", ["00000023-X", "00000023-x", "12.345.678-9", "123456789", " 12.345.678-9 "])
    def test_valid(self, value: str) -> None:
        assert _check(DocumentKind.RG, value).valid

    @pytest.mark.parametrize("value", ["12.345.678-0", "000000000", "111111111"])
    def test_checksum(self, value: str) -> None:
        _assert_checksum(_check(DocumentKind.RG, value), "Invalid RG checksum")

    @pytest.mark.parametrize("value", ["12345678", "12a3456789", "123-45.6789", ""])
    def test_format(self, value: str) -> None:
        _assert_format(_check(DocumentKind.RG, value), "Invalid RG format")


# ---------------------------------------------------------------------------
# SUS / CNH / CTPS
# ---------------------------------------------------------------------------


class TestSUS:
    @pytest.mark.parametrize("value", ["123456789012348", "000000000000000"])
    def test_valid(self, value: str) -> None:
        assert _check(DocumentKind.SUS, value).valid

    @pytest.mark.parametrize("value", ["111111111111111", "123456789012345"])
    def test_checksum(self, value: str) -> None:
        _assert_checksum(_check(DocumentKind.SUS, value), "Invalid SUS checksum")

    @pytest.mark.parametrize("value", ["12345678901234", "123 4567 8901 2348"])
    def test_format(self, value: str) -> None:
        _assert_format(_check(DocumentKind.SUS, value), "Invalid SUS format")


class TestCNH:
    @pytest.mark.parametrize("value", ["12345678900", "00000000000", "11111111111", "12345678801"])
    def test_valid(self, value: str) -> None:
        assert _check(DocumentKind.CNH, value).valid

    def test_checksum(self) -> None:
        _assert_checksum(_check(DocumentKind.CNH, "12345678909"), "Invalid CNH checksum")

    @pytest.mark.parametrize("value", ["123.456.789-00", "1234567890"])
    def test_format(self, value: str) -> None:
        _assert_format(_check(DocumentKind.CNH, value), "Invalid CNH format")


class TestCTPS:
    @pytest.mark.parametrize("value", ["1234567-09", "123456709", "7654321 08", "8765432102", "000000001"])
    def test_valid(self, value: str) -> None:
        assert _check(DocumentKind.CTPS, value).valid

    @pytest.mark.parametrize("value", ["000000000", "1234567-21", "123456789"])
    def test_checksum(self, value: str) -> None:
        _assert_checksum(_check(DocumentKind.CTPS, value), "Invalid CTPS checksum")

    @pytest.mark.parametrize("value", ["123-4567-89", "123456789012", "12345a7-89"])
    def test_format(self, value: str) -> None:
        _assert_format(_check(DocumentKind.CTPS, value), "Invalid CTPS format")


# ---------------------------------------------------------------------------
# CRM / OAB / CREA
# ---------------------------------------------------------------------------


class TestProfessionalRegistrations:
    @pytest.mark.parametrize("kind", [DocumentKind.CRM, DocumentKind.OAB, DocumentKind.CREA])
    @pytest.mark.parametrize("value", ["1234/SP", " 12345/MG ", "0000/DF", "123456/RJ"])
    def test_valid(self, kind: DocumentKind, value: str) -> None:
        assert _check(kind, value).valid

    @pytest.mark.parametrize(
        "kind,label",
        [(DocumentKind.CRM, "CRM"), (DocumentKind.OAB, "OAB"), (DocumentKind.CREA, "CREA")],
    )
    @pytest.mark.parametrize("value", ["1234SP", "12345/rs", "1234567/SP", "123/SP", "12345/ABC"])
    def test_format(self, kind: DocumentKind, label: str, value: str) -> None:
        _assert_format(_check(kind, value), f"Invalid {label} format")


# ---------------------------------------------------------------------------
# PIS/PASEP / CNPJ
# ---------------------------------------------------------------------------


class TestPIS:
    @pytest.mark.parametrize("value", ["12056412545", "00000000000", "00000000060"])
    def test_valid(self, value: str) -> None:
        assert _check(DocumentKind.PIS, value).valid

    def test_checksum(self) -> None:
        _assert_checksum(_check(DocumentKind.PIS, "00000000061"), "Invalid PIS/PASEP number")

    def test_format(self) -> None:
        _assert_format(_check(DocumentKind.PIS, "120.56412.54-5"), "Invalid PIS/PASEP format")


class TestCNPJ:
    def test_valid(self) -> None:
        assert _check(DocumentKind.CNPJ, "11222333000181").valid

    def test_checksum(self) -> None:
        _assert_checksum(_check(DocumentKind.CNPJ, "11222333000182"), "Invalid CNPJ number")

    def test_format(self) -> None:
        _assert_format(_check(DocumentKind.CNPJ, "11.222.333/0001-81"), "Invalid CNPJ format")
