"""
Routes: POST /validate/* — document, passport and registration-field checks.

Every verdict is forwarded as-is: invalid → its status with {"error": ...},
valid → 200 {"message": "Validation successful"}.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from idcheck import build_service
from idcheck.api.schemas.responses import (
    DocumentNumberRequest,
    ErrorResponse,
    MessageResponse,
    PassportRequest,
    UserFieldsRequest,
)
from idcheck.config.settings import get_settings
from idcheck.core.entities.document import DocumentKind
from idcheck.core.entities.validation_result import ValidationResult
from idcheck.core.use_cases.validate_identity import IdentityValidationService

logger = logging.getLogger(__name__)

router = APIRouter()

SUCCESS_MESSAGE = "Validation successful"
PASSPORT_REQUIRED = "Passport number and country code are required."

REQUIRED_MESSAGES: dict[DocumentKind, str] = {
    DocumentKind.CPF: "CPF number is required.",
    DocumentKind.RG: "RG number is required.",
    DocumentKind.SUS: "SUS number is required.",
    DocumentKind.CNH: "CNH number is required.",
    DocumentKind.CTPS: "CTPS number is required.",
    DocumentKind.CRM: "CRM number is required.",
    DocumentKind.OAB: "OAB number is required.",
    DocumentKind.CREA: "CREA number is required.",
    DocumentKind.PIS: "PIS number is required.",
    DocumentKind.CNPJ: "CNPJ number is required.",
    DocumentKind.US_DRIVERS_LICENSE: "US Driver's License number is required.",
    DocumentKind.US_SSN: "US SSN is required.",
    DocumentKind.US_MILITARY_ID: "US Military ID is required.",
    DocumentKind.US_GREEN_CARD: "US Greencard Number is required.",
    DocumentKind.US_EAD: "EAD Number is required.",
    DocumentKind.US_BIRTH_CERTIFICATE: "Birth Certificate Number is required.",
    DocumentKind.US_MEDICARE_MEDICAID: "Medicare/Medicaid Number is required.",
    DocumentKind.US_VETERAN_ID: "Veteran ID Number is required.",
    DocumentKind.UK_DRIVING_LICENCE: "Driving Licence Number is required.",
    DocumentKind.UK_BIRTH_CERTIFICATE: "Birth Certificate Number is required.",
    DocumentKind.UK_ARMED_FORCES_ID: "Armed Forces ID Number is required.",
    DocumentKind.UK_NI_NUMBER: "UK NI Number is required.",
    DocumentKind.UK_RESIDENCE_CARD: "Residence Card Number is required.",
    DocumentKind.CANADIAN_SIN: "Canadian SIN Number is required.",
    DocumentKind.MEXICAN_CURP: "Mexican CURP Number is required.",
    DocumentKind.SOUTH_KOREAN_RRN: "South Korean RRN Number is required.",
    DocumentKind.GERMAN_PERSONALAUSWEIS: "German Personalausweis Number is required.",
}

# Lazy singleton
_service = None


def get_service() -> IdentityValidationService:
    """Lazy singleton over the package-level factory."""
    global _service
    if _service is None:
        _service = build_service()
    return _service


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ErrorResponse(error=message).model_dump())


def _respond(result: ValidationResult) -> JSONResponse:
    if not result.valid:
        return _error(result.status, result.error or "")
    return JSONResponse(status_code=200, content=MessageResponse(message=SUCCESS_MESSAGE).model_dump())


# ── Fixed routes are declared before /validate/{kind} ──

@router.post("/validate/fields", response_model=MessageResponse, responses={400: {"model": ErrorResponse}})
async def validate_fields(req: UserFieldsRequest):
    """Registration payload: required fields, lengths, email, password, role."""
    strict = get_settings().strict_password
    result = get_service().validate_fields(req.model_dump(), required=True, strict_password=strict)
    return _respond(result)


@router.post("/validate/passport", response_model=MessageResponse, responses={400: {"model": ErrorResponse}})
async def validate_passport(req: PassportRequest):
    if not req.passport_number or not req.country_code:
        return _error(400, PASSPORT_REQUIRED)
    result = get_service().validate_passport(req.passport_number, req.country_code)
    if not result.valid:
        logger.info(f"Passport rejected for {req.country_code}: {result.error}")
    return _respond(result)


@router.post(
    "/validate/{kind}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def validate_document(kind: str, req: DocumentNumberRequest):
    """
    Validate one document number.

    `kind` is the document slug, e.g. `cpf`, `pis-pasep`, `us-ssn`, `kr-rrn`.
    """
    try:
        document_kind = DocumentKind(kind)
    except ValueError:
        return _error(404, f"Unsupported document kind: {kind}")

    if not req.number:
        return _error(400, REQUIRED_MESSAGES[document_kind])

    result = get_service().validate_field(document_kind, req.number)
    if not result.valid:
        logger.info(f"{document_kind.value} rejected ({result.failure.value}): {result.error}")
    return _respond(result)
