"""
Pydantic schemas — Request/Response models para a API.
"""

from pydantic import BaseModel


class DocumentNumberRequest(BaseModel):
    number: str | None = None


class PassportRequest(BaseModel):
    passport_number: str | None = None
    country_code: str | None = None


class UserFieldsRequest(BaseModel):
    username: str | None = None
    name: str | None = None
    surname: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    version: str
    document_kinds: int
    passport_countries: int
