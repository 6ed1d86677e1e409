from __future__ import annotations

from pydantic import BaseModel, Field


class DomainRequest(BaseModel):
    domain: str | None = Field(default=None, max_length=253)
    section: str = "ALL_DOMAINS"


class ResolveResponse(BaseModel):
    domain: str | None
    public_suffix: str | None
    section: str | None
    registrable_domain: str | None
    sub_domain: str | None
    is_known: bool
    is_icann: bool
    is_private: bool


class PublicSuffixResponse(BaseModel):
    public_suffix: str | None
    section: str | None
    is_known: bool
