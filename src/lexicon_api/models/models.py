#!/usr/bin/env python3

from enum import Enum

from pydantic import BaseModel, Field

# Enums mirrored from SCHEMA_DOCUMENT


class Tongue(str, Enum):
    """AllowedTongue"""
    ENGLISH = "ENGLISH"
    SPANISH = "SPANISH"


class AffixType(str, Enum):
    """AllowedTypeAffix"""
    PREFIX = "PREFIX"
    PREFIXIOID = "PREFIXIOID"
    INFIX = "INFIX"
    CIRCUMFIX = "CIRCUMFIX"
    INTERFIX = "INTERFIX"
    DUPLIFIX = "DUPLIFIX"
    TRANSFIX = "TRANSFIX"
    SIMULFIX = "SIMULFIX"
    SUPRAFIX = "SUPRAFIX"
    DISFIX = "DISFIX"
    STEM = "STEM"
    SUFFIX = "SUFFIX"
    SUFFIXOID = "SUFFIXOID"
    NA = "NA"


# Pydantic Models


class NewAffix(BaseModel):
    """Data needed to add an affix. media and note hold ids of existing nodes."""
    example: list[str] = []
    meaning: list[str] = []
    media: list[str] = []
    morpheme: str = Field(..., min_length=1)
    note: list[str] = []
    tongue: Tongue | None = None
    affix_type: list[AffixType] = []


class Affix(NewAffix):
    """A part of a word, or a part that may be added to a word"""
    id: str
    morpheme: str = ""  # Stored nodes aren't guaranteed to carry one


class ResetRequest(BaseModel):
    dry_run: bool = True
    confirm_token: str | None = None


class ResetResponse(BaseModel):
    schema_status: str | None = None  # ValidationOutcome before the reset
    confirm_token: str | None = None
    message: str


class SchemaStatusResponse(BaseModel):
    status: str  # 'no_schema', 'matches', 'mismatch'
    matches: bool


class SchemaSyncResponse(BaseModel):
    status: str
    message: str
