"""
Pydantic schemas for the tokenization and lemmatization endpoints.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TokenizeRequest(BaseModel):
    """Request schema for tokenizing raw text."""
    text: str = Field(..., description="Raw input text")
    trace: bool = Field(False, description="Include per-stage token snapshots")


class TokenSchema(BaseModel):
    text: str
    protected: bool


class TokenizeResponse(BaseModel):
    tokens: List[TokenSchema]
    normalized_text: str
    debug: Optional[Dict[str, Any]] = None


class MorphRequest(BaseModel):
    """Request schema for lemmatizing or decomposing one word-form."""
    form: str = Field(..., min_length=1, description="Surface word-form")
    pos: str = Field(..., min_length=1, description="Penn Treebank POS tag, e.g. 'VBZ'")


class MorphemeSchema(BaseModel):
    form: str
    pos: str


class DecomposeResponse(BaseModel):
    base: MorphemeSchema
    affix: MorphemeSchema


class LemmatizeResponse(BaseModel):
    form: str
    pos: str
    lemma: str
    morphemes: Optional[DecomposeResponse] = None
