"""
schemas.py — FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import ExprAST, Token


# ─────────────────────────── shared ──────────────────────────────

class ExpressionRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=10_000)


class ErrorResponse(BaseModel):
    code: str
    message: str
    position: Optional[int] = None


# ─────────────────────────── /tokenize ───────────────────────────

class TokenizeResponse(BaseModel):
    tokens: list[Token]
    rendered: str


# ─────────────────────────── /parse ──────────────────────────────

class ParseResponse(BaseModel):
    ast: ExprAST
    infix: str      # fully parenthesized, e.g. "((1 - 2) - 3)"
    rendered: str   # indented tree


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
