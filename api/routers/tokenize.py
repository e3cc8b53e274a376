"""
Router: POST /tokenize

Lexer only. UnknownToken (and literal overflow) surface as 422 through
the CalcError handler registered in api.main.
"""
from fastapi import APIRouter, Depends

from adapters.parser._printer import format_tokens
from api.dependencies import get_lexer
from api.schemas import ErrorResponse, ExpressionRequest, TokenizeResponse
from ports.lexer import Lexer

router = APIRouter(
    prefix="/tokenize",
    tags=["tokenize"],
    responses={422: {"model": ErrorResponse}},
)


@router.post("", response_model=TokenizeResponse)
async def tokenize(
    body: ExpressionRequest,
    lexer: Lexer = Depends(get_lexer),
) -> TokenizeResponse:
    tokens = lexer.tokenize(body.text)
    return TokenizeResponse(tokens=tokens, rendered=format_tokens(tokens))
