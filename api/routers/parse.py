"""
Router: POST /parse

Lexer + parser, returns the expression tree as JSON together with two
text renderings. Lexer/parser errors surface as 422.

The JSON tree is nested one object per level, so trees higher than
Settings.max_tree_depth are refused with LimitExceeded. /calc has no
such limit.
"""
from fastapi import APIRouter, Depends

from adapters.parser._printer import format_tree, to_infix, tree_height
from api.dependencies import get_lexer, get_parser, get_settings
from api.schemas import ErrorResponse, ExpressionRequest, ParseResponse
from config import Settings
from contracts import LimitExceededError
from ports.expression_parser import ExpressionParser
from ports.lexer import Lexer

router = APIRouter(
    prefix="/parse",
    tags=["parse"],
    responses={422: {"model": ErrorResponse}},
)


@router.post("", response_model=ParseResponse)
async def parse(
    body: ExpressionRequest,
    lexer: Lexer = Depends(get_lexer),
    parser: ExpressionParser = Depends(get_parser),
    settings: Settings = Depends(get_settings),
) -> ParseResponse:
    ast = parser.parse(lexer.tokenize(body.text))
    height = tree_height(ast)
    if height > settings.max_tree_depth:
        raise LimitExceededError(
            f"Expression tree has {height} levels, /parse returns at most "
            f"{settings.max_tree_depth}"
        )
    return ParseResponse(ast=ast, infix=to_infix(ast), rendered=format_tree(ast))
