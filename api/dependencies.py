"""
dependencies.py — FastAPI dependency injection.
Each dependency returns the matching adapter from Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.calculator.pipeline_calculator import PipelineCalculator
from config import Settings
from ports.expression_parser import ExpressionParser
from ports.lexer import Lexer


def get_calculator(request: Request) -> PipelineCalculator:
    return request.app.state.calculator


def get_lexer(request: Request) -> Lexer:
    return request.app.state.calculator.lexer


def get_parser(request: Request) -> ExpressionParser:
    return request.app.state.calculator.parser


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
