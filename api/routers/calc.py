"""
Router: POST /calc

Runs the whole pipeline. Calculation errors are part of the 200 response
body (CalcResult.ok == False), they are not HTTP errors.
"""
from fastapi import APIRouter, Depends

from adapters.calculator.pipeline_calculator import PipelineCalculator
from api.dependencies import get_calculator
from api.schemas import ExpressionRequest
from contracts import CalcResult

router = APIRouter(prefix="/calc", tags=["calc"])


@router.post("", response_model=CalcResult)
async def calc(
    body: ExpressionRequest,
    calculator: PipelineCalculator = Depends(get_calculator),
) -> CalcResult:
    return calculator.calc(body.text)
