import logging

from fastapi import APIRouter

from ..models.footprint_schema import FactorTablesResponse, FootprintReport
from ..schemas import CarbonFootprintResult, FootprintInput, RecommendationSet
from ..services.co2 import calculate_footprint
from ..services.factors import factor_tables
from ..services.recommendations import build_recommendations
from ..services.validation import ensure_valid_input
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/footprint", tags=["footprint"])


def _checked(payload: FootprintInput) -> FootprintInput:
    if settings.strict_input_validation:
        ensure_valid_input(payload)
    return payload


def _calculate(payload: FootprintInput) -> CarbonFootprintResult:
    result = calculate_footprint(payload)
    logger.debug(
        "Footprint %.3f t (transport=%.3f energy=%.3f lifestyle=%.3f)",
        result.total,
        result.breakdown.transport,
        result.breakdown.energy,
        result.breakdown.lifestyle,
    )
    return result


@router.get("/defaults", response_model=FootprintInput)
async def footprint_defaults() -> FootprintInput:
    return FootprintInput()


@router.get("/factors", response_model=FactorTablesResponse)
async def footprint_factors() -> FactorTablesResponse:
    return FactorTablesResponse.model_validate(factor_tables())


@router.post("/calculate", response_model=CarbonFootprintResult)
async def calculate(payload: FootprintInput) -> CarbonFootprintResult:
    return _calculate(_checked(payload))


@router.post("/recommendations", response_model=RecommendationSet)
async def recommendations(payload: FootprintInput) -> RecommendationSet:
    return build_recommendations(_checked(payload))


@router.post("/report", response_model=FootprintReport)
async def report(payload: FootprintInput) -> FootprintReport:
    payload = _checked(payload)
    return FootprintReport(
        result=_calculate(payload),
        recommendations=build_recommendations(payload),
    )
