"""API route handlers."""
from fastapi import APIRouter, Depends, HTTPException
from typing import List
from price_engine.core.dependencies import get_comparison_service
from price_engine.core.exceptions import MalformedInput
from price_engine.schemas import AnalyzeRequest, ComparisonResult
from price_engine.scrapers import get_supported_platforms
from price_engine.services.comparison_service import ComparisonService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/supported-platforms", response_model=List[str])
async def get_supported_platforms_route() -> List[str]:
    """Get a list of platforms with dedicated extractors."""
    logger.info("Getting list of supported platforms")
    platforms = get_supported_platforms()
    logger.info(f"Found supported platforms: {platforms}")
    return platforms

@router.post("/analyze", response_model=ComparisonResult)
async def analyze_product(
    request: AnalyzeRequest,
    service: ComparisonService = Depends(get_comparison_service),
) -> ComparisonResult:
    """
    Compare prices for a product name or product URL across platforms.

    Args:
        request: AnalyzeRequest with a product name or URL.

    Returns:
        ComparisonResult with the source record first.

    Raises:
        HTTPException: If the query is empty.
    """
    logger.info(f"Received request to analyze: {request.query}")

    try:
        result = await service.analyze(request.query)
    except MalformedInput as e:
        logger.error(f"Query validation error: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Comparison for '{result.product_name}' done with {len(result.records)} records")
    return result
