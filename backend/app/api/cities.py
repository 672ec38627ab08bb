"""GET /api/cities - The fixed list of cities CWA forecasts cover."""

from fastapi import APIRouter

from ..constants import AVAILABLE_CITIES
from ..schemas.forecast import CitiesResponse

router = APIRouter()


@router.get("/cities", response_model=CitiesResponse)
def get_cities():
    return CitiesResponse(data=list(AVAILABLE_CITIES))
