"""GET / - Service discovery: available routes and example calls."""

from fastapi import APIRouter

from ..constants import EXAMPLE_CITIES

router = APIRouter()


@router.get("/")
def get_root():
    return {
        "message": "歡迎使用 CWA 天氣預報 API - 服務根目錄",
        "endpoints": {
            "weatherByCity": "/api/weather/:city",
            "health": "/api/health",
            "availableCities": "/api/cities",
        },
        "usage": {
            "description": "使用路徑參數取得指定城市天氣預報 (請使用 /api/cities 中的名稱)",
            "examples": [f"/api/weather/{city}" for city in EXAMPLE_CITIES],
        },
    }
