from fastapi import APIRouter

from app.api.v1.analytics import router as analytics_router
from app.api.v1.profiling import domains_router, prompts_router
from app.api.v1.scoring import router as scoring_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(scoring_router)
api_v1_router.include_router(analytics_router)
api_v1_router.include_router(domains_router)
api_v1_router.include_router(prompts_router)
