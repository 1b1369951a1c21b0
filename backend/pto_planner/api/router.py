from fastapi import APIRouter

from pto_planner.api.holidays import holidays_router, workdays_router
from pto_planner.api.policies import router as policies_router
from pto_planner.api.projections import projections_router
from pto_planner.api.snapshots import snapshots_router
from pto_planner.api.vacations import vacations_router

api_router = APIRouter()
api_router.include_router(policies_router)
api_router.include_router(holidays_router)
api_router.include_router(workdays_router)
api_router.include_router(vacations_router)
api_router.include_router(projections_router)
api_router.include_router(snapshots_router)
