"""Service health endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from quicknotes.web.deps import AppDep

router: APIRouter = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status")
    notes: int = Field(..., description="Number of notes currently stored", ge=0)


@router.get("/health", summary="Health check", operation_id="healthCheck")
async def health_check(app: AppDep) -> HealthResponse:
    return HealthResponse(status="healthy", notes=app.store.count())
