"""Health Check Controller."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from waste.domain.enums import ModelState
from waste.presentation.http.schemas import ReadinessResponse
from waste.setup.dependencies import CenterReaderDep, EngineDep

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크. 모델 상태와 무관하게 항상 ok."""
    return {"status": "ok"}


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def ready(engine: EngineDep, reader: CenterReaderDep):
    """서비스 준비 상태 체크."""
    state = engine.state
    if state is ModelState.READY:
        return ReadinessResponse(
            status="ready",
            model=state.value,
            centers=await reader.count_centers(),
        )

    status = "loading" if state in (ModelState.PENDING, ModelState.LOADING) else "unavailable"
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status=status, model=state.value).model_dump(
            exclude_none=True
        ),
    )
