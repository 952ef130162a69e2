"""FastAPI route definitions."""

from __future__ import annotations
import logging

from fastapi import APIRouter, HTTPException

from lsystem3d.core.errors import (
    CapacityExceededError, LSystemError, StackUnderflowError,
)
from lsystem3d.services.lsystem_service import LSystemService, UnknownPresetError
from lsystem3d.api.schemas import (
    ExpandResponse, GenerateRequest, GenerateResponse, PresetInfo, RunOptions,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared service instance
_service = LSystemService()


def _to_http_error(e: LSystemError) -> HTTPException:
    """Bad grammars are the client's input (400); failed runs are 422."""
    status = 422 if isinstance(e, (CapacityExceededError, StackUnderflowError)) else 400
    logger.warning("Rejected L-system request (%d): %s", status, e)
    return HTTPException(status_code=status, detail=str(e))


# Rewriting is CPU bound: plain `def` routes run in the threadpool, off the event loop.
@router.post("/generate", response_model=GenerateResponse)
def generate(request: GenerateRequest) -> GenerateResponse:
    """Rewrite the axiom and draw the result with the turtle."""
    try:
        result = _service.generate(
            request.axiom, request.rules, request.to_config(), request.params.to_params(),
        )
    except LSystemError as e:
        raise _to_http_error(e) from e

    return GenerateResponse(result=result, iterations=request.iterations, seed=request.seed)


@router.post("/expand", response_model=ExpandResponse)
def expand(request: GenerateRequest) -> ExpandResponse:
    """Rewrite the axiom and return the symbol string without drawing it."""
    try:
        symbols = _service.expand(
            request.axiom, request.rules, request.to_config(), request.params.to_params(),
        )
    except LSystemError as e:
        raise _to_http_error(e) from e

    return ExpandResponse(symbols=symbols, length=len(symbols))


@router.get("/presets", response_model=list[PresetInfo])
async def list_presets() -> list[PresetInfo]:
    """List all available preset grammars."""
    return [PresetInfo.from_preset(p) for p in _service.list_presets()]


@router.post("/presets/{name}/generate", response_model=GenerateResponse)
def generate_preset(name: str, options: RunOptions | None = None) -> GenerateResponse:
    """Run a preset; without a body, its suggested iteration count is used."""
    config = options.to_config() if options is not None else None
    try:
        result = _service.generate_preset(name, config)
    except UnknownPresetError:
        raise HTTPException(status_code=404, detail=f"Unknown preset '{name}'") from None
    except LSystemError as e:
        raise _to_http_error(e) from e

    iterations = config.iterations if config is not None else _service.get_preset(name).iterations
    seed = config.seed if config is not None else 0
    return GenerateResponse(result=result, iterations=iterations, seed=seed)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
