"""HTTP surface: the tool registry served as JSON RPC endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .exceptions import ToolError
from .tools import TOOLS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tools"])


@router.get("/health")
def api_health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/tools")
def api_list_tools() -> list[dict[str, str]]:
    """Available tools and what they do."""
    return [{"id": t.id, "description": t.description} for t in TOOLS.values()]


@router.post("/tools/{tool_id}")
async def api_call_tool(
    tool_id: str,
    payload: dict[str, Any] | None = Body(default=None),
) -> JSONResponse:
    """Run one tool; the body is validated against the tool's input model."""
    tool = TOOLS.get(tool_id)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_id}")
    try:
        inp = tool.input_model.model_validate(payload or {})
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    result = await run_in_threadpool(tool.fn, inp)
    return JSONResponse(content=result.to_wire())


def create_app() -> FastAPI:
    app = FastAPI(title="Painel de Deputados", version="1.0.0")
    app.include_router(router)

    @app.exception_handler(ToolError)
    async def _tool_error_handler(request: Request, exc: ToolError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


app = create_app()
