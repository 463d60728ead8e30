"""FastAPI application entrypoint for arc42docs service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..config import ToolSettings
from ..tools import Arc42Tools, ToolResponse, build_toolkit

_STATUS_BY_ERROR: Dict[str, int] = {
    "ValidationError": 400,
    "NotFoundError": 404,
    "NotInitializedError": 404,
    "AlreadyInitializedError": 409,
}


class InitRequest(BaseModel):
    project_name: str
    force: bool = False
    target_folder: Optional[str] = None
    language: Optional[str] = None
    format: Optional[str] = None


class UpdateSectionRequest(BaseModel):
    content: str
    mode: str = "replace"
    target_folder: Optional[str] = None


class ToolResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    next_steps: List[str] = Field(default_factory=list, alias="nextSteps")


class HealthResponse(BaseModel):
    status: str


class ToolFailure(RuntimeError):
    """Carries an unsuccessful ``ToolResponse`` to the exception handler."""

    def __init__(self, response: ToolResponse) -> None:
        super().__init__(response.message)
        self.response = response

    @property
    def status_code(self) -> int:
        return _STATUS_BY_ERROR.get(self.response.error or "", 500)


def _default_tools_factory(settings: ToolSettings | None = None) -> Callable[[], Arc42Tools]:
    toolkit = build_toolkit()
    resolved = settings or ToolSettings.from_env()
    return lambda: Arc42Tools(toolkit, resolved)


def create_app(
    tools_factory: Callable[[], Arc42Tools] | None = None,
    *,
    settings: ToolSettings | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing arc42docs operations."""
    factory = tools_factory or _default_tools_factory(settings)
    app = FastAPI(title="arc42docs Service", version="0.3.0")

    async def get_tools() -> Arc42Tools:
        return factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/guide", response_model=ToolResponseModel)
    async def guide(
        language: Optional[str] = None,
        output_format: Optional[str] = Query(default=None, alias="format"),
        tools: Arc42Tools = Depends(get_tools),
    ) -> ToolResponseModel:
        return await _execute(lambda: tools.workflow_guide(language, output_format))

    @app.post("/init", response_model=ToolResponseModel)
    async def init_workspace(
        payload: InitRequest,
        tools: Arc42Tools = Depends(get_tools),
    ) -> ToolResponseModel:
        def _run_init() -> ToolResponse:
            return tools.init(
                payload.project_name,
                force=payload.force,
                target_folder=payload.target_folder,
                language=payload.language,
                output_format=payload.format,
            )

        return await _execute(_run_init)

    @app.get("/status", response_model=ToolResponseModel)
    async def status(
        target_folder: Optional[str] = None,
        tools: Arc42Tools = Depends(get_tools),
    ) -> ToolResponseModel:
        return await _execute(lambda: tools.status(target_folder))

    @app.get("/sections/{section}", response_model=ToolResponseModel)
    async def get_section(
        section: str,
        target_folder: Optional[str] = None,
        tools: Arc42Tools = Depends(get_tools),
    ) -> ToolResponseModel:
        return await _execute(lambda: tools.get_section(section, target_folder))

    @app.put("/sections/{section}", response_model=ToolResponseModel)
    async def update_section(
        section: str,
        payload: UpdateSectionRequest,
        tools: Arc42Tools = Depends(get_tools),
    ) -> ToolResponseModel:
        def _run_update() -> ToolResponse:
            return tools.update_section(
                section, payload.content, payload.mode, payload.target_folder
            )

        return await _execute(_run_update)

    @app.get("/templates/{section}", response_model=ToolResponseModel)
    async def template(
        section: str,
        language: Optional[str] = None,
        output_format: Optional[str] = Query(default=None, alias="format"),
        tools: Arc42Tools = Depends(get_tools),
    ) -> ToolResponseModel:
        return await _execute(
            lambda: tools.generate_template(section, language, output_format)
        )

    @app.exception_handler(ToolFailure)
    async def tool_failure_handler(_: Any, exc: ToolFailure) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.response.message, "error": exc.response.error},
        )

    return app


async def _execute(run: Callable[[], ToolResponse]) -> ToolResponseModel:
    loop = asyncio.get_running_loop()
    response = await loop.run_in_executor(None, run)
    if not response.success:
        raise ToolFailure(response)
    return ToolResponseModel(
        success=response.success,
        message=response.message,
        data=response.data,
        next_steps=response.next_steps,
    )


def run_service(
    host: str = "127.0.0.1", port: int = 8000, settings: ToolSettings | None = None
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    app = create_app(settings=settings)
    uvicorn.run(app, host=host, port=port)


__all__ = [
    "InitRequest",
    "ToolFailure",
    "ToolResponseModel",
    "UpdateSectionRequest",
    "create_app",
    "run_service",
]
