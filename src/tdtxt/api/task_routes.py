"""REST API routes for task operations."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..models.record import TaskRecord
from .task_handlers import handle_task_format, handle_task_parse


class TaskParseBody(BaseModel):
    line: str


def register_task_routes(app_router: APIRouter) -> None:
    """Attach task REST routes."""

    @app_router.post("/tasks/parse")
    def parse_task(body: TaskParseBody):
        result = handle_task_parse(line=body.line)
        if "error" in result:
            raise HTTPException(status_code=422, detail=result["error"])
        return result

    @app_router.post("/tasks/format")
    def format_task(body: TaskRecord):
        result = handle_task_format(body)
        if "error" in result:
            raise HTTPException(status_code=422, detail=result["error"])
        return result

    @app_router.get("/health")
    def health():
        return {"status": "ok"}
