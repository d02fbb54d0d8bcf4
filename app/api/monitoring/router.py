"""
Monitoring: Prometheus metrics and a tail of the application log.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse, Response

from app.core.admin_dependencies import get_current_user
from app.utils.logger import LOG_FILE
from app.utils.prometheus_metrics import get_metrics, CONTENT_TYPE_LATEST

router = APIRouter(
    prefix="/api/monitoring",
    tags=["Monitoring"],
    dependencies=[Depends(get_current_user)]
)

# Metrics are scraped without authentication
router_public = APIRouter(
    prefix="/api/monitoring",
    tags=["Monitoring"]
)


@router_public.get("/metrics")
def metrics():
    """Prometheus exposition format."""
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)


def tail_log(lines: int, level: Optional[str] = None, search: Optional[str] = None) -> List[str]:
    """Last ``lines`` lines of the log file, then filtered by level tag and text."""
    if not LOG_FILE.exists():
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Log file not found")

    with open(LOG_FILE, "r", encoding="utf-8") as f:
        log_lines = [line.rstrip("\n") for line in f.readlines()[-lines:]]

    if level:
        tag = f"[{level.upper()}]"
        log_lines = [line for line in log_lines if tag in line.upper()]
    if search:
        needle = search.lower()
        log_lines = [line for line in log_lines if needle in line.lower()]
    return [line for line in log_lines if line.strip()]


@router.get("/logs", response_class=PlainTextResponse)
def view_logs(
    lines: int = Query(100, ge=1, le=1000, description="Lines to read from the end of the file"),
    level: Optional[str] = Query(None, description="INFO, WARNING, ERROR or DEBUG"),
    search: Optional[str] = Query(None, description="Text contained in the line"),
):
    return PlainTextResponse("\n".join(tail_log(lines, level, search)))


@router.get("/logs/json")
def view_logs_json(
    lines: int = Query(100, ge=1, le=1000),
    level: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
):
    log_lines = tail_log(lines, level, search)
    return {"total": len(log_lines), "file": LOG_FILE.name, "lines": log_lines}
