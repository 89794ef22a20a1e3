# webaudit/api/router.py
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from webaudit.audit import compare_with_competitors, run_audit
from webaudit.audit.models import AuditRequest, AuditResult, ComparisonResult
from webaudit.config import get_settings
from webaudit.schemas import AuditIn, CompareIn

logger = logging.getLogger("WebAudit_API")

router = APIRouter()


def _validation_detail(exc: ValidationError):
    return [{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()]


@router.post("/audit", response_model=AuditResult)
async def audit(body: AuditIn) -> AuditResult:
    """Audit one URL. A fetch failure comes back as success=false with the error."""
    settings = get_settings()
    try:
        request = AuditRequest(url=body.url, timeout_ms=body.timeout_ms or settings.AUDIT_TIMEOUT_MS)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=_validation_detail(exc))
    return await run_audit(request)


@router.post("/compare", response_model=ComparisonResult)
async def compare(body: CompareIn) -> ComparisonResult:
    settings = get_settings()
    if len(body.competitors) > settings.MAX_COMPETITORS:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.MAX_COMPETITORS} competitors per comparison",
        )
    try:
        return await compare_with_competitors(
            body.url,
            body.competitors,
            timeout_ms=body.timeout_ms or settings.AUDIT_TIMEOUT_MS,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=_validation_detail(exc))
