from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from pedigree.application.actor import Actor
from pedigree.application.use_cases.logs import list_audit_logs, list_system_logs
from pedigree.interfaces.http.deps import get_actor, get_uow
from pedigree.interfaces.http.schemas.logs import AuditLogResponse, SystemLogResponse

router = APIRouter(prefix="", tags=["logs"])


@router.get("/audit-logs", response_model=list[AuditLogResponse])
async def list_audit_logs_endpoint(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    entity_type: str | None = Query(None),
    entity_id: str | None = Query(None),
    user_id: UUID | None = Query(None),
    action: str | None = Query(None),
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[AuditLogResponse]:
    entries = await list_audit_logs.execute(
        uow,
        actor,
        limit=limit,
        offset=offset,
        entity_type=entity_type,
        entity_id=entity_id,
        user_id=user_id,
        action=action,
    )
    return [AuditLogResponse.model_validate(entry) for entry in entries]


@router.get("/audit-logs/{entry_id}", response_model=AuditLogResponse)
async def get_audit_log_endpoint(
    entry_id: int, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> AuditLogResponse:
    entry = await list_audit_logs.get(uow, actor, entry_id)
    return AuditLogResponse.model_validate(entry)


@router.get("/system-logs", response_model=list[SystemLogResponse])
async def list_system_logs_endpoint(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    level: str | None = Query(None),
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[SystemLogResponse]:
    entries = await list_system_logs.execute(
        uow, actor, limit=limit, offset=offset, level=level
    )
    return [SystemLogResponse.model_validate(entry) for entry in entries]
