"""Endpoints de Relatórios — /api/v1/reports"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.presentation.api.v1.deps import get_system
from emergency_monitor.presentation.api.v1.schemas import StatusReportOut

router = APIRouter()


@router.get("/status", response_model=StatusReportOut, summary="Relatório de status do sistema")
async def status_report(system: MonitoringSystem = Depends(get_system)):
    report = system.reports.build_status_report()
    return StatusReportOut.model_validate(report.to_dict())
