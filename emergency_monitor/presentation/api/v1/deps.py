"""Dependências FastAPI — acesso ao MonitoringSystem da aplicação."""

from __future__ import annotations

from fastapi import Depends, Request

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.application.systems.devices.registry import DeviceRegistry
from emergency_monitor.application.systems.failures.registry import FailureRegistry
from emergency_monitor.application.systems.persons.registry import PersonRegistry


def get_system(request: Request) -> MonitoringSystem:
    return request.app.state.system


def get_person_registry(system: MonitoringSystem = Depends(get_system)) -> PersonRegistry:
    return system.persons


def get_failure_registry(system: MonitoringSystem = Depends(get_system)) -> FailureRegistry:
    return system.failures


def get_device_registry(system: MonitoringSystem = Depends(get_system)) -> DeviceRegistry:
    return system.devices
