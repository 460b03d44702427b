"""
Endpoints de Pessoas — /api/v1/people

Cadastro, detecção biométrica, atualização de localização e pessoas em risco.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from emergency_monitor.application.systems.persons.registry import PersonRegistry
from emergency_monitor.presentation.api.v1.deps import get_person_registry
from emergency_monitor.presentation.api.v1.schemas import (
    BiometricDetectRequest,
    LocationUpdate,
    PersonCreate,
    PersonOut,
)

router = APIRouter()


@router.post(
    "/",
    response_model=PersonOut,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar pessoa",
)
async def register_person(
    payload: PersonCreate,
    registry: PersonRegistry = Depends(get_person_registry),
):
    person = registry.register(payload.name, payload.national_id, payload.birth_date)
    return PersonOut.from_entity(person)


@router.get("/", response_model=list[PersonOut], summary="Listar todas as pessoas")
async def list_people(registry: PersonRegistry = Depends(get_person_registry)):
    return [PersonOut.from_entity(p) for p in registry.list_all()]


@router.get(
    "/at-risk",
    response_model=list[PersonOut],
    summary="Pessoas em risco",
    description="Pessoas sem contato há mais de 2 horas.",
)
async def list_people_at_risk(registry: PersonRegistry = Depends(get_person_registry)):
    return [PersonOut.from_entity(p) for p in registry.list_at_risk()]


@router.post(
    "/detect",
    response_model=PersonOut,
    summary="Detecção biométrica",
    description="Busca pelo token biométrico; uma detecção renova o último contato.",
)
async def detect_person(
    payload: BiometricDetectRequest,
    registry: PersonRegistry = Depends(get_person_registry),
):
    person = registry.find_by_biometric_token(payload.token)
    if person is None:
        raise HTTPException(status_code=404, detail="Nenhuma pessoa corresponde à biometria")
    return PersonOut.from_entity(person)


@router.get("/{person_id}", response_model=PersonOut, summary="Detalhe de uma pessoa")
async def get_person(person_id: str, registry: PersonRegistry = Depends(get_person_registry)):
    return PersonOut.from_entity(registry.get(person_id))


@router.put(
    "/{person_id}/location",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Atualizar localização",
)
async def update_location(
    person_id: str,
    payload: LocationUpdate,
    registry: PersonRegistry = Depends(get_person_registry),
):
    registry.update_location(person_id, payload.latitude, payload.longitude, payload.description)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
