"""
Exceções de domínio.

Todas herdam de DomainError para que a camada de apresentação possa
traduzi-las em respostas padronizadas sem conhecer cada caso.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base para falhas esperadas do domínio."""
    pass


class ValidationError(DomainError):
    """Entrada malformada ou fora do intervalo, corrigível pelo chamador."""
    pass


class ConflictError(DomainError):
    """Violação de unicidade ou de transição de estado (duplicata, finalização dupla)."""
    pass


class NotFoundError(DomainError):
    """Entidade referenciada não existe."""
    def __init__(self, resource: str = "Recurso", resource_id: str = ""):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} com ID {resource_id} não encontrado(a)")


class IntegrityError(DomainError):
    """Checksum recalculado não confere com o informado."""
    pass
