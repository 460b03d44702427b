"""
Verificação de integridade do payload de sincronização.

O produtor calcula o digest fora de banda; o consumidor recalcula de forma
independente e rejeita qualquer divergência.
"""

from __future__ import annotations

import base64
import hashlib
import hmac


def compute_digest(payload: bytes) -> str:
    """SHA-256 do payload, codificado em base64."""
    return base64.b64encode(hashlib.sha256(payload).digest()).decode("ascii")


def digest_matches(payload: bytes, digest: str) -> bool:
    """
    Comparação em tempo constante. Qualquer digest informado (inclusive com
    caracteres fora do ASCII) é aceito como entrada e apenas não confere.
    """
    if not isinstance(digest, str):
        return False
    # compare_digest recusa str não-ASCII; em bytes a comparação é sempre válida
    expected = compute_digest(payload).encode("ascii")
    return hmac.compare_digest(expected, digest.encode("utf-8", "surrogatepass"))
