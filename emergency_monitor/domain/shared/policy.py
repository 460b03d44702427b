"""Constantes de política do domínio — fixas, não configuráveis."""

from __future__ import annotations

from datetime import timedelta

# Sem contato por mais que isso → pessoa em risco
AT_RISK_THRESHOLD = timedelta(hours=2)

# Tamanho do token biométrico (prefixo do base64 do SHA-256)
BIOMETRIC_TOKEN_LENGTH = 16

NATIONAL_ID_LENGTH = 11

MAX_AGE_YEARS = 120
