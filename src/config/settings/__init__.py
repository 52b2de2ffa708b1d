"""Agregador de settings do Integra Asaas.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Asaas (gateway remoto)
from config.settings.asaas import (
    ASAAS_PRODUCTION_URL,
    ASAAS_SANDBOX_URL,
    AsaasSettings,
    get_asaas_settings,
)

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Constants
    "ASAAS_PRODUCTION_URL",
    "ASAAS_SANDBOX_URL",
    "VALID_LOG_LEVELS",
    # Asaas
    "AsaasSettings",
    # Base
    "BaseSettings",
    "Environment",
    "get_asaas_settings",
    "get_base_settings",
]
