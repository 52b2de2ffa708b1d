"""Endpoints HTTP da integração Asaas (um módulo por recurso)."""
