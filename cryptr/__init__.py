# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptr.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptr` y documenta sus módulos principales."""

__all__ = [
    "cli",
    "config",
    "crypto_asym",
    "crypto_sym",
    "errors",
    "keygen",
    "keys",
    "models",
    "services",
    "storage",
]
