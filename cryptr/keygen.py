# --------------------------------------------------------------
# File: keygen.py
# Description: Generación de claves simétricas AES aleatorias.
# --------------------------------------------------------------
"""Generador de claves AES a partir de la fuente aleatoria del sistema."""

import logging
import os
from typing import Optional

from cryptr import config
from cryptr.errors import KeyGenerationError

logger = logging.getLogger(__name__)

SUPPORTED_KEY_BITS = (128, 192, 256)


def generate_key(bits: Optional[int] = None) -> bytes:
    """Genera una clave AES criptográficamente segura.

    Args:
        bits (Optional[int]): Tamaño de la clave en bits. Si es ``None`` se usa
            ``CRYPTR_KEY_BITS`` (128 por defecto).

    Returns:
        bytes: Clave simétrica de ``bits // 8`` bytes.

    Raises:
        KeyGenerationError: Si el tamaño no es 128, 192 o 256, o si la fuente
            aleatoria del sistema no está disponible.

    """

    if bits is None:
        bits = config.KEY_BITS
    if bits not in SUPPORTED_KEY_BITS:
        raise KeyGenerationError(
            f"Tamaño de clave no soportado: {bits} bits (válidos: 128, 192, 256)."
        )
    try:
        key = os.urandom(bits // 8)
    except (NotImplementedError, OSError) as exc:
        raise KeyGenerationError(f"Fuente aleatoria no disponible: {exc}") from exc

    logger.debug("Clave AES de %d bits generada", bits)
    return key
