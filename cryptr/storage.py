# --------------------------------------------------------------
# File: storage.py
# Description: Utilidades de persistencia binaria para claves y archivos cifrados.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para el almacenamiento local."""

from __future__ import annotations

import logging
import os
import tempfile

from cryptr.errors import StorageError

__all__ = ["load_bytes", "save_bytes"]

logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def load_bytes(path: str | os.PathLike) -> bytes:
    """Lee un archivo completo en modo binario.

    Args:
        path (str | os.PathLike): Ruta del archivo a leer.

    Returns:
        bytes: Contenido íntegro del archivo.

    Raises:
        StorageError: Si el archivo no existe o no se puede leer.

    """

    try:
        with open(path, "rb") as handler:
            data = handler.read()
    except OSError as exc:
        raise StorageError(f"No se puede leer {os.fspath(path)}: {exc.strerror or exc}") from exc

    logger.debug("Leídos %d bytes de %s", len(data), os.fspath(path))
    return data


def save_bytes(path: str | os.PathLike, data: bytes) -> None:
    """Guarda datos binarios aplicando escritura atómica.

    Usa un temporal único junto al destino; si la escritura falla no queda
    ni el archivo destino ni el temporal.

    Raises:
        StorageError: Si no se puede crear el directorio o escribir el archivo.

    """

    path = os.fspath(path)
    tmp_path = None
    try:
        _ensure_parent_dir(path)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=os.path.dirname(path) or "."
        )
        with os.fdopen(fd, "wb") as handler:
            handler.write(data)
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as exc:
        raise StorageError(f"No se puede escribir {path}: {exc.strerror or exc}") from exc
    finally:
        # Elimina el temporal si no llegó a renombrarse.
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)

    logger.debug("Escritos %d bytes en %s", len(data), path)
