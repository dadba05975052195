# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones tipadas de las operaciones de Cryptr.
# --------------------------------------------------------------
"""Excepciones que permiten distinguir entradas mal formadas, fallos
criptográficos y errores de entrada/salida."""

__all__ = [
    "CryptrError",
    "KeyGenerationError",
    "EncryptionError",
    "DecryptionError",
    "MalformedEnvelopeError",
    "WrapError",
    "UnwrapError",
    "StorageError",
]


class CryptrError(Exception):
    """Excepción base de todos los errores de Cryptr."""


class KeyGenerationError(CryptrError):
    """Tamaño de clave no soportado o fuente aleatoria no disponible."""


class EncryptionError(CryptrError):
    """La clave simétrica no es válida para el cifrado."""


class DecryptionError(CryptrError):
    """Relleno inválido, clave incorrecta o ciphertext truncado."""


class MalformedEnvelopeError(CryptrError):
    """El sobre cifrado es demasiado corto para contener el IV."""


class WrapError(CryptrError):
    """No se ha podido envolver la clave con la clave pública."""


class UnwrapError(CryptrError):
    """No se ha podido desenvolver la clave con la clave privada."""


class StorageError(CryptrError):
    """Fallo de lectura o escritura en el almacenamiento local."""
