# --------------------------------------------------------------
# File: crypto_asym.py
# Description: Envoltura de claves simétricas con RSA y relleno PKCS#1 v1.5.
# --------------------------------------------------------------
"""Funciones para cifrar y descifrar claves simétricas con un par RSA."""

import logging

from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from cryptr.errors import UnwrapError, WrapError

logger = logging.getLogger(__name__)

PKCS1V15_OVERHEAD = 11


def _modulus_bytes(key) -> int:
    """Longitud en bytes del módulo RSA, redondeada hacia arriba."""

    return (key.key_size + 7) // 8


def rsa_max_payload(public_key: RSAPublicKey) -> int:
    """Devuelve el tamaño máximo en bytes que admite la clave con PKCS#1 v1.5."""

    return _modulus_bytes(public_key) - PKCS1V15_OVERHEAD


def rsa_wrap_key(key_bytes: bytes, public_key: RSAPublicKey) -> bytes:
    """Cifra los bytes de una clave simétrica con la clave pública RSA.

    Args:
        key_bytes (bytes): Clave simétrica en bruto.
        public_key (RSAPublicKey): Clave pública del destinatario.

    Returns:
        bytes: Clave envuelta, de la misma longitud que el módulo RSA.

    Raises:
        WrapError: Si la clave pública no es RSA o ``key_bytes`` supera el
            tamaño máximo permitido por el módulo y el relleno.

    """

    if not isinstance(public_key, RSAPublicKey):
        raise WrapError(f"Se esperaba una clave pública RSA, no {type(public_key).__name__}.")

    limit = rsa_max_payload(public_key)
    if len(key_bytes) > limit:
        raise WrapError(
            f"La clave ocupa {len(key_bytes)} bytes; el máximo para RSA-{public_key.key_size} "
            f"con PKCS#1 v1.5 es {limit}."
        )

    try:
        wrapped = public_key.encrypt(bytes(key_bytes), padding.PKCS1v15())
    except (TypeError, ValueError) as exc:
        raise WrapError(f"No se ha podido envolver la clave: {exc}") from exc

    logger.debug("RSA-%d: envueltos %d bytes", public_key.key_size, len(key_bytes))
    return wrapped


# SECURITY: con OpenSSL 3.2+ el rechazo implícito puede devolver bytes
# aleatorios en lugar de fallar cuando la clave privada no corresponde.
def rsa_unwrap_key(wrapped: bytes, private_key: RSAPrivateKey) -> bytes:
    """Descifra una clave envuelta con la clave privada RSA.

    Args:
        wrapped (bytes): Clave envuelta con ``rsa_wrap_key``.
        private_key (RSAPrivateKey): Clave privada del destinatario.

    Returns:
        bytes: Clave simétrica original.

    Raises:
        UnwrapError: Si la clave privada no es RSA, la longitud del ciphertext
            no coincide con el módulo o el relleno es inválido.

    """

    if not isinstance(private_key, RSAPrivateKey):
        raise UnwrapError(f"Se esperaba una clave privada RSA, no {type(private_key).__name__}.")

    modulus_len = _modulus_bytes(private_key)
    if len(wrapped) != modulus_len:
        raise UnwrapError(
            f"Clave envuelta mal formada: {len(wrapped)} bytes, se esperaban {modulus_len}."
        )

    try:
        key_bytes = private_key.decrypt(bytes(wrapped), padding.PKCS1v15())
    except ValueError as exc:
        raise UnwrapError("No se ha podido desenvolver la clave: clave privada incorrecta o datos corruptos.") from exc

    logger.debug("RSA-%d: desenvueltos %d bytes", private_key.key_size, len(key_bytes))
    return key_bytes
