# --------------------------------------------------------------
# File: keys.py
# Description: Carga de claves RSA públicas y privadas en formato DER o PEM.
# --------------------------------------------------------------
"""Deserialización de las claves RSA que llegan desde archivos externos."""

from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from cryptr.errors import UnwrapError, WrapError

PEM_MARKER = b"-----BEGIN"


def _is_pem(data: bytes) -> bool:
    return data.lstrip().startswith(PEM_MARKER)


def load_public_key(data: bytes) -> RSAPublicKey:
    """Carga una clave pública RSA X.509 (SubjectPublicKeyInfo).

    Args:
        data (bytes): Clave en DER o PEM.

    Returns:
        RSAPublicKey: Clave lista para ``rsa_wrap_key``.

    Raises:
        WrapError: Si los datos no se pueden decodificar o la clave no es RSA.

    """

    try:
        if _is_pem(data):
            key = serialization.load_pem_public_key(data)
        else:
            key = serialization.load_der_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise WrapError(f"Clave pública ilegible: {exc}") from exc

    if not isinstance(key, RSAPublicKey):
        raise WrapError(f"La clave pública no es RSA ({type(key).__name__}).")
    return key


def load_private_key(data: bytes, password: Optional[bytes] = None) -> RSAPrivateKey:
    """Carga una clave privada RSA PKCS#8.

    Args:
        data (bytes): Clave en DER o PEM.
        password (Optional[bytes]): Contraseña si la clave está cifrada.

    Returns:
        RSAPrivateKey: Clave lista para ``rsa_unwrap_key``.

    Raises:
        UnwrapError: Si los datos no se pueden decodificar, la contraseña es
            incorrecta o la clave no es RSA.

    """

    try:
        if _is_pem(data):
            key = serialization.load_pem_private_key(data, password=password)
        else:
            key = serialization.load_der_private_key(data, password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise UnwrapError(f"Clave privada ilegible: {exc}") from exc

    if not isinstance(key, RSAPrivateKey):
        raise UnwrapError(f"La clave privada no es RSA ({type(key).__name__}).")
    return key
