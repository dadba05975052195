# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-CBC con relleno PKCS#7 para cifrado simétrico.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico que producen y consumen sobres ``IV || ct``.

El modo CBC no autentica los datos: un ciphertext alterado puede fallar por
relleno inválido o descifrarse a un texto distinto sin aviso.
"""

import logging
import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cryptr.errors import DecryptionError, EncryptionError
from cryptr.models import IV_SIZE, Envelope

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16
VALID_KEY_SIZES = (16, 24, 32)


def _check_key(key: bytes) -> None:
    """Lanza ``ValueError`` si la clave no es válida para AES."""

    if not isinstance(key, (bytes, bytearray)):
        raise ValueError("La clave debe ser bytes.")
    if len(key) not in VALID_KEY_SIZES:
        raise ValueError(f"Longitud de clave AES inválida: {len(key)} bytes (válidas: 16, 24, 32).")


def aes_cbc_encrypt(key: bytes, plaintext: bytes) -> Envelope:
    """Cifra datos con AES-CBC usando un IV aleatorio nuevo.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos en claro, tratados como bytes opacos.

    Returns:
        Envelope: Sobre con el IV generado y el ciphertext con relleno.

    Raises:
        EncryptionError: Si la clave no tiene una longitud válida.

    """

    try:
        _check_key(key)
    except ValueError as exc:
        raise EncryptionError(str(exc)) from exc

    iv = os.urandom(IV_SIZE)
    # PKCS#7 siempre añade relleno, incluso con entradas alineadas al bloque.
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    logger.debug("AES-CBC: cifrados %d bytes -> %d bytes", len(plaintext), len(ciphertext))
    return Envelope(iv=iv, ciphertext=ciphertext)


def aes_cbc_decrypt(key: bytes, envelope: Envelope) -> bytes:
    """Descifra un sobre AES-CBC y elimina el relleno.

    Args:
        key (bytes): Clave simétrica con la que se cifró el sobre.
        envelope (Envelope): Sobre con IV y ciphertext.

    Returns:
        bytes: Datos originales en claro.

    Raises:
        DecryptionError: Si la clave no es válida, el ciphertext no es múltiplo
            del tamaño de bloque o el relleno es incorrecto.

    """

    try:
        _check_key(key)
    except ValueError as exc:
        raise DecryptionError(str(exc)) from exc

    ciphertext = envelope.ciphertext
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise DecryptionError(
            f"Longitud de ciphertext inválida: {len(ciphertext)} bytes "
            f"(debe ser un múltiplo no nulo de {BLOCK_SIZE})."
        )

    decryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(envelope.iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise DecryptionError("Relleno inválido: clave incorrecta o datos corruptos.") from exc

    logger.debug("AES-CBC: descifrados %d bytes -> %d bytes", len(ciphertext), len(plaintext))
    return plaintext


def encrypt_envelope(key: bytes, plaintext: bytes) -> bytes:
    """Cifra ``plaintext`` y devuelve el sobre serializado ``IV || ct``."""

    return aes_cbc_encrypt(key, plaintext).to_bytes()


def decrypt_envelope(key: bytes, data: bytes) -> bytes:
    """Descifra un sobre serializado.

    Args:
        key (bytes): Clave simétrica.
        data (bytes): Contenido completo del archivo cifrado.

    Returns:
        bytes: Datos en claro.

    Raises:
        MalformedEnvelopeError: Si ``data`` es más corto que el IV.
        DecryptionError: Si el descifrado falla.

    """

    return aes_cbc_decrypt(key, Envelope.from_bytes(data))
