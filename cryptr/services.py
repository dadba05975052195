# --------------------------------------------------------------
# File: services.py
# Description: Operaciones de alto nivel sobre archivos de claves y datos.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que combinan almacenamiento y criptografía.

Cada operación lee sus entradas completas, ejecuta una sola primitiva y
escribe el resultado de forma atómica. Si algo falla no se escribe nada.
"""

import logging
from typing import Optional

from cryptr.crypto_asym import rsa_unwrap_key, rsa_wrap_key
from cryptr.crypto_sym import decrypt_envelope, encrypt_envelope
from cryptr.keygen import generate_key
from cryptr.keys import load_private_key, load_public_key
from cryptr.storage import load_bytes, save_bytes

logger = logging.getLogger(__name__)


def generate_key_file(key_path: str, bits: Optional[int] = None) -> int:
    """Genera una clave AES y la guarda en bruto en ``key_path``.

    Args:
        key_path (str): Archivo donde se almacenará la clave secreta.
        bits (Optional[int]): Tamaño de la clave; por defecto el configurado.

    Returns:
        int: Número de bytes escritos.

    """

    logger.info("Generando clave secreta en %s", key_path)
    key = generate_key(bits)
    save_bytes(key_path, key)
    return len(key)


def encrypt_file(input_path: str, key_path: str, output_path: str) -> int:
    """Cifra un archivo con la clave secreta y escribe ``IV || ciphertext``.

    Args:
        input_path (str): Archivo en claro, leído como bytes opacos.
        key_path (str): Archivo con la clave secreta.
        output_path (str): Archivo cifrado de salida.

    Returns:
        int: Número de bytes escritos.

    """

    logger.info("Cifrando %s con la clave %s en %s", input_path, key_path, output_path)
    key = load_bytes(key_path)
    plaintext = load_bytes(input_path)
    envelope = encrypt_envelope(key, plaintext)
    save_bytes(output_path, envelope)
    return len(envelope)


def decrypt_file(input_path: str, key_path: str, output_path: str) -> int:
    """Descifra un archivo ``IV || ciphertext`` con la clave secreta.

    Returns:
        int: Número de bytes en claro escritos.

    """

    logger.info("Descifrando %s con la clave %s en %s", input_path, key_path, output_path)
    key = load_bytes(key_path)
    envelope = load_bytes(input_path)
    plaintext = decrypt_envelope(key, envelope)
    save_bytes(output_path, plaintext)
    return len(plaintext)


def encrypt_key_file(secret_key_path: str, public_key_path: str, output_path: str) -> int:
    """Envuelve la clave secreta con una clave pública RSA (DER o PEM).

    Args:
        secret_key_path (str): Archivo con la clave secreta en bruto.
        public_key_path (str): Clave pública X.509 del destinatario.
        output_path (str): Archivo de salida con la clave envuelta.

    Returns:
        int: Número de bytes escritos.

    """

    logger.info(
        "Cifrando la clave %s con la clave pública %s en %s",
        secret_key_path,
        public_key_path,
        output_path,
    )
    public_key = load_public_key(load_bytes(public_key_path))
    key = load_bytes(secret_key_path)
    wrapped = rsa_wrap_key(key, public_key)
    save_bytes(output_path, wrapped)
    return len(wrapped)


def decrypt_key_file(encrypted_key_path: str, private_key_path: str, output_path: str) -> int:
    """Recupera la clave secreta con la clave privada RSA PKCS#8 (DER o PEM).

    Returns:
        int: Número de bytes escritos.

    """

    logger.info(
        "Descifrando la clave %s con la clave privada %s en %s",
        encrypted_key_path,
        private_key_path,
        output_path,
    )
    private_key = load_private_key(load_bytes(private_key_path))
    wrapped = load_bytes(encrypted_key_path)
    key = rsa_unwrap_key(wrapped, private_key)
    save_bytes(output_path, key)
    return len(key)
