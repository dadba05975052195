# --------------------------------------------------------------
# File: models.py
# Description: Modelo del sobre cifrado (IV || ciphertext) escrito en disco.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan el formato binario de los archivos cifrados.

Formato del sobre, sin cabecera ni identificador de algoritmo::

    offset 0..15   : IV, 16 bytes
    offset 16..fin : ciphertext AES-CBC con relleno PKCS#7
"""

from pydantic import BaseModel, field_validator

from cryptr.errors import MalformedEnvelopeError

IV_SIZE = 16  # bloque AES de 128 bits


class Envelope(BaseModel):
    """Representa un archivo cifrado con su vector de inicialización.

    Attributes:
        iv (bytes): Vector de inicialización aleatorio de 16 bytes.
        ciphertext (bytes): Datos cifrados en modo CBC con relleno.

    """

    iv: bytes
    ciphertext: bytes

    @field_validator("iv")
    @classmethod
    def _check_iv_size(cls, value: bytes) -> bytes:
        if len(value) != IV_SIZE:
            raise ValueError(f"El IV debe tener {IV_SIZE} bytes (recibidos {len(value)}).")
        return value

    def to_bytes(self) -> bytes:
        """Serializa el sobre como ``IV || ciphertext``."""

        return self.iv + self.ciphertext

    @classmethod
    def from_bytes(cls, data: bytes) -> "Envelope":
        """Separa el IV prefijado del ciphertext.

        Args:
            data (bytes): Contenido completo del archivo cifrado.

        Returns:
            Envelope: Sobre con el IV y el ciphertext separados.

        Raises:
            MalformedEnvelopeError: Si ``data`` tiene menos de 16 bytes.

        """

        if len(data) < IV_SIZE:
            raise MalformedEnvelopeError(
                f"Sobre mal formado: {len(data)} bytes, se necesitan al menos {IV_SIZE} para el IV."
            )
        return cls(iv=bytes(data[:IV_SIZE]), ciphertext=bytes(data[IV_SIZE:]))
