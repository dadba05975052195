# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con pares RSA y directorios de trabajo aislados.
# --------------------------------------------------------------

from typing import Iterator

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from cryptr import config


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """Genera un par RSA-2048 compartido por toda la sesión de pruebas.

    Returns:
        rsa.RSAPrivateKey: Clave privada cuyo par público se obtiene con `public_key()`.
    """
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key() -> rsa.RSAPrivateKey:
    """Genera un segundo par RSA-2048 para probar claves que no corresponden."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def rsa_der_files(tmp_path, rsa_private_key):
    """Escribe el par RSA en DER (X.509 y PKCS#8) como hacen los archivos *.der.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        rsa_private_key (rsa.RSAPrivateKey): Par RSA de la sesión.

    Returns:
        tuple[Path, Path]: Rutas de la clave pública y de la clave privada.
    """
    pub_path = tmp_path / "public.der"
    priv_path = tmp_path / "private.der"
    pub_path.write_bytes(
        rsa_private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )
    priv_path.write_bytes(
        rsa_private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return pub_path, priv_path


@pytest.fixture(autouse=True)
def _isolate_cwd(tmp_path, monkeypatch) -> Iterator[None]:
    """Ejecuta cada prueba dentro de su carpeta temporal y sin configuración heredada.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar entorno y directorio.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "KEY_BITS", 128)

    yield
