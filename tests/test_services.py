# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas del flujo completo sobre archivos de claves y datos.
# --------------------------------------------------------------

import os

import pytest

from cryptr import services
from cryptr.errors import DecryptionError, MalformedEnvelopeError, StorageError, UnwrapError, WrapError


def test_full_key_exchange_flow(tmp_path, rsa_der_files):
    """Reproduce el intercambio completo: clave, cifrado, envoltura y recuperación.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        rsa_der_files (tuple[Path, Path]): Par RSA en DER del destinatario.

    Returns:
        None: Las aserciones comparan el archivo original con el restaurado.
    """
    pub_path, priv_path = rsa_der_files
    original = tmp_path / "foto.bin"
    original.write_bytes(os.urandom(4096) + b"\r\nfin")

    assert services.generate_key_file(str(tmp_path / "secret.key")) == 16
    services.encrypt_file(str(original), str(tmp_path / "secret.key"), str(tmp_path / "foto.enc"))
    services.encrypt_key_file(str(tmp_path / "secret.key"), str(pub_path), str(tmp_path / "secret.key.enc"))

    # El destinatario solo recibe foto.enc y secret.key.enc.
    services.decrypt_key_file(str(tmp_path / "secret.key.enc"), str(priv_path), str(tmp_path / "recv.key"))
    written = services.decrypt_file(str(tmp_path / "foto.enc"), str(tmp_path / "recv.key"), str(tmp_path / "foto.out"))

    assert (tmp_path / "recv.key").read_bytes() == (tmp_path / "secret.key").read_bytes()
    assert (tmp_path / "foto.out").read_bytes() == original.read_bytes()
    assert written == original.stat().st_size


def test_encrypt_file_layout(tmp_path):
    key_path = tmp_path / "secret.key"
    key_path.write_bytes(b"k" * 16)
    (tmp_path / "hola.txt").write_bytes(b"hello")
    written = services.encrypt_file(str(tmp_path / "hola.txt"), str(key_path), str(tmp_path / "hola.enc"))
    assert written == 32
    assert len((tmp_path / "hola.enc").read_bytes()) == 32


def test_generate_key_file_with_bits(tmp_path):
    services.generate_key_file(str(tmp_path / "k256.key"), bits=256)
    assert len((tmp_path / "k256.key").read_bytes()) == 32


def test_decrypt_short_file_writes_nothing(tmp_path):
    """Comprueba que un fallo no deje salida parcial.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        None: Se espera MalformedEnvelopeError y ningún archivo de salida.
    """
    (tmp_path / "secret.key").write_bytes(b"k" * 16)
    (tmp_path / "corto.enc").write_bytes(b"corto")
    with pytest.raises(MalformedEnvelopeError):
        services.decrypt_file(str(tmp_path / "corto.enc"), str(tmp_path / "secret.key"), str(tmp_path / "out"))
    assert not (tmp_path / "out").exists()


def test_decrypt_with_wrong_key_file(tmp_path):
    (tmp_path / "a.key").write_bytes(b"a" * 16)
    (tmp_path / "b.key").write_bytes(b"b" * 16)
    (tmp_path / "in.txt").write_bytes(b"contenido" * 5)
    services.encrypt_file(str(tmp_path / "in.txt"), str(tmp_path / "a.key"), str(tmp_path / "in.enc"))
    try:
        services.decrypt_file(str(tmp_path / "in.enc"), str(tmp_path / "b.key"), str(tmp_path / "out.txt"))
    except DecryptionError:
        assert not (tmp_path / "out.txt").exists()
        return
    assert (tmp_path / "out.txt").read_bytes() != b"contenido" * 5


def test_missing_input_is_storage_error(tmp_path):
    (tmp_path / "secret.key").write_bytes(b"k" * 16)
    with pytest.raises(StorageError):
        services.encrypt_file(str(tmp_path / "no.txt"), str(tmp_path / "secret.key"), str(tmp_path / "out"))


def test_public_key_file_must_be_a_key(tmp_path):
    (tmp_path / "secret.key").write_bytes(b"k" * 16)
    (tmp_path / "public.der").write_bytes(b"no es una clave")
    with pytest.raises(WrapError):
        services.encrypt_key_file(str(tmp_path / "secret.key"), str(tmp_path / "public.der"), str(tmp_path / "out"))
    assert not (tmp_path / "out").exists()


def test_private_key_file_must_be_a_key(tmp_path):
    (tmp_path / "secret.key.enc").write_bytes(os.urandom(256))
    (tmp_path / "private.der").write_bytes(b"no es una clave")
    with pytest.raises(UnwrapError):
        services.decrypt_key_file(str(tmp_path / "secret.key.enc"), str(tmp_path / "private.der"), str(tmp_path / "out"))
