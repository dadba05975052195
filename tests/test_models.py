# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas del formato binario del sobre cifrado.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from cryptr.errors import MalformedEnvelopeError
from cryptr.models import IV_SIZE, Envelope


def test_from_bytes_splits_iv_prefix():
    data = bytes(range(16)) + b"C" * 32
    envelope = Envelope.from_bytes(data)
    assert envelope.iv == bytes(range(16))
    assert envelope.ciphertext == b"C" * 32
    assert envelope.to_bytes() == data


def test_from_bytes_accepts_iv_only():
    envelope = Envelope.from_bytes(b"\x00" * IV_SIZE)
    assert envelope.ciphertext == b""


def test_from_bytes_rejects_short_data():
    with pytest.raises(MalformedEnvelopeError):
        Envelope.from_bytes(b"\x00" * (IV_SIZE - 1))


@pytest.mark.parametrize("iv_len", [0, 12, 17])
def test_iv_size_is_enforced(iv_len):
    with pytest.raises(ValidationError):
        Envelope(iv=b"\x00" * iv_len, ciphertext=b"")
