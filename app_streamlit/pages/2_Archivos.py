# --------------------------------------------------------------
# File: 2_Archivos.py
# Description: Cifra y descifra archivos con una clave secreta desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptr.crypto_sym import aes_cbc_encrypt, decrypt_envelope
from cryptr.errors import CryptrError, MalformedEnvelopeError


def secure_name(name: str) -> str:
    """Normaliza el nombre de archivo para evitar caracteres problemáticos.

    Args:
        name (str): Nombre original del archivo proporcionado por el usuario.

    Returns:
        str: Nombre limpio y libre de rutas o caracteres inválidos.
    """
    bad = '<>:"/\\|?*'
    for ch in bad:
        name = name.replace(ch, "_")
    return name.strip().replace("..", "_")


# Presenta el título de la sección dedicada a los archivos.
st.title("📁 Archivos")

key_file = st.file_uploader("Clave secreta", key="file_key")
mode = st.radio("Operación", ["Cifrar", "Descifrar"], horizontal=True)
f = st.file_uploader("Selecciona un archivo", type=None, key="file_data")

if key_file and f and st.button(mode):
    key = key_file.read()
    data = f.read()
    base = secure_name(f.name)

    if mode == "Cifrar":
        try:
            envelope = aes_cbc_encrypt(key, data)
        except CryptrError as exc:
            st.error(f"❌ {exc}")
            st.stop()
        blob = envelope.to_bytes()
        st.success(f"Archivo cifrado (AES-{len(key) * 8}-CBC).")
        st.code(
            f"iv={envelope.iv.hex()}\n"
            f"plaintext={len(data)} bytes | ciphertext={len(envelope.ciphertext)} bytes | sobre={len(blob)} bytes"
        )
        st.download_button("Descargar archivo cifrado", data=blob, file_name=base + ".enc")
    else:
        try:
            plaintext = decrypt_envelope(key, data)
        except MalformedEnvelopeError as exc:
            st.error(f"❌ El archivo no es un sobre válido: {exc}")
            st.stop()
        except CryptrError as exc:
            st.error(f"❌ {exc}")
            st.stop()
        out_name = base[:-4] if base.endswith(".enc") else base + ".dec"
        st.success(f"Archivo descifrado ({len(plaintext)} bytes).")
        st.download_button("Descargar archivo descifrado", data=plaintext, file_name=out_name)
