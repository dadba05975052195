# --------------------------------------------------------------
# File: 1_Claves.py
# Description: Genera claves secretas y las cifra o descifra con RSA desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptr.crypto_asym import rsa_max_payload, rsa_unwrap_key, rsa_wrap_key
from cryptr.errors import CryptrError
from cryptr.keygen import SUPPORTED_KEY_BITS, generate_key
from cryptr.keys import load_private_key, load_public_key

# Presenta el título de la sección de gestión de claves.
st.title("🔑 Claves")

tab_gen, tab_wrap, tab_unwrap = st.tabs(["Generar", "Cifrar clave", "Descifrar clave"])

# Genera una clave secreta nueva en cada pulsación.
with tab_gen:
    bits = st.selectbox("Tamaño de la clave (bits)", SUPPORTED_KEY_BITS, index=0)
    if st.button("Generar clave"):
        try:
            key = generate_key(bits)
        except CryptrError as exc:
            st.error(f"❌ {exc}")
        else:
            st.success(f"Clave AES-{bits} generada.")
            st.download_button("Descargar clave", data=key, file_name="secret.key")

# SECURITY: la clave secreta solo sale de la sesión envuelta con RSA.
with tab_wrap:
    secret = st.file_uploader("Clave secreta", key="wrap_secret")
    pub = st.file_uploader("Clave pública RSA (DER o PEM)", key="wrap_pub")
    if secret and pub and st.button("Cifrar clave"):
        try:
            public_key = load_public_key(pub.read())
            wrapped = rsa_wrap_key(secret.read(), public_key)
        except CryptrError as exc:
            st.error(f"❌ {exc}")
        else:
            st.code(
                f"RSA-{public_key.key_size} PKCS#1 v1.5 | máx. {rsa_max_payload(public_key)} bytes\n"
                f"clave envuelta={len(wrapped)} bytes"
            )
            st.download_button("Descargar clave cifrada", data=wrapped, file_name="secret.key.enc")

with tab_unwrap:
    wrapped_file = st.file_uploader("Clave cifrada", key="unwrap_secret")
    priv = st.file_uploader("Clave privada RSA PKCS#8 (DER o PEM)", key="unwrap_priv")
    if wrapped_file and priv and st.button("Descifrar clave"):
        try:
            key = rsa_unwrap_key(wrapped_file.read(), load_private_key(priv.read()))
        except CryptrError as exc:
            st.error(f"❌ {exc}")
        else:
            st.success(f"Clave recuperada ({len(key) * 8} bits).")
            st.download_button("Descargar clave secreta", data=key, file_name="secret.key")
