# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Cryptr", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Cryptr")
st.write(
    "Cifra archivos con AES-CBC (IV aleatorio de 128 bits) y comparte la clave "
    "secreta envolviéndola con una clave pública RSA."
)
st.markdown(
    "1. **Claves**: genera una clave secreta y cifrala para el destinatario.\n"
    "2. **Archivos**: cifra o descifra archivos con la clave secreta."
)
st.warning("AES-CBC no detecta manipulaciones: un archivo alterado puede descifrarse sin error.")
