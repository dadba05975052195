# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos para las cinco operaciones de Cryptr.
# --------------------------------------------------------------
"""Despachador de comandos que traduce los errores tipados a códigos de salida."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from cryptr import config, services
from cryptr.errors import CryptrError, StorageError

logger = logging.getLogger("cryptr")

EXIT_OK = 0
EXIT_CRYPTO = 1
EXIT_USAGE = 2
EXIT_IO = 3


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser con un subcomando por operación."""

    parser = argparse.ArgumentParser(
        prog="cryptr",
        description=(
            "Cryptr: cifra archivos con AES-CBC y comparte la clave secreta "
            "envolviéndola con RSA."
        ),
        epilog=(
            "Ejemplos:\n"
            "  cryptr generatekey secret.key\n"
            "  cryptr encryptfile notas.txt secret.key notas.enc\n"
            "  cryptr encryptkey secret.key public.der secret.key.enc\n"
            "  cryptr decryptkey secret.key.enc private.der secret.key\n"
            "  cryptr decryptfile notas.enc secret.key notas.txt"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Activa la salida de depuración")
    sub = parser.add_subparsers(dest="command", metavar="<comando>", required=True)

    gen = sub.add_parser("generatekey", help="Genera una clave secreta AES")
    gen.add_argument("key_file", help="Archivo de salida para la clave")
    gen.add_argument("--bits", type=int, default=None, help="Tamaño de la clave: 128, 192 o 256")
    gen.set_defaults(handler=lambda a: services.generate_key_file(a.key_file, a.bits))

    enc = sub.add_parser("encryptfile", help="Cifra un archivo con una clave secreta")
    enc.add_argument("input_file", help="Archivo a cifrar")
    enc.add_argument("key_file", help="Archivo con la clave secreta")
    enc.add_argument("output_file", help="Archivo cifrado de salida")
    enc.set_defaults(handler=lambda a: services.encrypt_file(a.input_file, a.key_file, a.output_file))

    dec = sub.add_parser("decryptfile", help="Descifra un archivo con una clave secreta")
    dec.add_argument("input_file", help="Archivo a descifrar")
    dec.add_argument("key_file", help="Archivo con la clave secreta")
    dec.add_argument("output_file", help="Archivo descifrado de salida")
    dec.set_defaults(handler=lambda a: services.decrypt_file(a.input_file, a.key_file, a.output_file))

    wrap = sub.add_parser("encryptkey", help="Cifra una clave secreta con una clave pública")
    wrap.add_argument("key_file", help="Clave secreta a cifrar")
    wrap.add_argument("public_key_file", help="Clave pública RSA (DER o PEM)")
    wrap.add_argument("output_file", help="Archivo de salida con la clave cifrada")
    wrap.set_defaults(
        handler=lambda a: services.encrypt_key_file(a.key_file, a.public_key_file, a.output_file)
    )

    unwrap = sub.add_parser("decryptkey", help="Descifra una clave secreta con una clave privada")
    unwrap.add_argument("encrypted_key_file", help="Clave cifrada")
    unwrap.add_argument("private_key_file", help="Clave privada RSA PKCS#8 (DER o PEM)")
    unwrap.add_argument("output_file", help="Archivo de salida con la clave secreta")
    unwrap.set_defaults(
        handler=lambda a: services.decrypt_key_file(a.encrypted_key_file, a.private_key_file, a.output_file)
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Configura el logging raíz según ``CRYPTR_LOG_LEVEL`` o ``--verbose``."""

    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format=config.LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Ejecuta el comando indicado y devuelve el código de salida.

    Args:
        argv (Optional[List[str]]): Argumentos sin el nombre del programa.

    Returns:
        int: 0 si la operación termina, 1 ante fallos criptográficos y 3
        ante errores de entrada/salida. Los errores de uso salen con 2.

    """

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_USAGE

    configure_logging(args.verbose)
    try:
        written = args.handler(args)
    except StorageError as exc:
        logger.error("Error: %s no se ha completado [%s]", args.command, exc)
        return EXIT_IO
    except CryptrError as exc:
        logger.error("Error: %s no se ha completado [%s: %s]", args.command, type(exc).__name__, exc)
        return EXIT_CRYPTO

    logger.info("%s completado: %d bytes escritos", args.command, written)
    return EXIT_OK
