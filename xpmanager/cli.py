"""Command line interface: argument parsing and command dispatch."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Callable, Sequence

from . import codec
from .crypto import decrypt_file, decrypt_xpmv1_file, encrypt_file
from .dircrypt import decrypt_dir, encrypt_dir
from .display import display_decode, display_encode, display_key
from .errors import ExitCode, XpmError
from .files import FileState, get_file_state, wipe_delete
from .log import Logger
from .paths import warning_encrypt_database
from .pm_database import decrypt_database, encrypt_database
from .utilities import confirm, prompt

VERSION = "2.3.0"

_Handler = Callable[[argparse.Namespace], None]


def _parse_u16(text: str) -> int | None:
    if not re.fullmatch(r"\+?\d+", text):
        return None
    value = int(text)
    return value if value <= 0xFFFF else None


def _read_constant(logger: Logger) -> int:
    constant_text = prompt("Enter the constant number: ")
    logger.start()
    constant = _parse_u16(constant_text)
    if constant is None:
        logger.error("constant must be string!", ExitCode.INPUT)
    if not 1000 <= constant <= 9999:
        logger.error(
            "constant must be in range (1000 <= x <= 9999)!", ExitCode.INPUT
        )
    return constant


# password-manager


def _pm_encrypt(args: argparse.Namespace) -> None:
    encrypt_database(args.key)


def _pm_decrypt(args: argparse.Namespace) -> None:
    decrypt_database()


# encryption-manager


def _encrypt_file(args: argparse.Namespace) -> None:
    logger = Logger("encrypt-file")
    path = args.path
    if get_file_state(path) is FileState.NOT_FOUND:
        logger.error("file NOT found!", ExitCode.FILE_NOT_FOUND)
    key = ""
    if args.key:
        key = prompt("Enter your key: ")
        logger.start()
    logger.info("encryption in progress....")
    key = encrypt_file(path, key)
    if not args.key:
        display_key(key)
        logger.warning("store the key somewhere safe!")
        logger.warning("if you lose the key, you will not be able to recover the data!")
    logger.info("file encrypted successfully.")
    if args.delete:
        logger.start()
        wipe_delete(path)
        logger.info("file wiped and deleted successfully.")


def _decrypt_file(args: argparse.Namespace) -> None:
    logger = Logger("decrypt-file")
    path = args.path
    state = get_file_state(path)
    if state is FileState.NOT_FOUND:
        logger.error("file NOT found!", ExitCode.FILE_NOT_FOUND)
    if state is FileState.DECRYPTED:
        logger.error("file NOT encrpted!", ExitCode.FILE_NOT_ENCRYPTED)
    key = prompt("Enter your key: ")
    logger.start()
    logger.info("decryption in progress....")
    if args.xpmv1:
        logger.warning(
            "do not use --xpmv1 with the XPManager v2.0 encryption it will break your file!!"
        )
        logger.warning("XPManager v1.0 can not handle large files!!")
        decrypt_xpmv1_file(path, key)
    else:
        decrypt_file(path, key)
    logger.info("file decrypted successfully.")
    if args.delete:
        logger.start()
        wipe_delete(path)
        logger.info("file wiped and deleted successfully.")


def _encrypt_dir(args: argparse.Namespace) -> None:
    logger = Logger("encrypt-dir")
    path = args.path
    key = ""
    if args.key:
        key = prompt("Enter your key: ")
        logger.start()
    if not Path(path).exists():
        logger.error("can NOT find the directory!", ExitCode.DIR_NOT_FOUND)
    if args.delete:
        logger.warning(
            f"you are about to encrypt and delete all files in this directory '{path}'"
        )
    else:
        logger.warning(f"you are about to encrypt all files in this directory '{path}'")
    confirm()
    logger.start()
    key = encrypt_dir(path, key, args.delete, not args.no_threads)
    display_key(key)


def _decrypt_dir(args: argparse.Namespace) -> None:
    logger = Logger("decrypt-dir")
    path = args.path
    key = prompt("Enter your key: ")
    logger.start()
    if not Path(path).exists():
        logger.error("can NOT find the directory!", ExitCode.DIR_NOT_FOUND)
    if args.delete:
        logger.warning(
            "you are about to decrypt and delete all encryption files "
            f"in this directory '{path}'"
        )
        confirm()
        logger.start()
    decrypt_dir(path, key, args.delete, args.xpmv1, not args.no_threads)
    display_key(key)


def _encode(args: argparse.Namespace) -> None:
    logger = Logger("encode")
    text = prompt("Enter the string: ")
    logger.start()
    if args.xpmv1:
        result = codec.encode_xpmv1(text, _read_constant(logger))
    elif args.bin:
        result = codec.encode_bin(text)
    elif args.hex_hash:
        result = codec.hex_hash(text)
    else:
        result = codec.encode_hex(text)
    display_encode(result)
    logger.info("string encoded successfully.")


def _decode(args: argparse.Namespace) -> None:
    logger = Logger("decode")
    text = prompt("Enter the string: ")
    logger.start()
    try:
        if args.xpmv1:
            result = codec.decode_xpmv1(text, _read_constant(logger))
        elif args.bin:
            result = codec.decode_bin(text)
        else:
            result = codec.decode_hex(text)
    except (ValueError, OverflowError):
        logger.error("invalid encoded string!", ExitCode.INPUT)
    display_decode(result)
    logger.info("string decoded successfully.")


def _command(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str,
    handler: _Handler,
    aliases: Sequence[str] = (),
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        name, aliases=list(aliases), help=help_text, description=help_text
    )
    parser.set_defaults(handler=handler)
    return parser


def _add_password_manager(subparsers: argparse._SubParsersAction) -> None:
    text = "Create, save, update, delete, and manage passwords."
    group = subparsers.add_parser(
        "password-manager", aliases=["pm"], help=text, description=text
    )
    group.set_defaults(hint="password-manager --help")
    commands = group.add_subparsers(dest="subcommand", metavar="COMMAND")

    encrypt = _command(
        commands, "encrypt", "Encrypt the password manager database.", _pm_encrypt, ["en"]
    )
    encrypt.add_argument("--key", action="store_true", help="Use custom key.")

    _command(
        commands, "decrypt", "Decrypt the password manager database.", _pm_decrypt, ["de"]
    )


def _add_encryption_manager(subparsers: argparse._SubParsersAction) -> None:
    text = "Encrypt/Decrypt file and folder and encode/decode strings."
    group = subparsers.add_parser(
        "encryption-manager", aliases=["em"], help=text, description=text
    )
    group.set_defaults(hint="encryption-manager --help")
    commands = group.add_subparsers(dest="subcommand", metavar="COMMAND")

    enf = _command(commands, "encrypt-file", "Encrypt file.", _encrypt_file, ["enf"])
    enf.add_argument("path", metavar="PATH", help="File path.")
    enf.add_argument("--key", action="store_true", help="Use custom key.")
    enf.add_argument("--delete", action="store_true", help="Delete the origin file.")

    def_ = _command(commands, "decrypt-file", "Decrypt file.", _decrypt_file, ["def"])
    def_.add_argument("path", metavar="PATH", help="File path.")
    def_.add_argument("--delete", action="store_true", help="Delete the origin file.")
    def_.add_argument("--xpmv1", action="store_true", help="Decrypt XPManager v1.0 file.")

    end = _command(commands, "encrypt-dir", "Encrypt directory.", _encrypt_dir, ["end"])
    end.add_argument("path", metavar="PATH", help="Directory path.")
    end.add_argument(
        "--delete", action="store_true", help="Delete the origin files in the directory."
    )
    end.add_argument(
        "--no-threads",
        action="store_true",
        help="Encrypt directory using the main thread only.",
    )
    end.add_argument("--key", action="store_true", help="Use custom key.")

    ded = _command(commands, "decrypt-dir", "Decrypt directory.", _decrypt_dir, ["ded"])
    ded.add_argument("path", metavar="PATH", help="Directory path.")
    ded.add_argument(
        "--delete", action="store_true", help="Delete the origin files in the directory."
    )
    ded.add_argument(
        "--no-threads",
        action="store_true",
        help="Decrypt directory using the main thread only.",
    )
    ded.add_argument(
        "--xpmv1", action="store_true", help="Decrypt XPManager v1.0 directory."
    )

    enc = _command(
        commands, "encode", "Encode strings using different techniques.", _encode, ["enc"]
    )
    enc.add_argument("--xpmv1", action="store_true", help="XPManager v1.0 key technique.")
    enc.add_argument("--hex", action="store_true", help="Hexadecimal.")
    enc.add_argument("--hex-hash", action="store_true", help="Hash using hexadecimal.")
    enc.add_argument("--bin", action="store_true", help="Binary.")

    dec = _command(
        commands, "decode", "Decode strings using different techniques.", _decode, ["dec"]
    )
    dec.add_argument("--xpmv1", action="store_true", help="XPManager v1.0 key technique.")
    dec.add_argument("--hex", action="store_true", help="Hexadecimal.")
    dec.add_argument("--bin", action="store_true", help="Binary.")


def build_parser() -> argparse.ArgumentParser:
    """The ``xpm`` argument parser with all its subcommands."""
    parser = argparse.ArgumentParser(
        prog="xpm",
        description="Password manager, File/Folder encryptor, Strings encoder.",
    )
    parser.add_argument("--version", action="version", version=f"xpm {VERSION}")
    parser.set_defaults(handler=None, hint="--help")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    _add_password_manager(subparsers)
    _add_encryption_manager(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        if args.handler is None:
            Logger("matches").error(f"Run with '{args.hint}'", ExitCode.MISSING_ARG)
        args.handler(args)
    except XpmError as exc:
        return int(exc.code)
    warning_encrypt_database()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())