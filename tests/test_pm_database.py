import io
import secrets
import sys
from pathlib import Path

import platformdirs
import pytest

from xpmanager.crypto import decrypt_file, generate_key
from xpmanager.errors import ExitCode, XpmError
from xpmanager.paths import decrypted_db_path, encrypted_db_path
from xpmanager.pm_database import (
    PMDatabaseEncryption,
    decrypt_database,
    encrypt_database,
)

DB_CONTENT = b"SQLite format 3\x00" + b"rows" * 1000


@pytest.fixture
def data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(platformdirs, "user_data_path", lambda *a, **k: tmp_path)
    return tmp_path


def _feed(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def _plain_db() -> Path:
    path = decrypted_db_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(DB_CONTENT)
    return path


def test_default_paths(data_home: Path) -> None:
    database = PMDatabaseEncryption()
    assert database.en_path == data_home / "XPManager" / "data" / "passwords.db.x"
    assert database.de_path == data_home / "XPManager" / "data" / "passwords.db"
    assert database.key == ""


def test_set_key_reads_from_user(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _feed(monkeypatch, "  typed-key  \n")
    database = PMDatabaseEncryption(tmp_path / "db.x", tmp_path / "db")
    database.set_key(None)
    assert database.key == "typed-key"
    database.set_key("placeholder")
    assert database.key == "placeholder"


def test_encrypt_and_decrypt_round_trip(tmp_path: Path) -> None:
    de_path = tmp_path / "db"
    en_path = tmp_path / "db.x"
    de_path.write_bytes(DB_CONTENT)
    key = generate_key()

    database = PMDatabaseEncryption(en_path, de_path)
    database.set_key(key)
    database.encrypt()
    assert en_path.exists()
    assert not de_path.exists()

    other = PMDatabaseEncryption(en_path, de_path)
    other.set_key(key)
    other.decrypt()
    assert de_path.read_bytes() == DB_CONTENT
    assert not en_path.exists()


def test_decrypt_prompts_when_no_key(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    de_path = tmp_path / "db"
    en_path = tmp_path / "db.x"
    de_path.write_bytes(DB_CONTENT)
    key = generate_key()
    database = PMDatabaseEncryption(en_path, de_path)
    database.set_key(key)
    database.encrypt()

    _feed(monkeypatch, key + "\n")
    fresh = PMDatabaseEncryption(en_path, de_path)
    fresh.decrypt()
    assert fresh.key == key
    assert de_path.read_bytes() == DB_CONTENT


def test_encrypt_database_missing(data_home: Path) -> None:
    with pytest.raises(XpmError) as info:
        encrypt_database(False)
    assert info.value.code is ExitCode.PM_DATABASE_NOT_FOUND


def test_encrypt_database_generated_key(data_home: Path) -> None:
    plain = _plain_db()
    key = encrypt_database(False)
    assert not plain.exists()
    assert encrypted_db_path().exists()
    decrypt_file(encrypted_db_path(), key)
    assert plain.read_bytes() == DB_CONTENT


def test_encrypt_database_custom_key(data_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    key = generate_key()
    _plain_db()
    _feed(monkeypatch, key + "\n")
    assert encrypt_database(True) == key
    assert encrypted_db_path().exists()


def test_encrypt_database_already_encrypted(data_home: Path) -> None:
    _plain_db()
    encrypt_database(False)
    with pytest.raises(XpmError) as info:
        encrypt_database(False)
    assert info.value.code is ExitCode.FILE_ALREADY_ENCRYPTED


def test_decrypt_database_missing(data_home: Path) -> None:
    with pytest.raises(XpmError) as info:
        decrypt_database()
    assert info.value.code is ExitCode.PM_DATABASE_NOT_FOUND


def test_decrypt_database_not_encrypted(data_home: Path) -> None:
    _plain_db()
    with pytest.raises(XpmError) as info:
        decrypt_database()
    assert info.value.code is ExitCode.FILE_NOT_ENCRYPTED


def test_decrypt_database_wrong_confirmation(
    data_home: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _plain_db()
    encrypt_database(False)
    _feed(monkeypatch, "wrong\n")
    with pytest.raises(XpmError) as info:
        decrypt_database()
    assert info.value.code is ExitCode.CONFIRMATION_NOT_MATCH
    assert encrypted_db_path().exists()


def test_decrypt_database_success(data_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _plain_db()
    key = encrypt_database(False)
    monkeypatch.setattr(secrets, "choice", lambda seq: seq[0])
    _feed(monkeypatch, f"111111\n{key}\n")
    decrypt_database()
    assert decrypted_db_path().read_bytes() == DB_CONTENT
    assert not encrypted_db_path().exists()