from pathlib import Path
from unittest.mock import patch

import pytest

from xpmanager import paths
from xpmanager.files import FileState


@pytest.fixture
def data_root(tmp_path):
    with patch("platformdirs.user_data_path", return_value=tmp_path):
        yield tmp_path


def test_data_dir_uses_platform_location(data_root):
    assert paths.data_dir() == data_root


def test_get_log_db_path():
    assert paths.log_db_path() == paths.data_dir().joinpath("XPManager/data/xpm-log.db")


def test_get_encrypted_db_path():
    assert paths.encrypted_db_path() == paths.data_dir().joinpath(
        "XPManager/data/passwords.db.x"
    )


def test_get_decrypted_db_path():
    assert paths.decrypted_db_path() == paths.data_dir().joinpath(
        "XPManager/data/passwords.db"
    )


def test_db_state_matches_files_on_disk():
    if paths.encrypted_db_path().exists():
        expected = FileState.ENCRYPTED
    elif paths.decrypted_db_path().exists():
        expected = FileState.DECRYPTED
    else:
        expected = FileState.NOT_FOUND
    assert paths.db_state() is expected


def test_paths_under_patched_root(data_root):
    assert paths.log_db_path() == data_root / "XPManager" / "data" / "xpm-log.db"
    assert paths.encrypted_db_path().name == "passwords.db.x"
    assert paths.decrypted_db_path().parent == data_root / "XPManager" / "data"


def test_db_state_not_found(data_root):
    assert paths.db_state() is FileState.NOT_FOUND


def test_db_state_decrypted(data_root):
    db = paths.decrypted_db_path()
    db.parent.mkdir(parents=True)
    db.touch()
    assert paths.db_state() is FileState.DECRYPTED


def test_db_state_encrypted_takes_precedence(data_root):
    data = data_root / "XPManager" / "data"
    data.mkdir(parents=True)
    (data / "passwords.db").touch()
    (data / "passwords.db.x").touch()
    assert paths.db_state() is FileState.ENCRYPTED


def test_warning_printed_for_plain_database(data_root, capsys):
    db = paths.decrypted_db_path()
    db.parent.mkdir(parents=True)
    db.touch()
    paths.warning_encrypt_database()
    out = capsys.readouterr().out
    assert "password manager database found NOT encrypted!!" in out
    assert "password-manager encrypt" in out


def test_no_warning_for_encrypted_database(data_root, capsys):
    db = paths.encrypted_db_path()
    db.parent.mkdir(parents=True)
    db.touch()
    paths.warning_encrypt_database()
    assert capsys.readouterr().out == ""


def test_no_warning_without_database(data_root, capsys):
    paths.warning_encrypt_database()
    assert capsys.readouterr().out == ""
    assert not Path(data_root / "XPManager").exists()