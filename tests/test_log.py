import time

import pytest

from xpmanager.errors import ExitCode, XpmError
from xpmanager.log import Logger


def test_end_reports_milliseconds():
    logger = Logger("timer")
    result = logger.end()
    assert result.endswith("ms")
    elapsed = int(result[:-2])
    assert 0 <= elapsed < 1000


def test_start_resets_timer():
    logger = Logger("timer")
    time.sleep(0.05)
    before = int(logger.end()[:-2])
    logger.start()
    after = int(logger.end()[:-2])
    assert before >= 40
    assert after < before


def test_info_format(capsys):
    Logger("encode").info("string encoded successfully.")
    out = capsys.readouterr().out
    prefix = "[INFO] - [encode] string encoded successfully. - "
    assert out.startswith(prefix)
    assert out.endswith("ms\n")
    assert int(out[len(prefix):-3]) >= 0


def test_warning_format(capsys):
    Logger("confirm").warning("This process requires confirmation!")
    out = capsys.readouterr().out
    assert out == "[WARNING] - This process requires confirmation!\n"


def test_error_prints_and_raises(capsys):
    logger = Logger("decode")
    with pytest.raises(XpmError) as info:
        logger.error("constant must be string!", ExitCode.INPUT)
    assert info.value.code is ExitCode.INPUT
    assert info.value.message == "constant must be string!"
    err = capsys.readouterr().err
    assert err == "[ERROR] - [decode] constant must be string!\n"


def test_output_uncoloured_when_not_a_terminal(capsys):
    Logger("plain").warning("note")
    assert "\x1b[" not in capsys.readouterr().out