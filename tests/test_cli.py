# tests/test_cli.py

from unittest.mock import patch

import pytest

from backupbuddy.parser import get_arguments
from backupbuddy.security import EncryptionTool
from backupbuddy.globals import Globals


@patch("sys.argv", ["prog", "perform", "--trigger", "nightly,photos"])
def test_minimal_perform_arguments():
    args = get_arguments()
    assert args.get("command") == "perform"
    assert args.get("triggers") == "nightly,photos"
    assert args.get("debug") == False
    assert args["overrides"] == {"config_source": None, "data_root": None, "log_root": None, "tmp_root": None}


def test_perform_path_overrides():
    args = get_arguments(["perform", "-t", "nightly", "--config-file", "jobs.yaml",
                          "--data-path", "/tmp/x", "--log-path", "/tmp/log", "--tmp-path", "/tmp/tmp"])
    assert args["overrides"] == {
        "config_source": "jobs.yaml",
        "data_root": "/tmp/x",
        "log_root": "/tmp/log",
        "tmp_root": "/tmp/tmp",
    }


def test_perform_requires_trigger():
    with pytest.raises(SystemExit):
        get_arguments(["perform"])


def test_command_is_required():
    with pytest.raises(SystemExit):
        get_arguments([])


def test_decrypt_arguments():
    args = get_arguments(["decrypt", "--encryptor", "openssl", "--in", "a.enc", "--out", "a.tar",
                          "--password-file", "pw", "--base64", "--no-salt"])
    assert args["encryptor"] is EncryptionTool.OPENSSL
    assert args["in_file"] == "a.enc"
    assert args["out_file"] == "a.tar"
    assert args["password_file"] == "pw"
    assert args["base64"] == True
    assert args["salt"] == False


def test_decrypt_rejects_unknown_encryptor():
    with pytest.raises(SystemExit):
        get_arguments(["decrypt", "--encryptor", "rot13", "--in", "a", "--out", "b"])


def test_generate_arguments_default_config_file():
    args = get_arguments(["generate", "-t", " nightly , photos"])
    assert args["triggers"] == ["nightly", "photos"]
    assert args["config_file"] == Globals.DEFAULT_CONFIG_FILE


def test_debug_flag():
    args = get_arguments(["--debug", "perform", "-t", "nightly"])
    assert args["debug"] == True
