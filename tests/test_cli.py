import json

import pytest

from bytekit.cli import main


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def test_b64encode(capsys, isolated_config):
    code, out, _ = run(capsys, "b64encode", "Hello, Base64!")
    assert code == 0
    assert out.strip() == "SGVsbG8sIEJhc2U2NCE="


def test_b64decode(capsys, isolated_config):
    code, out, _ = run(capsys, "b64decode", "SGVsbG8sIEJhc2U2NCE=")
    assert code == 0
    assert out.strip() == "Hello, Base64!"


@pytest.mark.parametrize("text", ["abc", "SGV sbG8"])
def test_b64decode_error_exit_code(capsys, isolated_config, text):
    code, out, err = run(capsys, "b64decode", text)
    assert code == 1
    assert out == ""
    assert err.startswith("Error:")


def test_rc4_encrypt_prints_hex(capsys, isolated_config):
    code, out, _ = run(capsys, "rc4", "--key", "Key", "Plaintext")
    assert code == 0
    assert out.strip() == "BBF316E8D940AF0AD3"


def test_rc4_decrypt_hex(capsys, isolated_config):
    code, out, _ = run(capsys, "rc4", "--key", "Key", "--hex", "BBF316E8D940AF0AD3")
    assert code == 0
    assert out.strip() == "Plaintext"


def test_rc4_bad_hex(capsys, isolated_config):
    code, _, err = run(capsys, "rc4", "--key", "Key", "--hex", "zz")
    assert code == 1
    assert "Invalid hex input" in err


def test_rc4_empty_key(capsys, isolated_config):
    code, _, err = run(capsys, "rc4", "--key", "", "Plaintext")
    assert code == 1
    assert "Key must not be empty" in err


def test_demo(capsys, isolated_config):
    code, out, _ = run(capsys, "demo")
    lines = out.splitlines()

    assert code == 0
    assert lines[0] == "Encoded: SGVsbG8sIEJhc2U2NCE="
    assert lines[1] == "Decoded: Hello, Base64!"
    assert lines[2] == "Original data: Hello, RC4!"
    assert lines[3].startswith("Encrypted data: ")
    assert len(lines[3].removeprefix("Encrypted data: ").split()) == 11
    assert lines[4] == "Decrypted data: Hello, RC4!"


def test_config_file_selects_urlsafe_alphabet(capsys, isolated_config):
    cfg = isolated_config / "custom.json"
    cfg.write_text(json.dumps({"base64": {"alphabet": "urlsafe"}}), encoding="utf-8")

    code, out, _ = run(capsys, "--config", str(cfg), "b64encode", "ÿþ")
    assert code == 0
    assert out.strip() == "w7_Dvg=="


def test_local_settings_file_is_picked_up(capsys, isolated_config):
    (isolated_config / "settings.toml").write_text(
        "[base64]\npad_char = '.'\n", encoding="utf-8"
    )
    code, out, _ = run(capsys, "b64encode", "f")
    assert code == 0
    assert out.strip() == "Zg.."


def test_missing_explicit_config(capsys, isolated_config):
    code, _, err = run(capsys, "--config", "missing.toml", "b64encode", "x")
    assert code == 2
    assert "Configuration error" in err


def test_invalid_alphabet_in_config(capsys, isolated_config):
    (isolated_config / "settings.toml").write_text(
        "[base64]\nalphabet = 'ABC'\n", encoding="utf-8"
    )
    code, _, err = run(capsys, "b64encode", "x")
    assert code == 2
    assert "Configuration error" in err


def test_invalid_log_level(capsys, isolated_config):
    code, _, err = run(capsys, "--log-level", "LOUD", "demo")
    assert code == 2
    assert "Unknown log level" in err


def test_rc4_requires_input(isolated_config):
    with pytest.raises(SystemExit):
        main(["rc4", "--key", "Key"])


@pytest.mark.parametrize(
    "settings",
    [
        "[general]\ndebug = 'yes'\n",
        "[general.debug]\nlog_level = 10\n",
        "[general.debug]\nlog_dir = 1\n",
        "[rc4]\npersist_cursors = 'false'\n",
        "[base64]\npad_char = ''\n",
    ],
)
def test_bad_config_value_types_exit_cleanly(capsys, isolated_config, settings):
    (isolated_config / "settings.toml").write_text(settings, encoding="utf-8")
    code, _, err = run(capsys, "demo")
    assert code == 2
    assert err.startswith("Configuration error:")


# ---------------------------------------------------------------------------
# config subcommands
# ---------------------------------------------------------------------------


def test_config_init_writes_sample(capsys, isolated_config):
    code, out, _ = run(capsys, "config", "init")
    target = isolated_config / "settings.toml"

    assert code == 0
    assert str(target) in out
    assert "[rc4]" in target.read_text(encoding="utf-8")

    # the written sample is picked up as the local settings file
    code, out, _ = run(capsys, "b64encode", "Hello, Base64!")
    assert code == 0
    assert out.strip() == "SGVsbG8sIEJhc2U2NCE="


def test_config_init_refuses_overwrite(capsys, isolated_config):
    target = isolated_config / "settings.toml"
    target.write_text("[rc4]\n", encoding="utf-8")

    code, _, err = run(capsys, "config", "init")
    assert code == 1
    assert "Refusing to overwrite" in err
    assert target.read_text(encoding="utf-8") == "[rc4]\n"

    code, _, _ = run(capsys, "config", "init", "--force")
    assert code == 0
    assert "[base64]" in target.read_text(encoding="utf-8")


def test_config_init_ignores_broken_settings(capsys, isolated_config):
    (isolated_config / "settings.json").write_text("{ broken", encoding="utf-8")
    code, _, _ = run(capsys, "config", "init")
    assert code == 0


def test_config_import_saves_user_settings(
    capsys, isolated_config, tmp_path, monkeypatch
):
    user_settings = tmp_path / "user" / "settings.json"
    monkeypatch.setattr("bytekit.cli.SETTING_PATH", user_settings)
    src = isolated_config / "mine.toml"
    src.write_text("[base64]\nalphabet = 'urlsafe'\n", encoding="utf-8")

    code, out, _ = run(capsys, "config", "import", str(src))
    assert code == 0
    assert str(user_settings) in out
    assert json.loads(user_settings.read_text(encoding="utf-8")) == {
        "base64": {"alphabet": "urlsafe"}
    }


def test_config_import_missing_source(capsys, isolated_config, tmp_path, monkeypatch):
    monkeypatch.setattr("bytekit.cli.SETTING_PATH", tmp_path / "user" / "s.json")
    code, _, err = run(capsys, "config", "import", "nope.toml")
    assert code == 2
    assert "Configuration error" in err
