import json
import sys

import pytest

from localekit.cli.main import build_parser, main


@pytest.fixture(autouse=True)
def no_user_settings(tmp_path, monkeypatch):
    """Keep the user settings file of the machine out of the tests."""
    monkeypatch.setattr(
        "localekit.infra.config.file_io.SETTING_PATH", tmp_path / "no-settings.json"
    )


# ================================================================
# generate
# ================================================================


def test_generate_json_with_explicit_paths(lang_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "dist" / "messages.json"

    code = main(["generate", str(target), "--source", str(lang_dir), "--json"])

    assert code == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert "en.auth" in data


def test_generate_uses_settings_file(lang_dir, tmp_path, monkeypatch):
    settings = tmp_path / "localekit.toml"
    settings.write_text(
        "[general]\n"
        f"source = '{lang_dir.as_posix()}'\n"
        "target = 'public/messages.js'\n"
        "messages = ['validation']\n"
        "[general.output]\n"
        "group_locales = true\n"
        "no_lib = true\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    assert main(["generate"]) == 0

    en_text = (tmp_path / "public" / "messages-en.js").read_text(encoding="utf-8")
    assert "en.validation" in en_text
    assert "en.auth" not in en_text
    assert (tmp_path / "public" / "messages-fr.js").is_file()


def test_generate_missing_source_fails(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "messages.js"

    code = main(["generate", str(target), "--source", str(tmp_path / "missing")])

    assert code == 1
    assert not target.exists()
    assert "doesn't exist" in caplog.text


def test_generate_invalid_message_file_fails(tmp_path, monkeypatch, write_file):
    monkeypatch.chdir(tmp_path)
    write_file(tmp_path / "lang", "en/broken.json", "{ nope")

    assert main(["generate", "out.js", "-s", "lang"]) == 1
    assert not (tmp_path / "out.js").exists()


def test_generate_infinite_php_key_fails(tmp_path, monkeypatch, write_file):
    monkeypatch.chdir(tmp_path)
    write_file(tmp_path / "lang", "en/big.php", "<?php return [1e999 => 'x'];")

    assert main(["generate", "out.js", "-s", "lang"]) == 1
    assert not (tmp_path / "out.js").exists()


def test_generate_explicit_missing_config_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["generate", "--config", str(tmp_path / "nope.toml")]) == 1


def test_generate_invalid_config_fails(tmp_path, monkeypatch):
    (tmp_path / "localekit.toml").write_text("a = [1,,2]", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["generate"]) == 1


def test_generate_flags_are_parsed():
    args = build_parser().parse_args(
        [
            "generate",
            "out.js",
            "-c",
            "--no-sort",
            "--group-locales",
            "--no-lib",
            "--json",
            "--window-object",
        ]
    )
    assert args.compress and args.no_sort and args.group_locales
    assert args.no_lib and args.json and args.window_object


# ================================================================
# init
# ================================================================


def test_init_writes_sample_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main(["init"]) == 0
    assert "[general]" in (tmp_path / "localekit.toml").read_text(encoding="utf-8")


def test_init_refuses_to_overwrite(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text("keep = true", encoding="utf-8")

    assert main(["init", "--path", str(path)]) == 1
    assert path.read_text(encoding="utf-8") == "keep = true"

    assert main(["init", "--path", str(path), "--force"]) == 0
    assert "[general]" in path.read_text(encoding="utf-8")


def test_init_user_writes_json_settings(tmp_path, monkeypatch):
    user_settings = tmp_path / "config" / "settings.json"
    monkeypatch.setattr(sys.modules["localekit.cli.main"], "SETTING_PATH", user_settings)

    assert main(["init", "--user"]) == 0

    data = json.loads(user_settings.read_text(encoding="utf-8"))
    assert data["general"]["source"] == "lang"


def test_init_user_converts_project_settings(tmp_path, monkeypatch):
    user_settings = tmp_path / "config" / "settings.json"
    monkeypatch.setattr(sys.modules["localekit.cli.main"], "SETTING_PATH", user_settings)
    project = tmp_path / "localekit.toml"
    project.write_text("[general]\nsource = 'resources/lang'\n", encoding="utf-8")

    assert main(["init", "--user", "--from", str(project)]) == 0

    data = json.loads(user_settings.read_text(encoding="utf-8"))
    assert data == {"general": {"source": "resources/lang"}}


def test_init_user_missing_source_fails(tmp_path, monkeypatch):
    user_settings = tmp_path / "settings.json"
    monkeypatch.setattr(sys.modules["localekit.cli.main"], "SETTING_PATH", user_settings)

    assert main(["init", "--user", "--from", str(tmp_path / "missing.toml")]) == 1
    assert not user_settings.exists()


def test_init_from_requires_user(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main(["init", "--from", "localekit.toml"]) == 1
    assert not (tmp_path / "localekit.toml").exists()


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
