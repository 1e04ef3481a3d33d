import json

from matrix_contacts.config.loader import convert_keys, get_config_path, load_config


def test_convert_keys_camel_to_snake():
    data = {"admin": {"extraArgs": ["-c"], "command": "synadm"}, "logging": {"logLevel": "INFO"}}
    converted = convert_keys(data)
    assert converted["admin"]["extra_args"] == ["-c"]
    assert converted["logging"]["log_level"] == "INFO"


def test_defaults_when_no_config_file():
    config = load_config()
    assert config.admin.command == "synadm"
    assert config.admin.args == []
    assert config.admin.timeout is None
    assert config.logging.level == "WARNING"


def test_default_config_path_follows_home(tmp_path, monkeypatch):
    monkeypatch.setenv("MATRIX_CONTACTS_HOME", str(tmp_path))
    assert get_config_path() == tmp_path / "config.json"


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "admin": {"command": "/usr/local/bin/synadm", "args": ["-c", "/etc/synadm.yaml"], "timeout": 30},
        "logging": {"level": "INFO", "file": str(tmp_path / "contacts.log")},
    }))
    config = load_config(path)
    assert config.admin.command == "/usr/local/bin/synadm"
    assert config.admin.args == ["-c", "/etc/synadm.yaml"]
    assert config.admin.timeout == 30
    assert config.logging.file == str(tmp_path / "contacts.log")


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("MATRIX_CONTACTS_ADMIN__COMMAND", "synadm-dev")
    config = load_config()
    assert config.admin.command == "synadm-dev"


def test_invalid_config_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = load_config(path)
    assert config.admin.command == "synadm"
