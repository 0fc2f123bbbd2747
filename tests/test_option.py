import os

import pytest

from sipflow.keybinding import Action, KeyBindings
from sipflow.option import (
    DEFAULT_COLUMNS,
    DEFAULT_FILTER_METHODS,
    ConfigOption,
    Options,
    OptionType,
)
from sipflow.setting import SettingId, Settings


@pytest.fixture
def options():
    settings = Settings()
    return Options(settings, KeyBindings(settings))


def write_rc(tmp_path, text, name="sngreprc"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_init_without_config_sets_defaults(options):
    options.init(no_config=True)
    assert options.get("cl.column0") == "index"
    assert options.get("cl.column7") == "state"
    assert [options.get(f"cl.column{i}") for i in range(8)] == list(DEFAULT_COLUMNS)
    assert options.settings.get(SettingId.FILTER_METHODS) == DEFAULT_FILTER_METHODS
    assert options.settings.get(SettingId.SAVEPATH) == os.getcwd()


def test_init_reads_rcfile_from_environment(options, tmp_path, monkeypatch):
    path = write_rc(tmp_path, "set cl.column0 callid\nset cl.scrollstep 8\n")
    monkeypatch.setenv("SNGREPRC", path)
    options.init(no_config=False)
    assert options.get("cl.column0") == "callid"
    assert options.settings.get(SettingId.CL_SCROLLSTEP) == "8"


def test_init_with_no_config_ignores_rcfile(options, tmp_path, monkeypatch):
    path = write_rc(tmp_path, "set cl.column0 callid\n")
    monkeypatch.setenv("SNGREPRC", path)
    options.init(no_config=True)
    assert options.get("cl.column0") == "index"


def test_read_missing_file_raises(options, tmp_path):
    with pytest.raises(OSError):
        options.read(str(tmp_path / "absent"))


def test_read_set_routes_known_settings(options, tmp_path):
    path = write_rc(tmp_path, "set capture.device eth0\nset my.option some value\n")
    options.read(path)
    assert options.settings.get(SettingId.CAPTURE_DEVICE) == "eth0"
    assert options.get("capture.device") is None
    assert options.get("my.option") == "some value"


def test_read_skips_comments_and_short_lines(options, tmp_path):
    path = write_rc(tmp_path, "# set cl.column0 callid\n\nset onlyname\nSET cl.column1 from\n")
    options.read(path)
    assert options.get("cl.column0") is None
    assert options.get("onlyname") is None
    assert options.get("cl.column1") == "from"


def test_read_alias_and_bindings(options, tmp_path):
    path = write_rc(
        tmp_path,
        "alias 10.0.0.1 proxy\nbind up x\nunbind up k\n",
    )
    options.read(path)
    assert options.alias("10.0.0.1") == "proxy"
    keys = options.bindings.binding(Action.UP).keys
    assert ord("x") in keys
    assert ord("k") not in keys


def test_read_ignores_unknown_directive_kind(options, tmp_path):
    path = write_rc(tmp_path, "frobnicate cl.column0 callid\n")
    options.read(path)
    assert list(options) == []


def test_get_is_case_insensitive(options):
    options.set("Cl.Column0", "index")
    assert options.get("cl.column0") == "index"
    assert options.get("CL.COLUMN0") == "index"


def test_set_replaces_existing_value(options):
    options.set("cl.column0", "index")
    options.set("CL.column0", "method")
    assert options.get("cl.column0") == "method"
    assert len(list(options)) == 1


def test_set_ignores_missing_arguments(options):
    options.set(None, "value")
    options.set("name", None)
    assert list(options) == []


def test_set_creates_column_option(options):
    options.set("cl.column3", "sipto")
    assert list(options) == [ConfigOption(OptionType.COLUMN, "cl.column3", "sipto")]


def test_get_int(options):
    options.set("cl.width", "42px")
    assert options.get_int("cl.width") == 42
    assert options.get_int("missing") == -1


def test_alias_returns_address_when_unknown(options):
    assert options.alias("192.168.1.1") == "192.168.1.1"
    assert options.alias(None) is None


def test_alias_requires_exact_match(options):
    options.set_alias("10.0.0.1", "proxy")
    assert options.alias("10.0.0.10") == "10.0.0.10"


def test_alias_for_port(options):
    options.set_alias("10.0.0.1:5060", "sip-proxy")
    options.set_alias("10.0.0.2", "gateway")
    assert options.alias_for_port("10.0.0.1", 5060) == "sip-proxy"
    assert options.alias_for_port("10.0.0.1", 5080) == "10.0.0.1"
    assert options.alias_for_port("10.0.0.2", 1234) == "gateway"
    assert options.alias_for_port(None, 5060) is None


def test_column_options_are_not_aliases(options):
    options.set("10.0.0.1", "not-an-alias")
    assert options.alias("10.0.0.1") == "10.0.0.1"