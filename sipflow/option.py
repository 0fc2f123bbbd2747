"""User options, address aliases and configuration resource files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import IntEnum

from sipflow.keybinding import KeyBindings, key_from_str
from sipflow.setting import MAX_SETTING_LEN, SettingId, Settings

SYSTEM_RCFILES = ("/etc/sngreprc", "/usr/local/etc/sngreprc")
USER_RCFILE = ".sngreprc"
RCFILE_ENV = "SNGREPRC"

DEFAULT_FILTER_METHODS = (
    "REGISTER,INVITE,SUBSCRIBE,NOTIFY,OPTIONS,PUBLISH,MESSAGE,INFO,REFER,UPDATE,KDMQ"
)
DEFAULT_COLUMNS = ("index", "method", "sipfrom", "sipto", "msgcnt", "src", "dst", "state")

_TYPE_FIELD = re.compile(r"\s*(\S{1,19})")
_NAME_FIELD = re.compile(r"\s*(\S{1,49})")
_VALUE_FIELD = re.compile(r"\s*([^\t\n]{1,499})")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class OptionType(IntEnum):
    """Kind of a stored option."""

    COLUMN = 0
    ALIAS = 1


@dataclass
class ConfigOption:
    """A named option value or an address alias."""

    type: OptionType
    opt: str
    value: str


def _split_directive(line: str) -> tuple[str, str, str] | None:
    """Split a directive line into its kind, name and value fields."""
    fields: list[str] = []
    pos = 0
    for pattern in (_TYPE_FIELD, _NAME_FIELD, _VALUE_FIELD):
        match = pattern.match(line, pos)
        if match is None:
            return None
        fields.append(match.group(1))
        pos = match.end()
    kind, name, value = fields
    return kind, name, value


class Options:
    """Free-form options and aliases read from resource files."""

    def __init__(self, settings: Settings | None = None, bindings: KeyBindings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.bindings = bindings if bindings is not None else KeyBindings(self.settings)
        self._options: list[ConfigOption] = []

    def __iter__(self):
        return iter(self._options)

    def init(self, no_config: bool = False) -> None:
        """Give options their initial values and read the resource files."""
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = None
        if cwd is not None and len(cwd) < MAX_SETTING_LEN:
            self.settings.set(SettingId.SAVEPATH, cwd)

        self.settings.set(SettingId.FILTER_METHODS, DEFAULT_FILTER_METHODS)
        for index, column in enumerate(DEFAULT_COLUMNS):
            self.set(f"cl.column{index}", column)

        if no_config:
            return

        for path in SYSTEM_RCFILES:
            self._read_if_present(path)
        rcfile = os.environ.get(RCFILE_ENV)
        if rcfile is not None:
            self._read_if_present(rcfile)
        else:
            home = os.environ.get("HOME")
            if home is not None:
                self._read_if_present(f"{home}/{USER_RCFILE}")

    def _read_if_present(self, fname: str) -> None:
        try:
            self.read(fname)
        except OSError:
            pass

    def read(self, fname: str) -> None:
        """Apply the directives of a resource file; raises OSError if it cannot be opened."""
        with open(fname, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                if not line or line.startswith("#"):
                    continue
                directive = _split_directive(line)
                if directive is None:
                    continue
                self._apply(*directive)

    def _apply(self, kind: str, name: str, value: str) -> None:
        kind = kind.lower()
        if kind == "set":
            setting_id = self.settings.id_of(name)
            if setting_id >= 0:
                self.settings.set(setting_id, value)
            else:
                self.set(name, value)
        elif kind == "alias":
            self.set_alias(name, value)
        elif kind == "bind":
            self.bindings.bind(self.bindings.action_id(name), key_from_str(value))
        elif kind == "unbind":
            self.bindings.unbind(self.bindings.action_id(name), key_from_str(value))

    def get(self, opt: str) -> str | None:
        """Return the value stored under a name (case insensitive), or None."""
        lowered = opt.lower()
        for option in self._options:
            if option.opt.lower() == lowered:
                return option.value
        return None

    def get_int(self, opt: str) -> int:
        """Return the leading integer of an option value, or -1 if not found."""
        value = self.get(opt)
        if value is None:
            return -1
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    def set(self, opt: str | None, value: str | None) -> None:
        """Store an option value, replacing the value of every entry with that name."""
        if opt is None or value is None:
            return
        if self.get(opt) is None:
            self._options.append(ConfigOption(OptionType.COLUMN, opt, value))
            return
        lowered = opt.lower()
        for option in self._options:
            if option.opt.lower() == lowered:
                option.value = value

    def set_alias(self, address: str, alias: str) -> None:
        """Add an alias for an address, or for an ``address:port`` pair."""
        self._options.append(ConfigOption(OptionType.ALIAS, address, alias))

    def _aliases(self):
        return (option for option in self._options if option.type == OptionType.ALIAS)

    def alias(self, address: str | None) -> str | None:
        """Return the alias for an address, or the address itself."""
        if address is None:
            return None
        for option in self._aliases():
            if option.opt == address:
                return option.value
        return address

    def alias_for_port(self, address: str | None, port: int) -> str | None:
        """Return the alias for an address and port, or the address itself."""
        if address is None:
            return None
        addr_port = f"{address}:{port}"
        for option in self._aliases():
            if option.opt in (addr_port, address):
                return option.value
        return address