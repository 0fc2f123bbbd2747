"""Application settings: a fixed table of named, typed, configurable values."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

MAX_SETTING_LEN = 1024

SETTING_ON = "on"
SETTING_OFF = "off"
SETTING_YES = "yes"
SETTING_NO = "no"
SETTING_ACTIVE = "active"

ENUM_ONOFF = ("on", "off")
ENUM_YESNO = ("yes", "no")
ENUM_BACKGROUND = ("dark", "default")
ENUM_COLORMODE = ("request", "cseq", "callid")
ENUM_HIGHLIGHT = ("bold", "reverse", "reversebold")
ENUM_SDP_INFO = ("off", "first", "full", "compressed")
ENUM_STORAGE = ("none", "memory")
ENUM_HEPVERSION = ("2", "3")
ENUM_MEDIA = ("off", "on", "active")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SettingId(IntEnum):
    """Identifiers of every configurable setting."""

    BACKGROUND = 0
    COLORMODE = 1
    SYNTAX = 2
    SYNTAX_TAG = 3
    SYNTAX_BRANCH = 4
    ALTKEY_HINT = 5
    EXITPROMPT = 6
    CAPTURE_LIMIT = 7
    CAPTURE_DEVICE = 8
    CAPTURE_OUTFILE = 9
    CAPTURE_BUFFER = 10
    CAPTURE_RTP = 11
    CAPTURE_STORAGE = 12
    CAPTURE_ROTATE = 13
    SIP_NOINCOMPLETE = 14
    SIP_HEADER_X_CID = 15
    SIP_CALLS = 16
    SAVEPATH = 17
    DISPLAY_ALIAS = 18
    ALIAS_PORT = 19
    CL_SCROLLSTEP = 20
    CL_COLORATTR = 21
    CL_AUTOSCROLL = 22
    CL_SORTFIELD = 23
    CL_SORTORDER = 24
    CF_FORCERAW = 25
    CF_RAWMINWIDTH = 26
    CF_RAWFIXEDWIDTH = 27
    CF_SPLITCALLID = 28
    CF_HIGHTLIGHT = 29
    CF_SCROLLSTEP = 30
    CF_LOCALHIGHLIGHT = 31
    CF_SDP_INFO = 32
    CF_MEDIA = 33
    CF_ONLYMEDIA = 34
    CF_DELTA = 35
    CR_SCROLLSTEP = 36
    CR_NON_ASCII = 37
    FILTER_PAYLOAD = 38
    FILTER_METHODS = 39


SETTING_COUNT = len(SettingId)


class SettingFormat(IntEnum):
    """Kind of value a setting holds."""

    STRING = 0
    NUMBER = 1
    ENUM = 2


class SettingValueTooLong(ValueError):
    """Raised when a setting value does not fit the allowed length."""


@dataclass
class Setting:
    """One configurable setting and its current value."""

    id: SettingId
    name: str
    fmt: SettingFormat
    value: str
    valuelist: tuple[str, ...] | None = field(default=None)


_S, _N, _E = SettingFormat.STRING, SettingFormat.NUMBER, SettingFormat.ENUM
_I = SettingId

_DEFAULTS: tuple[tuple[SettingId, str, SettingFormat, str, tuple[str, ...] | None], ...] = (
    (_I.BACKGROUND, "background", _E, "dark", ENUM_BACKGROUND),
    (_I.COLORMODE, "colormode", _E, "request", ENUM_COLORMODE),
    (_I.SYNTAX, "syntax", _E, SETTING_ON, ENUM_ONOFF),
    (_I.SYNTAX_TAG, "syntax.tag", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.SYNTAX_BRANCH, "syntax.branch", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.ALTKEY_HINT, "hintkeyalt", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.EXITPROMPT, "exitprompt", _E, SETTING_ON, ENUM_ONOFF),
    (_I.CAPTURE_LIMIT, "capture.limit", _N, "20000", None),
    (_I.CAPTURE_DEVICE, "capture.device", _S, "any", None),
    (_I.CAPTURE_OUTFILE, "capture.outfile", _S, "", None),
    (_I.CAPTURE_BUFFER, "capture.buffer", _N, "2", None),
    (_I.CAPTURE_RTP, "capture.rtp", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.CAPTURE_STORAGE, "capture.storage", _E, "memory", ENUM_STORAGE),
    (_I.CAPTURE_ROTATE, "capture.rotate", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.SIP_NOINCOMPLETE, "sip.noincomplete", _E, SETTING_ON, ENUM_ONOFF),
    (_I.SIP_HEADER_X_CID, "sip.xcid", _S, "X-Call-ID|X-CID", None),
    (_I.SIP_CALLS, "sip.calls", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.SAVEPATH, "savepath", _S, "", None),
    (_I.DISPLAY_ALIAS, "displayalias", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.ALIAS_PORT, "aliasport", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.CL_SCROLLSTEP, "cl.scrollstep", _N, "4", None),
    (_I.CL_COLORATTR, "cl.colorattr", _E, SETTING_ON, ENUM_ONOFF),
    (_I.CL_AUTOSCROLL, "cl.autoscroll", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.CL_SORTFIELD, "cl.sortfield", _S, "index", None),
    (_I.CL_SORTORDER, "cl.sortorder", _S, "asc", None),
    (_I.CF_FORCERAW, "cf.forceraw", _E, SETTING_ON, ENUM_ONOFF),
    (_I.CF_RAWMINWIDTH, "cf.rawminwidth", _N, "40", None),
    (_I.CF_RAWFIXEDWIDTH, "cf.rawfixedwidth", _N, "", None),
    (_I.CF_SPLITCALLID, "cf.splitcallid", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.CF_HIGHTLIGHT, "cf.highlight", _E, "bold", ENUM_HIGHLIGHT),
    (_I.CF_SCROLLSTEP, "cf.scrollstep", _N, "4", None),
    (_I.CF_LOCALHIGHLIGHT, "cf.localhighlight", _E, SETTING_ON, ENUM_ONOFF),
    (_I.CF_SDP_INFO, "cf.sdpinfo", _E, SETTING_OFF, ENUM_SDP_INFO),
    (_I.CF_MEDIA, "cf.media", _E, SETTING_OFF, ENUM_MEDIA),
    (_I.CF_ONLYMEDIA, "cf.onlymedia", _E, SETTING_OFF, ENUM_ONOFF),
    (_I.CF_DELTA, "cf.deltatime", _E, SETTING_ON, ENUM_ONOFF),
    (_I.CR_SCROLLSTEP, "cr.scrollstep", _N, "10", None),
    (_I.CR_NON_ASCII, "cr.nonascii", _S, ".", None),
    (_I.FILTER_PAYLOAD, "filter.payload", _S, "", None),
    (_I.FILTER_METHODS, "filter.methods", _S, "", None),
)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Settings:
    """The table of settings, initialised with default values."""

    def __init__(self) -> None:
        self._settings = [
            Setting(sid, name, fmt, value, values)
            for sid, name, fmt, value, values in _DEFAULTS
        ]
        self._by_id = {s.id: s for s in self._settings}
        self._by_name = {s.name: s for s in self._settings}

    def __iter__(self):
        return iter(self._settings)

    def by_id(self, setting_id: int) -> Setting | None:
        """Return the setting with this id, or None."""
        try:
            return self._by_id.get(SettingId(setting_id))
        except ValueError:
            return None

    def by_name(self, name: str) -> Setting | None:
        """Return the setting with this exact name, or None."""
        return self._by_name.get(name)

    def id_of(self, name: str) -> int:
        """Return the id for a setting name, or -1 if unknown."""
        sett = self.by_name(name)
        return sett.id if sett else -1

    def name_of(self, setting_id: int) -> str | None:
        sett = self.by_id(setting_id)
        return sett.name if sett else None

    def format_of(self, setting_id: int) -> int:
        sett = self.by_id(setting_id)
        return sett.fmt if sett else -1

    def valid_values(self, setting_id: int) -> tuple[str, ...] | None:
        sett = self.by_id(setting_id)
        return sett.valuelist if sett else None

    def get(self, setting_id: int) -> str | None:
        """Return the value, or None if unknown or empty."""
        sett = self.by_id(setting_id)
        return sett.value if sett and sett.value else None

    def get_int(self, setting_id: int) -> int:
        """Return the value as an integer, or -1 if unknown or empty."""
        sett = self.by_id(setting_id)
        return _atoi(sett.value) if sett and sett.value else -1

    def set(self, setting_id: int, value: str | None) -> None:
        """Store a value; None clears it. Unknown ids are ignored."""
        sett = self.by_id(setting_id)
        if sett is None:
            return
        if value is None:
            sett.value = ""
            return
        if len(value) >= MAX_SETTING_LEN:
            raise SettingValueTooLong(f"Setting value for {sett.name} is too long")
        sett.value = value

    def set_int(self, setting_id: int, value: int) -> None:
        self.set(setting_id, str(int(value)))

    def enabled(self, setting_id: int) -> bool:
        return self.has_value(setting_id, SETTING_ON) or self.has_value(setting_id, SETTING_YES)

    def disabled(self, setting_id: int) -> bool:
        return self.has_value(setting_id, SETTING_OFF) or self.has_value(setting_id, SETTING_NO)

    def has_value(self, setting_id: int, value: str) -> bool:
        sett = self.by_id(setting_id)
        return sett is not None and sett.value == value

    def toggle(self, setting_id: int) -> None:
        """Advance an enumerated setting to its next valid value."""
        sett = self.by_id(setting_id)
        if sett is not None and sett.fmt == SettingFormat.ENUM:
            self.set(setting_id, self.enum_next(setting_id, sett.value))

    def enum_next(self, setting_id: int, value: str | None) -> str | None:
        """Return the valid value following ``value``, wrapping to the first."""
        sett = self.by_id(setting_id)
        if sett is None or sett.fmt != SettingFormat.ENUM or not sett.valuelist:
            return None
        if value is None:
            return sett.valuelist[0]
        values = sett.valuelist
        for current, following in zip(values, values[1:] + (None,)):
            if current == value:
                return following if following is not None else values[0]
        return None

    def dump(self) -> None:
        """Print every setting but the first with its current value."""
        for sett in self._settings[1:]:
            value = self.get(sett.id)
            print(
                f"SettingId: {int(sett.id)}\t SettingName: {sett.name:<20} "
                f"Value: {value if value is not None else '(null)'}"
            )