"""Key bindings: user interface actions and the keys that trigger them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from sipflow.setting import SettingId, Settings

MAX_BINDINGS = 5

KEY_ESC = 27
KEY_INTRO = 10
KEY_TAB = 9
KEY_BACKSPACE2 = 8
KEY_BACKSPACE3 = 127
KEY_SPACE = ord(" ")

# Terminal key codes as reported by curses.
KEY_DOWN = 0o402
KEY_UP = 0o403
KEY_LEFT = 0o404
KEY_RIGHT = 0o405
KEY_HOME = 0o406
KEY_BACKSPACE = 0o407
KEY_F0 = 0o410
KEY_DC = 0o512
KEY_NPAGE = 0o522
KEY_PPAGE = 0o523
KEY_END = 0o550
KEY_RESIZE = 0o632


def key_ctrl(char: str | int) -> int:
    """Return the key code of a character pressed together with Ctrl."""
    code = ord(char) if isinstance(char, str) else int(char)
    return code - 64


def key_f(n: int) -> int:
    """Return the key code of function key ``n``."""
    return KEY_F0 + n


class Action(IntEnum):
    """User interface actions that keys can be bound to."""

    PRINTABLE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    DELETE = 5
    BACKSPACE = 6
    NPAGE = 7
    PPAGE = 8
    HNPAGE = 9
    HPPAGE = 10
    BEGIN = 11
    END = 12
    PREV_FIELD = 13
    NEXT_FIELD = 14
    RESIZE_SCREEN = 15
    CLEAR = 16
    CLEAR_CALLS = 17
    CLEAR_CALLS_SOFT = 18
    TOGGLE_SYNTAX = 19
    CYCLE_COLOR = 20
    COMPRESS = 21
    SHOW_HOSTNAMES = 22
    SHOW_ALIAS = 23
    TOGGLE_PAUSE = 24
    PREV_SCREEN = 25
    SHOW_HELP = 26
    SHOW_RAW = 27
    SHOW_FLOW = 28
    SHOW_FLOW_EX = 29
    SHOW_FILTERS = 30
    SHOW_COLUMNS = 31
    SHOW_SETTINGS = 32
    SHOW_STATS = 33
    COLUMN_MOVE_UP = 34
    COLUMN_MOVE_DOWN = 35
    SDP_INFO = 36
    DISP_FILTER = 37
    SAVE = 38
    SELECT = 39
    CONFIRM = 40
    TOGGLE_MEDIA = 41
    ONLY_MEDIA = 42
    TOGGLE_RAW = 43
    INCREASE_RAW = 44
    DECREASE_RAW = 45
    RESET_RAW = 46
    ONLY_SDP = 47
    TOGGLE_HINT = 48
    AUTOSCROLL = 49
    SORT_PREV = 50
    SORT_NEXT = 51
    SORT_SWAP = 52
    TOGGLE_TIME = 53


@dataclass
class KeyBinding:
    """An action, its configuration name and the keys bound to it."""

    id: Action
    name: str
    keys: list[int] = field(default_factory=list)

    @property
    def bindcnt(self) -> int:
        return len(self.keys)


_A = Action
_C = key_ctrl
_F = key_f

# Unused trailing slots are kept as zero keys, as the default table declares them.
_DEFAULT_BINDINGS: tuple[tuple[Action, str, tuple[int, ...]], ...] = (
    (_A.PRINTABLE, "", ()),
    (_A.UP, "up", (KEY_UP, ord("k"))),
    (_A.DOWN, "down", (KEY_DOWN, ord("j"))),
    (_A.LEFT, "left", (KEY_LEFT, ord("h"))),
    (_A.RIGHT, "right", (KEY_RIGHT, ord("l"))),
    (_A.DELETE, "delete", (KEY_DC,)),
    (_A.BACKSPACE, "backspace", (KEY_BACKSPACE, KEY_BACKSPACE2, KEY_BACKSPACE3)),
    (_A.NPAGE, "npage", (KEY_NPAGE, _C("F"))),
    (_A.PPAGE, "ppage", (KEY_PPAGE, _C("B"))),
    (_A.HNPAGE, "hnpage", (_C("D"),)),
    (_A.HPPAGE, "hppage", (_C("U"), 0)),
    (_A.BEGIN, "begin", (KEY_HOME, _C("A"))),
    (_A.END, "end", (KEY_END, _C("E"))),
    (_A.PREV_FIELD, "pfield", (KEY_UP,)),
    (_A.NEXT_FIELD, "nfield", (KEY_DOWN, KEY_TAB)),
    (_A.RESIZE_SCREEN, "", (KEY_RESIZE,)),
    (_A.CLEAR, "clear", (_C("U"), _C("W"))),
    (_A.CLEAR_CALLS, "clearcalls", (_F(5), _C("L"))),
    (_A.CLEAR_CALLS_SOFT, "clearcallssoft", (_F(9), 0)),
    (_A.TOGGLE_SYNTAX, "togglesyntax", (_F(8), ord("C"))),
    (_A.CYCLE_COLOR, "colormode", (ord("c"),)),
    (_A.COMPRESS, "compress", (ord("s"),)),
    (_A.SHOW_ALIAS, "togglealias", (ord("a"),)),
    (_A.TOGGLE_PAUSE, "pause", (ord("p"),)),
    (_A.PREV_SCREEN, "prevscreen", (KEY_ESC, ord("q"), ord("Q"))),
    (_A.SHOW_HELP, "help", (_F(1), ord("h"), ord("H"), ord("?"))),
    (_A.SHOW_RAW, "raw", (_F(6), ord("R"), ord("r"))),
    (_A.SHOW_FLOW, "flow", (KEY_INTRO,)),
    (_A.SHOW_FLOW_EX, "flowex", (_F(4), ord("x"))),
    (_A.SHOW_FILTERS, "filters", (_F(7), ord("f"), ord("F"))),
    (_A.SHOW_COLUMNS, "columns", (_F(10), ord("t"), ord("T"))),
    (_A.SHOW_SETTINGS, "settings", (_F(8), ord("o"), ord("O"))),
    (_A.SHOW_STATS, "stats", (ord("i"),)),
    (_A.COLUMN_MOVE_UP, "columnup", (ord("-"),)),
    (_A.COLUMN_MOVE_DOWN, "columndown", (ord("+"),)),
    (_A.SDP_INFO, "sdpinfo", (_F(2), ord("d"))),
    (_A.DISP_FILTER, "search", (_F(3), ord("/"), KEY_TAB)),
    (_A.SAVE, "save", (_F(2), ord("s"), ord("S"))),
    (_A.SELECT, "select", (KEY_SPACE,)),
    (_A.CONFIRM, "confirm", (KEY_INTRO,)),
    (_A.TOGGLE_MEDIA, "togglemedia", (_F(3), ord("m"))),
    (_A.ONLY_MEDIA, "onlymedia", (ord("M"),)),
    (_A.TOGGLE_RAW, "rawpreview", (ord("t"),)),
    (_A.INCREASE_RAW, "morerawpreview", (ord("9"),)),
    (_A.DECREASE_RAW, "lessrawpreview", (ord("0"),)),
    (_A.RESET_RAW, "resetrawpreview", (ord("T"),)),
    (_A.ONLY_SDP, "onlysdp", (ord("D"),)),
    (_A.AUTOSCROLL, "autoscroll", (ord("A"),)),
    (_A.TOGGLE_HINT, "hintalt", (ord("K"),)),
    (_A.SORT_PREV, "sortprev", (ord("<"),)),
    (_A.SORT_NEXT, "sortnext", (ord(">"),)),
    (_A.SORT_SWAP, "sortswap", (ord("z"),)),
    (_A.TOGGLE_TIME, "toggletime", (ord("w"),)),
)

_FUNCTION_KEY_NAMES = {key_f(n): f"F{n}" for n in range(1, 11)}


def is_printable(key: int) -> bool:
    """Return True if the key is a space or a printable character."""
    return key == ord(" ") or 33 < key < 126 or 160 < key < 255


def _keyname(key: int) -> str:
    if key >= 128:
        return "M-" + _keyname(key - 128)
    return chr(key)


def key_to_str(key: int) -> str:
    """Return a human readable name for a key, or an empty string."""
    if key in _FUNCTION_KEY_NAMES:
        return _FUNCTION_KEY_NAMES[key]
    if key == KEY_ESC:
        return "Esc"
    if key == KEY_INTRO:
        return "Enter"
    if key == ord(" "):
        return "Space"
    if is_printable(key):
        return _keyname(key)
    return ""


def _atoi(text: str) -> int:
    digits = ""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in "+-" and stripped:
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def key_from_str(text: str | None) -> int:
    """Parse a key declaration such as ``x``, ``F5``, ``^A`` or ``Esc``; 0 if unknown."""
    if not text:
        return 0
    if len(text) == 1:
        return ord(text)
    if text[0] == "F":
        return key_f(_atoi(text[1:]))
    if text[0] == "^":
        return key_ctrl(ord(text[1].upper()))
    if text[:5].lower() == "ctrl-":
        rest = text[5:6]
        return key_ctrl(ord(rest.upper()) if rest else 0)
    lowered = text.lower()
    if lowered == "esc":
        return KEY_ESC
    if lowered == "space":
        return ord(" ")
    if lowered == "enter":
        return KEY_INTRO
    return 0


class KeyBindings:
    """The table of actions with their bound keys."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self._table = [
            KeyBinding(action, name, list(keys)) for action, name, keys in _DEFAULT_BINDINGS
        ]

    def __iter__(self):
        return iter(self._table[1:])

    def binding(self, action: int) -> KeyBinding | None:
        """Return the binding for an action, or None."""
        for bind in self._table[1:]:
            if bind.id == action:
                return bind
        return None

    def bind(self, action: int, key: int) -> None:
        """Add a key to an action, unless the action is unknown or full."""
        bind = self.binding(action)
        if bind is None or bind.bindcnt >= MAX_BINDINGS:
            return
        bind.keys.append(key)

    def unbind(self, action: int, key: int) -> None:
        """Remove every occurrence of a key from an action."""
        bind = self.binding(action)
        if bind is None:
            return
        previous = bind.keys
        bind.keys = []
        for other in previous:
            if other != key:
                self.bind(action, other)

    def find_action(self, key: int, start: int = -1) -> int:
        """Return the next action bound to ``key`` after ``start``, or -1."""
        for position in range(start + 1, len(self._table)):
            if position == Action.PRINTABLE and is_printable(key):
                return Action.PRINTABLE
            bind = self._table[position]
            if key in bind.keys:
                return bind.id
        return -1

    def action_id(self, name: str) -> int:
        """Return the action with this name (case insensitive), or -1."""
        lowered = name.lower()
        for bind in self._table[1:]:
            if bind.name.lower() == lowered:
                return bind.id
        return -1

    def _hint_key(self, bind: KeyBinding) -> int:
        if self.settings.enabled(SettingId.ALTKEY_HINT) and bind.bindcnt > 1:
            return bind.keys[1]
        return bind.keys[0]

    def action_key_str(self, action: int) -> str | None:
        """Return the name of the key shown as hint for an action."""
        bind = self.binding(action)
        if bind is None or not bind.keys:
            return None
        return key_to_str(self._hint_key(bind))

    def action_key(self, action: int) -> int:
        """Return the key shown as hint for an action, or -1."""
        bind = self.binding(action)
        if bind is None or not bind.keys:
            return -1
        return self._hint_key(bind)

    def dump(self) -> None:
        """Print every configured key binding."""
        for bind in self._table[1:]:
            for key in bind.keys:
                print(
                    f"ActionID: {int(bind.id)}\t ActionName: {bind.name:<21} "
                    f"Key: {key} ({key_to_str(key)})"
                )