# sipflow

Supporting pieces for a SIP monitoring tool: a table of typed settings,
key bindings for user interface actions, resource files with options and
address aliases, SDP media descriptions with their payload formats, RTCP
report parsing, and payload match expressions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `sipflow.setting`: `Settings`, the table of named, typed settings
  (`SettingId`, `SettingFormat`, `Setting`). Read values with `get` and
  `get_int`, change them with `set` and `set_int`, test them with
  `enabled`, `disabled` and `has_value`, and cycle enumerated values with
  `toggle` or `enum_next`. A value of 1024 characters or more raises
  `SettingValueTooLong`. `dump` prints the current values.
- `sipflow.keybinding`: `KeyBindings` maps each `Action` to up to five key
  codes (`KeyBinding`). `bind`, `unbind`, `find_action`, `action_id`,
  `action_key` and `action_key_str` work on the table; the hint key is the
  second binding when the `hintkeyalt` setting is on. `key_from_str` and
  `key_to_str` convert names such as `"x"`, `"F5"`, `"^A"`, `"Ctrl-A"`,
  `"Esc"`, `"Space"` and `"Enter"` to key codes and back; `key_ctrl`,
  `key_f` and `is_printable` are helpers for key codes.
- `sipflow.option`: `Options` stores free-form options and address
  aliases (`ConfigOption`, `OptionType`). `init` sets the defaults and reads
  `/etc/sngreprc`, `/usr/local/etc/sngreprc` and then `$SNGREPRC` or
  `$HOME/.sngreprc`; `read` applies the `set`, `alias`, `bind` and `unbind`
  directives of one file and raises `OSError` if it cannot be opened.
  `alias` and `alias_for_port` return the alias of an address, or the
  address itself.
- `sipflow.rtp_formats`: the static RTP payload types (`RtpEncoding`) and
  `standard_format(code)`.
- `sipflow.media`: `SdpMedia`, one `m=` section of an SDP body, with its
  described formats (`MediaFormat`), `get_format` (which returns
  `"Unassigned"` for unknown codes) and `preferred_format`.
- `sipflow.rtcp`: `data_is_rtcp` recognises RTCP packets and `parse_rtcp`
  walks a compound packet, filling an `RtcpInfo` with the sender packet
  count from sender reports and loss, discard and MOS figures from VoIP
  metrics extended report blocks (`RtcpHeaderType`, `RtcpXrBlockType`).
- `sipflow.sip_match`: `MatchExpression`, a payload filter with
  case-insensitive and inverted matching; an expression that does not
  compile raises `InvalidExpression`.

## Example

```python
from sipflow.keybinding import Action, KeyBindings, key_from_str
from sipflow.media import SdpMedia
from sipflow.setting import SettingId, Settings
from sipflow.sip_match import MatchExpression

settings = Settings()
settings.set(SettingId.CAPTURE_LIMIT, "500")
print(settings.get_int(SettingId.CAPTURE_LIMIT))    # 500

bindings = KeyBindings(settings)
bindings.bind(Action.TOGGLE_PAUSE, key_from_str("^P"))

media = SdpMedia(msg=None)
media.fmtcode = 0
print(media.preferred_format())                      # g711u

expr = MatchExpression("invite", insensitive=True)
print(expr.matches("INVITE sip:alice@example.com SIP/2.0"))  # True
```

## What it does not do

The package has no command to run and no terminal interface. It does not
capture packets or read capture files, does not parse SIP messages or
group them into calls, does not parse SDP bodies from messages, and does
not track RTP streams; it provides the settings, bindings, options, media
format and RTCP pieces such a tool is built from.