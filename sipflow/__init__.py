"""Settings, key bindings, options, SDP media formats, RTCP parsing and payload matching for SIP monitoring."""

__version__ = "1.8.2"