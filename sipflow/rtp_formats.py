"""Standard RTP payload type encodings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RtpEncoding:
    """A static RTP payload type with its encoding name and short format."""

    id: int
    name: str
    format: str


ENCODINGS: tuple[RtpEncoding, ...] = (
    RtpEncoding(0, "PCMU/8000", "g711u"),
    RtpEncoding(3, "GSM/8000", "gsm"),
    RtpEncoding(4, "G723/8000", "g723"),
    RtpEncoding(5, "DVI4/8000", "dvi"),
    RtpEncoding(6, "DVI4/16000", "dvi"),
    RtpEncoding(7, "LPC/8000", "lpc"),
    RtpEncoding(8, "PCMA/8000", "g711a"),
    RtpEncoding(9, "G722/8000", "g722"),
    RtpEncoding(10, "L16/44100", "l16"),
    RtpEncoding(11, "L16/44100", "l16"),
    RtpEncoding(12, "QCELP/8000", "qcelp"),
    RtpEncoding(13, "CN/8000", "cn"),
    RtpEncoding(14, "MPA/90000", "mpa"),
    RtpEncoding(15, "G728/8000", "g728"),
    RtpEncoding(16, "DVI4/11025", "dvi"),
    RtpEncoding(17, "DVI4/22050", "dvi"),
    RtpEncoding(18, "G729/8000", "g729"),
    RtpEncoding(25, "CelB/90000", "celb"),
    RtpEncoding(26, "JPEG/90000", "jpeg"),
    RtpEncoding(28, "nv/90000", "nv"),
    RtpEncoding(31, "H261/90000", "h261"),
    RtpEncoding(32, "MPV/90000", "mpv"),
    RtpEncoding(33, "MP2T/90000", "mp2t"),
    RtpEncoding(34, "H263/90000", "h263"),
)

_BY_CODE: dict[int, str] = {}
for _enc in ENCODINGS:
    _BY_CODE.setdefault(_enc.id, _enc.format)


def standard_format(code: int) -> str | None:
    """Return the short format of a static payload type, or None."""
    return _BY_CODE.get(code)