"""SDP media descriptions carried by SIP messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sipflow.rtp_formats import standard_format

MEDIATYPELEN = 15
UNASSIGNED = "Unassigned"


@dataclass
class MediaFormat:
    """A payload type code and the encoding name given for it in SDP."""

    id: int
    format: str


@dataclass
class SdpMedia:
    """One ``m=`` section of an SDP body."""

    msg: Any
    address: Any = field(default=None, init=False)
    type: str = field(default="", init=False)
    fmtcode: int = field(default=0, init=False)
    formats: list[MediaFormat] = field(default_factory=list, init=False)

    def set_type(self, media_type: str) -> None:
        """Store the media type, cut to the allowed length."""
        self.type = media_type[: MEDIATYPELEN - 1]

    def add_format(self, code: int, name: str) -> MediaFormat:
        """Record the encoding name described for a payload type code."""
        fmt = MediaFormat(code, name)
        self.formats.append(fmt)
        return fmt

    def get_format(self, code: int) -> str:
        """Return the described encoding for a code, or ``Unassigned``."""
        for fmt in self.formats:
            if fmt.id == code:
                return fmt.format
        return UNASSIGNED

    def preferred_format(self) -> str:
        """Return the name of the preferred payload format."""
        return standard_format(self.fmtcode) or self.get_format(self.fmtcode)