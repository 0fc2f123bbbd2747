"""RTCP packet recognition and report parsing."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

RTP_VERSION_RFC1889 = 2
RTCP_HDR_LENGTH = 4

# Wire sizes of the fixed parts read from reports.
_SR_HEADER_SIZE = 28
_XR_HEADER_SIZE = 8
_XR_BLOCK_HEADER_SIZE = 4
_XR_VOIP_BLOCK_SIZE = 36

_GENERIC_HEADER = struct.Struct("!BBH")
_SR_SPC = struct.Struct("!I")
_SR_SPC_OFFSET = 20

# Offsets inside a VoIP metrics report block.
_VOIP_LOSS_RATE = 8
_VOIP_DISCARD_RATE = 9
_VOIP_MOS_LQ = 26
_VOIP_MOS_CQ = 27


class RtcpHeaderType(IntEnum):
    """RTCP packet types."""

    SR = 200
    RR = 201
    SDES = 202
    BYE = 203
    APP = 204
    RTPFB = 205
    PSFB = 206
    XR = 207
    AVB = 208
    RSI = 209
    TOKEN = 210


class RtcpXrBlockType(IntEnum):
    """RTCP extended report block types."""

    LOSS_RLE = 1
    DUP_RLE = 2
    PKT_RXTIMES = 3
    REF_TIME = 4
    DLRR = 5
    STATS_SUMRY = 6
    VOIP_METRCS = 7
    BT_XNQ = 8
    TI_VOIP = 9
    PR_LOSS_RLE = 10
    MC_ACQ = 11
    IDMS = 12


_IGNORED_TYPES = frozenset(
    {
        RtcpHeaderType.RR,
        RtcpHeaderType.SDES,
        RtcpHeaderType.BYE,
        RtcpHeaderType.APP,
        RtcpHeaderType.RTPFB,
        RtcpHeaderType.PSFB,
    }
)


@dataclass
class RtcpInfo:
    """Figures gathered from the RTCP reports of a stream."""

    spc: int = 0
    flost: int = 0
    fdiscard: int = 0
    mosl: int = 0
    mosc: int = 0


def data_is_rtcp(data: bytes) -> bool:
    """Return True if the bytes look like an RTCP packet."""
    if len(data) < RTCP_HDR_LENGTH:
        return False
    first, ptype = data[0], data[1]
    return (
        first >> 6 == RTP_VERSION_RFC1889
        and 127 < first < 192
        and 192 <= ptype <= 223
    )


def _parse_xr(chunk: bytes, length: int, info: RtcpInfo) -> None:
    position = _XR_HEADER_SIZE
    while position < length:
        if position + _XR_BLOCK_HEADER_SIZE > len(chunk):
            break
        block_type, _, words = _GENERIC_HEADER.unpack_from(chunk, position)
        # Metrics are always taken from the first block after the header.
        if (
            block_type == RtcpXrBlockType.VOIP_METRCS
            and len(chunk) >= _XR_HEADER_SIZE + _XR_VOIP_BLOCK_SIZE
        ):
            base = _XR_HEADER_SIZE
            info.fdiscard = chunk[base + _VOIP_DISCARD_RATE]
            info.flost = chunk[base + _VOIP_LOSS_RATE]
            info.mosl = chunk[base + _VOIP_MOS_LQ]
            info.mosc = chunk[base + _VOIP_MOS_CQ]
        position += words * 4 + 4


def parse_rtcp(payload: bytes, info: RtcpInfo | None = None) -> RtcpInfo:
    """Walk a compound RTCP packet, updating and returning ``info``."""
    if info is None:
        info = RtcpInfo()
    data = bytes(payload)
    offset = 0
    while len(data) - offset >= RTCP_HDR_LENGTH:
        chunk = data[offset:]
        first, ptype, words = _GENERIC_HEADER.unpack_from(chunk)
        if first >> 6 != RTP_VERSION_RFC1889:
            break
        length = words * 4 + 4
        if length > len(chunk):
            break
        if ptype == RtcpHeaderType.SR:
            if len(chunk) >= _SR_HEADER_SIZE:
                info.spc = _SR_SPC.unpack_from(chunk, _SR_SPC_OFFSET)[0]
        elif ptype in _IGNORED_TYPES:
            pass
        elif ptype == RtcpHeaderType.XR:
            if len(chunk) >= _XR_HEADER_SIZE:
                _parse_xr(chunk, length, info)
        else:
            # Unhandled report type: the rest of the packet is skipped.
            break
        offset += length
    return info