import struct

from sipflow.rtcp import RtcpHeaderType, RtcpInfo, RtcpXrBlockType, data_is_rtcp, parse_rtcp


def sender_report(spc):
    return struct.pack("!BBHIQIII", 0x80, RtcpHeaderType.SR, 6, 0x1111, 0, 160, spc, 999)


def receiver_report():
    return struct.pack("!BBHI", 0x80, RtcpHeaderType.RR, 1, 0x2222)


def voip_xr(lrate, drate, moslq, moscq):
    block = bytearray(36)
    block[0] = RtcpXrBlockType.VOIP_METRCS
    struct.pack_into("!H", block, 2, 8)
    block[8] = lrate
    block[9] = drate
    block[26] = moslq
    block[27] = moscq
    header = struct.pack("!BBHI", 0x80, RtcpHeaderType.XR, 10, 0x3333)
    return header + bytes(block)


def test_sender_report_is_rtcp():
    assert data_is_rtcp(sender_report(5)) is True


def test_rtp_payload_type_is_not_rtcp():
    data = bytes([0x80, 0x08]) + bytes(10)
    assert data_is_rtcp(data) is False


def test_short_data_is_not_rtcp():
    assert data_is_rtcp(bytes([0x80, 200])) is False


def test_wrong_version_is_not_rtcp():
    data = bytes([0x40, 200, 0, 1])
    assert data_is_rtcp(data) is False


def test_sender_report_packet_count():
    info = parse_rtcp(sender_report(1234))
    assert info.spc == 1234


def test_existing_info_is_updated():
    info = RtcpInfo(mosl=40)
    result = parse_rtcp(sender_report(77), info)
    assert result is info
    assert info.spc == 77
    assert info.mosl == 40


def test_compound_receiver_then_sender():
    info = parse_rtcp(receiver_report() + sender_report(4321))
    assert info.spc == 4321


def test_extended_report_voip_metrics():
    info = parse_rtcp(voip_xr(10, 20, 41, 38))
    assert (info.flost, info.fdiscard, info.mosl, info.mosc) == (10, 20, 41, 38)


def test_unhandled_type_stops_parsing():
    avb = struct.pack("!BBHI", 0x80, RtcpHeaderType.AVB, 1, 0)
    info = parse_rtcp(avb + sender_report(55))
    assert info.spc == RtcpInfo().spc


def test_truncated_length_is_ignored():
    report = sender_report(55)[:20]
    info = parse_rtcp(report)
    assert info == RtcpInfo()


def test_bad_version_stops_parsing():
    bad = bytes([0x40, RtcpHeaderType.SR, 0, 6]) + bytes(24)
    info = parse_rtcp(bad + sender_report(9))
    assert info == RtcpInfo()