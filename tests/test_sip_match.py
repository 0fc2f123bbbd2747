import pytest

from sipflow.sip_match import InvalidExpression, MatchExpression

PAYLOAD = "INVITE sip:alice@example.com SIP/2.0\r\nFrom: <sip:bob@example.com>\r\n"


def test_no_expression_matches_everything():
    expr = MatchExpression(None)
    assert expr.matches(PAYLOAD) is True
    assert expr.matches("") is True


def test_simple_match():
    expr = MatchExpression("alice")
    assert expr.matches(PAYLOAD) is True
    assert expr.matches("BYE sip:carol@example.com SIP/2.0") is False
    assert expr.expr == "alice"


def test_case_sensitivity():
    assert MatchExpression("ALICE").matches(PAYLOAD) is False
    assert MatchExpression("ALICE", insensitive=True).matches(PAYLOAD) is True


def test_invert():
    expr = MatchExpression("alice", invert=True)
    assert expr.matches(PAYLOAD) is False
    assert expr.matches("OPTIONS sip:server SIP/2.0") is True


def test_bytes_payload():
    expr = MatchExpression("^INVITE")
    assert expr.matches(PAYLOAD.encode()) is True
    assert expr.matches(b"ACK sip:x SIP/2.0") is False


def test_dot_spans_lines():
    assert MatchExpression("INVITE.*From").matches(PAYLOAD) is True


def test_invalid_expression_raises():
    with pytest.raises(InvalidExpression):
        MatchExpression("(unclosed")
    with pytest.raises(ValueError):
        MatchExpression("[a-")