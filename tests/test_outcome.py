import pytest

from py_bitcoin_rpc.outcome import Err, ErrorKind, Ok, OkNull, RPCError


def test_ok():
    outcome = Ok({"chain": "main"})
    assert outcome
    assert outcome.value == {"chain": "main"}
    assert outcome.unwrap() == {"chain": "main"}


def test_ok_null():
    outcome = OkNull()
    assert outcome
    assert outcome.value is None
    assert outcome.unwrap() is None


def test_err_collapses_to_none():
    outcome = Err(ErrorKind.TRANSPORT_FAILURE, "refused")
    assert not outcome
    assert outcome.value is None


def test_err_unwrap():
    outcome = Err(ErrorKind.REMOTE_ERROR, '{"code": -5}', -5)
    with pytest.raises(RPCError) as info:
        outcome.unwrap()
    assert info.value.kind is ErrorKind.REMOTE_ERROR
    assert str(info.value) == 'remote error -5: {"code": -5}'


def test_error_message_without_code():
    error = RPCError(ErrorKind.MALFORMED_RESPONSE, "Expecting value")
    assert str(error) == "malformed response: Expecting value"


def test_outcomes_are_distinct():
    assert Ok(None) != OkNull()
    assert Err(ErrorKind.REMOTE_ERROR, "x") != Err(ErrorKind.MALFORMED_RESPONSE, "x")
