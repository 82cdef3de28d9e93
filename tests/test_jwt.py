import pytest

from mdsauth import exceptions
from mdsauth import jwt
from tests import jwt_helpers


def test_decode_payload():
    token = jwt_helpers.make_jwt({"aud": "audience@example.com", "exp": 100})

    payload = jwt.decode_payload(token)

    assert payload == {"aud": "audience@example.com", "exp": 100}


def test__unverified_decode():
    token = jwt_helpers.make_jwt({"exp": 1}, header={"alg": "none"})

    header, payload, signed_section, signature = jwt._unverified_decode(token)

    assert header == {"alg": "none"}
    assert payload == {"exp": 1}
    assert signed_section == token.rsplit(".", 1)[0].encode("ascii")
    assert signature == b"signature"


def test_decode_wrong_number_of_segments():
    with pytest.raises(exceptions.MalformedResponseError) as excinfo:
        jwt.decode_payload("1.2")

    assert excinfo.match(r"Wrong number of segments")


def test_decode_bad_segment():
    with pytest.raises(exceptions.MalformedResponseError) as excinfo:
        jwt.decode_payload("e30.bm90IGpzb24.c2ln")

    assert excinfo.match(r"Can't parse segment")


def test_decode_payload_not_object():
    token = "e30.WzFd.c2ln"

    with pytest.raises(exceptions.MalformedResponseError) as excinfo:
        jwt.decode_payload(token)

    assert excinfo.match(r"Payload segment should be a JSON object")
