import json

from mdsauth import _helpers
from mdsauth import exceptions


# JWT의 세그먼트를 디코딩해 JSON으로 해석한다
def _decode_jwt_segment(encoded_section):
    try:
        section_bytes = _helpers.padded_urlsafe_b64decode(encoded_section)
        return json.loads(section_bytes.decode("utf-8"))
    # base64, UTF-8, JSON 오류 모두 ValueError의 하위 클래스이다
    except ValueError as caught_exc:
        new_exc = exceptions.MalformedResponseError(
            "Can't parse segment: {0}".format(encoded_section)
        )
        raise new_exc from caught_exc


# 서명을 검증하지 않고 JWT를 헤더, 페이로드, 서명 입력, 서명으로 분해한다
def _unverified_decode(token):
    token = _helpers.to_bytes(token)

    if token.count(b".") != 2:
        raise exceptions.MalformedResponseError(
            "Wrong number of segments in token: {0}".format(token)
        )

    encoded_header, encoded_payload, signature = token.split(b".")
    signed_section = encoded_header + b"." + encoded_payload
    try:
        signature = _helpers.padded_urlsafe_b64decode(signature)
    except ValueError as caught_exc:
        new_exc = exceptions.MalformedResponseError(
            "Can't decode token signature: {0}".format(token)
        )
        raise new_exc from caught_exc

    # 헤더와 페이로드를 디코딩한다
    header = _decode_jwt_segment(encoded_header)
    payload = _decode_jwt_segment(encoded_payload)

    if not isinstance(header, dict):
        raise exceptions.MalformedResponseError(
            "Header segment should be a JSON object: {0}".format(encoded_header)
        )

    if not isinstance(payload, dict):
        raise exceptions.MalformedResponseError(
            "Payload segment should be a JSON object: {0}".format(encoded_payload)
        )

    return header, payload, signed_section, signature


# 서명 검증 없이 페이로드(클레임)만 반환한다
def decode_payload(token):
    _, payload, _, _ = _unverified_decode(token)
    return payload
