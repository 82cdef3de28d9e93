import base64
import datetime

# 만료 시각 판단 시 허용하는 시계 오차
REFRESH_THRESHOLD = datetime.timedelta(seconds=10)


# 현재 시각(UTC)을 timezone 정보 없이 반환한다
def utcnow():
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.replace(tzinfo=None)


# 문자열을 바이트열로 변환한다
def to_bytes(value, encoding="utf-8"):
    result = value.encode(encoding) if isinstance(value, str) else value
    if isinstance(result, bytes):
        return result
    else:
        raise ValueError("{0!r} could not be converted to bytes".format(value))


# 바이트열을 문자열로 변환한다
def from_bytes(value):
    result = value.decode("utf-8") if isinstance(value, bytes) else value
    if isinstance(result, str):
        return result
    else:
        raise ValueError("{0!r} could not be converted to unicode".format(value))


# 스코프 목록을 구분자로 이어붙인다 (순서 유지, 중복 제거나 공백 제거를 하지 않는다)
def scopes_to_string(scopes, separator=","):
    if isinstance(scopes, str):
        return scopes
    return separator.join(scopes)


# 공백으로 구분된 스코프 문자열을 목록으로 분리한다
def string_to_scopes(scopes):
    if not scopes:
        return []
    return scopes.split(" ")


# 패딩이 생략된 base64url 문자열을 디코딩한다
def padded_urlsafe_b64decode(value):
    b64string = to_bytes(value)
    padded = b64string + b"=" * (-len(b64string) % 4)
    return base64.urlsafe_b64decode(padded)
