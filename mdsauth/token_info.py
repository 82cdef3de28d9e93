import datetime
import json

from mdsauth import _helpers
from mdsauth import exceptions
from mdsauth import jwt

_ACCESS_TOKEN = "access_token"
_ID_TOKEN = "id_token"
_TOKEN_TYPE = "token_type"
_EXPIRES_IN = "expires_in"
_REFRESH_TOKEN = "refresh_token"
_SCOPE = "scope"
_ERROR = "error"


# 어떤 플로우가 발급했는지와 무관하게 획득한 토큰을 표현하는 공용 결과 타입
class TokenInfo(object):
    def __init__(
        self,
        access_token=None,
        id_token=None,
        token_type=None,
        expires_at=None,
        refresh_token=None,
        scopes=None,
    ):
        self.access_token = access_token
        self.id_token = id_token
        self.token_type = token_type
        # timezone 정보가 없는 UTC 기준 시각
        self.expires_at = expires_at
        self.refresh_token = refresh_token
        self.scopes = tuple(scopes) if scopes else ()

    # 액세스 토큰이 있으면 액세스 토큰을, 없으면 ID 토큰을 반환한다
    @property
    def token(self):
        if self.access_token is not None:
            return self.access_token
        return self.id_token

    # 시계 오차를 감안해 만료 여부를 판단한다. 만료 시각이 없으면 만료되지 않은 것으로 본다
    def is_expired(self):
        if self.expires_at is None:
            return False
        skewed_expiry = self.expires_at - _helpers.REFRESH_THRESHOLD
        return _helpers.utcnow() >= skewed_expiry

    def _fields(self):
        return (
            self.access_token,
            self.id_token,
            self.token_type,
            self.expires_at,
            self.refresh_token,
            self.scopes,
        )

    def __eq__(self, other):
        if not isinstance(other, TokenInfo):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        # 토큰 문자열 자체는 로그에 남지 않도록 출력하지 않는다
        return (
            "TokenInfo(token_type={!r}, has_access_token={}, has_id_token={}, "
            "expires_at={!r}, scopes={!r})".format(
                self.token_type,
                self.access_token is not None,
                self.id_token is not None,
                self.expires_at,
                self.scopes,
            )
        )

    # OAuth 2.0 토큰 응답(JSON)을 해석해 TokenInfo를 만든다
    @classmethod
    def from_json(cls, data):
        try:
            content = _helpers.from_bytes(data)
            response_data = json.loads(content)
        except ValueError as caught_exc:
            new_exc = exceptions.MalformedResponseError(
                "Token response is not valid JSON: {!r:.40}".format(data)
            )
            raise new_exc from caught_exc

        if not isinstance(response_data, dict):
            raise exceptions.MalformedResponseError(
                "Token response should be a JSON object, got {}".format(
                    type(response_data).__name__
                )
            )

        # 오류 응답인 경우 OAuthError로 변환한다
        if _ERROR in response_data:
            raise exceptions.OAuthError(
                response_data[_ERROR],
                response_data.get("error_description"),
                response_data.get("error_uri"),
            )

        return cls._from_mapping(response_data)

    @classmethod
    def _from_mapping(cls, response_data):
        access_token = _optional_str(response_data, _ACCESS_TOKEN)
        id_token = _optional_str(response_data, _ID_TOKEN)
        if access_token is None and id_token is None:
            raise exceptions.MalformedResponseError(
                "No access token or id token in response.", response_data
            )

        expires_in = response_data.get(_EXPIRES_IN)
        if expires_in is None:
            expires_at = None
        elif isinstance(expires_in, bool) or not isinstance(expires_in, int):
            raise exceptions.MalformedResponseError(
                "expires_in should be an integer, got {!r}".format(expires_in)
            )
        else:
            try:
                expires_at = _helpers.utcnow() + datetime.timedelta(
                    seconds=expires_in
                )
            # datetime이 표현할 수 있는 범위를 넘는 값
            except OverflowError as caught_exc:
                new_exc = exceptions.MalformedResponseError(
                    "expires_in is out of range: {!r}".format(expires_in)
                )
                raise new_exc from caught_exc

        scope = _optional_str(response_data, _SCOPE)

        return cls(
            access_token=access_token,
            id_token=id_token,
            token_type=_optional_str(response_data, _TOKEN_TYPE),
            expires_at=expires_at,
            refresh_token=_optional_str(response_data, _REFRESH_TOKEN),
            scopes=_helpers.string_to_scopes(scope),
        )

    # JSON으로 감싸지 않은 JWT 형식의 ID 토큰으로부터 TokenInfo를 만든다
    # 서명은 검증하지 않고 만료 시각(exp)만 읽어온다
    @classmethod
    def from_id_token(cls, data):
        try:
            id_token = _helpers.from_bytes(data).strip()
        except ValueError as caught_exc:
            new_exc = exceptions.MalformedResponseError(
                "Identity token response is not valid UTF-8"
            )
            raise new_exc from caught_exc

        payload = jwt.decode_payload(id_token)
        exp = payload.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise exceptions.MalformedResponseError(
                "Identity token has no valid exp claim: {!r}".format(exp)
            )
        try:
            expires_at = datetime.datetime.fromtimestamp(
                exp, tz=datetime.timezone.utc
            ).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError) as caught_exc:
            new_exc = exceptions.MalformedResponseError(
                "Identity token exp claim is out of range: {!r}".format(exp)
            )
            raise new_exc from caught_exc

        return cls(id_token=id_token, expires_at=expires_at)


# 문자열 필드만 허용하고 없으면 None을 반환한다
def _optional_str(response_data, key):
    value = response_data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise exceptions.MalformedResponseError(
        "{} should be a string, got {}".format(key, type(value).__name__)
    )
