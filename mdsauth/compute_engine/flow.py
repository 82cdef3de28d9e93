import collections
import http.client as http_client
import logging

from mdsauth import exceptions
from mdsauth.compute_engine import _metadata
from mdsauth.token_info import TokenInfo

_LOGGER = logging.getLogger(__name__)


# 플로우 생성 옵션 (주로 테스트에서 URL을 바꾸기 위해 사용한다)
FlowOptions = collections.namedtuple(
    "FlowOptions", ["metadata_url", "id_token"], defaults=(None, False)
)


# 인스턴스의 기본 서비스 계정 토큰을 메타데이터 서버에서 가져오는 플로우
# 요청 자체에는 자격 증명이 없고, 인스턴스 내부에서 보낸 요청이라는 사실로 인가된다
class MetadataTokenFlow(object):
    def __init__(self, options=None, logger=None, **kwargs):
        if options is not None and kwargs:
            raise ValueError(
                "Pass either options or metadata_url/id_token keywords, not both."
            )
        if options is None:
            options = FlowOptions(**kwargs)

        # 생성 이후에는 토큰 종류가 바뀌지 않는다
        self._id_token = bool(options.id_token)
        if options.metadata_url is None:
            self._metadata_url = _metadata.default_url(self._id_token)
        else:
            self._metadata_url = options.metadata_url
        self._logger = logger if logger is not None else _LOGGER

    @property
    def metadata_url(self):
        return self._metadata_url

    @property
    def id_token(self):
        return self._id_token

    # 메타데이터 서버에 토큰을 요청한다
    # ID 토큰 모드에서는 scopes에 audience가 들어오며 audience 파라미터로 전송된다
    def fetch_token(self, request, scopes=(), timeout=None):
        url, headers, request_kwargs = self._prepare_request(scopes, timeout)
        response = request(
            url=url, method="GET", body=b"", headers=headers, **request_kwargs
        )
        return self._handle_response(url, response)

    def _prepare_request(self, scopes, timeout):
        url = _metadata.build_token_url(self._metadata_url, self._id_token, scopes)
        headers = _metadata.token_request_headers()
        request_kwargs = {}
        if timeout is not None:
            request_kwargs["timeout"] = timeout
        self._logger.debug(
            "Requesting token from metadata server: GET %s headers=%s", url, headers
        )
        return url, headers, request_kwargs

    def _handle_response(self, url, response):
        self._logger.debug(
            "Received response; status: %s, headers: %s, body: %r",
            response.status,
            dict(response.headers),
            response.data,
        )

        # 2xx가 아닌 응답은 본문을 해석하지 않는다
        if not _is_success(response.status):
            raise exceptions.TransportError(
                "Failed to retrieve {} from the Google Compute Engine "
                "metadata service. Status: {} Response:\n{}".format(
                    url, response.status, response.data
                ),
                response,
            )

        return self._parse_token_info(response.data)

    def _parse_token_info(self, data):
        # ID 토큰 엔드포인트는 JSON이 아닌 JWT 문자열 자체를 돌려준다
        if self._id_token and not _looks_like_json_object(data):
            return TokenInfo.from_id_token(data)
        return TokenInfo.from_json(data)


def _looks_like_json_object(data):
    if isinstance(data, str):
        return data.lstrip().startswith("{")
    return data.lstrip().startswith(b"{")


def _is_success(status):
    return http_client.OK <= status < http_client.MULTIPLE_CHOICES
