import logging

import requests
import requests.exceptions

from mdsauth import exceptions
from mdsauth import transport

_LOGGER = logging.getLogger(__name__)

# 호출자가 타임아웃을 지정하지 않았을 때 사용하는 기본값(초)
_DEFAULT_TIMEOUT = 120


# requests.Response를 transport.Response 인터페이스에 맞게 감싼다
class _Response(transport.Response):
    def __init__(self, response):
        self._response = response

    @property
    def status(self):
        return self._response.status_code

    @property
    def headers(self):
        return self._response.headers

    @property
    def data(self):
        return self._response.content


# requests 라이브러리를 사용하는 동기 전송 계층
class Request(transport.Request):
    def __init__(self, session=None):
        if not session:
            session = requests.Session()

        self.session = session

    def __del__(self):
        try:
            if hasattr(self, "session") and self.session is not None:
                self.session.close()
        except TypeError:
            # 인터프리터 종료 중에는 세션을 닫지 못할 수 있다
            pass

    def __call__(
        self,
        url,
        method="GET",
        body=None,
        headers=None,
        timeout=_DEFAULT_TIMEOUT,
        **kwargs
    ):
        try:
            _LOGGER.debug("Making request: %s %s", method, url)
            response = self.session.request(
                method, url, data=body, headers=headers, timeout=timeout, **kwargs
            )
            return _Response(response)
        # requests에서 발생한 모든 오류를 TransportError로 변환한다
        except requests.exceptions.RequestException as caught_exc:
            new_exc = exceptions.TransportError(caught_exc)
            raise new_exc from caught_exc
