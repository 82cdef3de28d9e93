import asyncio
import logging

import aiohttp

from mdsauth import exceptions
from mdsauth import transport

_LOGGER = logging.getLogger(__name__)

# 호출자가 타임아웃을 지정하지 않았을 때 사용하는 기본값(초)
_DEFAULT_TIMEOUT = 180


# 본문을 이미 모두 읽어들인 aiohttp 응답
class _Response(transport.Response):
    def __init__(self, response, data):
        self._response = response
        self._data = data

    @property
    def status(self):
        return self._response.status

    @property
    def headers(self):
        return self._response.headers

    @property
    def data(self):
        return self._data


# aiohttp를 사용하는 비동기 전송 계층
class Request(transport.Request):
    def __init__(self, session=None):
        # 세션은 실행 중인 이벤트 루프 안에서 만들어야 하므로 첫 요청 시 생성한다
        self.session = session
        self._owns_session = session is None

    async def __call__(
        self,
        url,
        method="GET",
        body=None,
        headers=None,
        timeout=_DEFAULT_TIMEOUT,
        **kwargs
    ):
        try:
            if self.session is None:
                self.session = aiohttp.ClientSession()
            _LOGGER.debug("Making request: %s %s", method, url)
            async with self.session.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout),
                **kwargs
            ) as response:
                # 응답 본문 전체를 읽은 뒤에만 결과를 반환한다
                data = await response.read()
                return _Response(response, data)

        except aiohttp.ClientError as caught_exc:
            new_exc = exceptions.TransportError(caught_exc)
            raise new_exc from caught_exc

        except asyncio.TimeoutError as caught_exc:
            new_exc = exceptions.TransportError(caught_exc)
            raise new_exc from caught_exc

    # 직접 생성한 세션만 닫는다
    async def close(self):
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
