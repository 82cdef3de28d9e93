from mdsauth.compute_engine import flow as flow_sync


# 비동기 전송 계층(transport._aiohttp_requests.Request 등)과 함께 쓰는 플로우
# 작업이 취소되면 asyncio.CancelledError가 그대로 전파되고 일부만 해석된 결과는 반환하지 않는다
class MetadataTokenFlow(flow_sync.MetadataTokenFlow):
    async def fetch_token(self, request, scopes=(), timeout=None):
        url, headers, request_kwargs = self._prepare_request(scopes, timeout)
        response = await request(
            url=url, method="GET", body=b"", headers=headers, **request_kwargs
        )
        return self._handle_response(url, response)
