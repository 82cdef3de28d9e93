# 이 패키지에서 발생하는 모든 예외의 기반 클래스
class GoogleAuthError(Exception):
    def __init__(self, *args, **kwargs):
        super(GoogleAuthError, self).__init__(*args)
        retryable = kwargs.get("retryable", False)
        self._retryable = retryable

    # 호출자가 재시도를 고려해도 되는 오류인지 여부
    @property
    def retryable(self):
        return self._retryable


# HTTP 교환 자체가 완료되지 못했거나 성공이 아닌 상태코드를 받은 경우
class TransportError(GoogleAuthError):
    def __init__(self, *args, **kwargs):
        # 상태코드를 받았다면 응답 객체를 두 번째 인자로 함께 전달한다
        super(TransportError, self).__init__(*args, **kwargs)
        self.response = args[1] if len(args) > 1 else None


# 응답 본문을 TokenInfo 형태로 해석할 수 없는 경우
class MalformedResponseError(GoogleAuthError, ValueError):
    pass


# 서버가 OAuth 2.0 오류 응답을 돌려준 경우
class OAuthError(GoogleAuthError):
    def __init__(self, error, error_description=None, error_uri=None, **kwargs):
        message = error
        if error_description:
            message = "{}: {}".format(error, error_description)
        super(OAuthError, self).__init__(message, **kwargs)
        self.error = error
        self.error_description = error_description
        self.error_uri = error_uri


# 토큰 갱신 계층에서 플로우의 실패를 감쌀 때 사용한다
class RefreshError(GoogleAuthError):
    pass
