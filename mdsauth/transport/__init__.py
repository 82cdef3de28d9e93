import abc


# HTTP 응답을 표현하는 추상 클래스
class Response(metaclass=abc.ABCMeta):
    # 상태코드
    @abc.abstractproperty
    def status(self):
        raise NotImplementedError("status must be implemented.")

    # 응답 헤더
    @abc.abstractproperty
    def headers(self):
        raise NotImplementedError("headers must be implemented.")

    # 응답 본문 전체(바이트열)
    @abc.abstractproperty
    def data(self):
        raise NotImplementedError("data must be implemented.")


# HTTP 요청을 보내는 호출 가능한 객체의 추상 클래스
# 상속하는 클래스는 전송 계층에서 발생한 오류를 exceptions.TransportError로 변환해야 한다
class Request(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def __call__(
        self, url, method="GET", body=None, headers=None, timeout=None, **kwargs
    ):
        raise NotImplementedError("__call__ must be implemented.")
