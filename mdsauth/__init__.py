import logging

__version__ = "0.1.0"

# 애플리케이션이 로깅을 설정하지 않으면 아무것도 출력하지 않는다
logging.getLogger(__name__).addHandler(logging.NullHandler())
