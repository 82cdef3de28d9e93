# 필요한 모듈 임포트
from mdsauth.compute_engine.flow import FlowOptions
from mdsauth.compute_engine.flow import MetadataTokenFlow

# 외부에 노출되는 클래스 선별
__all__ = ["FlowOptions", "MetadataTokenFlow"]
