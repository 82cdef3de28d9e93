from mdsauth import _helpers

# 메타데이터 서버의 루트 URL
_METADATA_ROOT = "http://metadata.google.internal/computeMetadata/v1/"

# 기본 서비스 계정의 액세스 토큰 엔드포인트
DEFAULT_TOKEN_URL = _METADATA_ROOT + "instance/service-accounts/default/token"
# 기본 서비스 계정의 ID 토큰 엔드포인트
DEFAULT_IDENTITY_URL = _METADATA_ROOT + "instance/service-accounts/default/identity"

# HTTP 요청 헤더의 이름과 값
_METADATA_FLAVOR_HEADER = "Metadata-Flavor"
_METADATA_FLAVOR_VALUE = "Google"
_METADATA_HEADERS = {_METADATA_FLAVOR_HEADER: _METADATA_FLAVOR_VALUE}

# 토큰 종류에 따른 쿼리 파라미터 이름
# ID 토큰 엔드포인트는 스코프 자리에 audience를 받는다
_SCOPES_PARAM = "scopes"
_AUDIENCE_PARAM = "audience"


# 토큰 종류에 맞는 기본 URL을 반환한다
def default_url(id_token):
    return DEFAULT_IDENTITY_URL if id_token else DEFAULT_TOKEN_URL


# 토큰 요청 URL을 만든다
# 값은 URL 인코딩하지 않고 그대로 이어붙인다
def build_token_url(base_url, id_token, scopes):
    param = _AUDIENCE_PARAM if id_token else _SCOPES_PARAM
    return "{}?{}={}".format(base_url, param, _helpers.scopes_to_string(scopes))


# 토큰 요청에 사용할 헤더의 복사본을 반환한다
def token_request_headers():
    return _METADATA_HEADERS.copy()
