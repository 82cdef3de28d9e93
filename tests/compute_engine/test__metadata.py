import importlib
import os
from unittest import mock

from mdsauth.compute_engine import _metadata
from mdsauth.compute_engine import flow

TOKEN_URL = (
    "http://metadata.google.internal/computeMetadata/v1/"
    "instance/service-accounts/default/token"
)
IDENTITY_URL = (
    "http://metadata.google.internal/computeMetadata/v1/"
    "instance/service-accounts/default/identity"
)


def test_build_token_url_scopes():
    url = _metadata.build_token_url("http://mds/token", False, ["a", "b"])

    assert url == "http://mds/token?scopes=a,b"


def test_build_token_url_audience():
    url = _metadata.build_token_url("http://mds/identity", True, ["aud"])

    assert url == "http://mds/identity?audience=aud"


def test_default_url():
    assert _metadata.default_url(False) == TOKEN_URL
    assert _metadata.default_url(True) == IDENTITY_URL


def test_token_request_headers_are_copies():
    headers = _metadata.token_request_headers()
    headers["extra"] = "1"

    assert _metadata.token_request_headers() == {"Metadata-Flavor": "Google"}


def test_default_urls_ignore_environment():
    env = {
        "GCE_METADATA_HOST": "other.example:80",
        "GCE_METADATA_ROOT": "legacy.example",
    }
    try:
        with mock.patch.dict(os.environ, env):
            importlib.reload(_metadata)

            assert _metadata.DEFAULT_TOKEN_URL == TOKEN_URL
            assert _metadata.DEFAULT_IDENTITY_URL == IDENTITY_URL
            assert flow.MetadataTokenFlow().metadata_url == TOKEN_URL
            assert flow.MetadataTokenFlow(id_token=True).metadata_url == IDENTITY_URL
    finally:
        importlib.reload(_metadata)
