from unittest import mock

import pytest
import requests
import requests.exceptions

from mdsauth import exceptions
from mdsauth import transport
import mdsauth.transport.requests


def make_session(status=200, content=b"{}", headers=None):
    response = mock.create_autospec(requests.Response, instance=True)
    response.status_code = status
    response.content = content
    response.headers = headers or {"Metadata-Flavor": "Google"}

    session = mock.create_autospec(requests.Session, instance=True)
    session.request.return_value = response
    return session


class TestRequest(object):
    def test_default_session(self):
        request = mdsauth.transport.requests.Request()

        assert isinstance(request.session, requests.Session)

    def test_request(self):
        session = make_session(content=b'{"access_token": "x"}')
        request = mdsauth.transport.requests.Request(session)

        response = request(
            url="http://mds/token?scopes=a",
            method="GET",
            body=b"",
            headers={"Metadata-Flavor": "Google"},
        )

        session.request.assert_called_once_with(
            "GET",
            "http://mds/token?scopes=a",
            data=b"",
            headers={"Metadata-Flavor": "Google"},
            timeout=mdsauth.transport.requests._DEFAULT_TIMEOUT,
        )
        assert isinstance(response, transport.Response)
        assert response.status == 200
        assert response.data == b'{"access_token": "x"}'
        assert response.headers["Metadata-Flavor"] == "Google"

    def test_request_timeout(self):
        session = make_session()
        request = mdsauth.transport.requests.Request(session)

        request(url="http://mds", timeout=3)

        assert session.request.call_args[1]["timeout"] == 3

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.Timeout("timed out"),
            requests.exceptions.ChunkedEncodingError("broken"),
        ],
    )
    def test_request_error(self, error):
        session = make_session()
        session.request.side_effect = error
        request = mdsauth.transport.requests.Request(session)

        with pytest.raises(exceptions.TransportError) as excinfo:
            request(url="http://mds")

        assert excinfo.value.__cause__ is error
