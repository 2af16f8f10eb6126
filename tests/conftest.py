import pytest

from reqform.client.factory import RequestFactory
from reqform.http.message import MessageParser


@pytest.fixture
def raw_post() -> str:
    """A well-formed POST message with CRLF line endings."""
    return (
        "POST /submit?lang=en&tag=a&tag=b HTTP/1.1\r\n"
        "Host: example.com\r\n"
        "Content-Type: text/plain\r\n"
        "X-Foo: first\r\n"
        "x-foo: second\r\n"
        "\r\n"
        "hello=world"
    )


@pytest.fixture
def parser() -> MessageParser:
    """MessageParser with the default configuration."""
    return MessageParser()


@pytest.fixture
def factory() -> RequestFactory:
    """RequestFactory with the default configuration."""
    return RequestFactory()
