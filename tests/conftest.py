"""Shared fixtures: a local stand-in for the Xero API that records requests."""

from dataclasses import dataclass

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from xero_connector import ConnectorConfig, XeroClient

CONTACTS_XML = """<Response xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <Status>OK</Status>
  <Contacts>
    <Contact><ContactID>bd2270c3-8706-4c11-9cfb-000b551c3f51</ContactID><Name>Acme Ltd</Name></Contact>
  </Contacts>
</Response>"""


@dataclass
class RecordedRequest:
    """A request as received by the fake Xero API."""

    method: str
    path: str
    url: str
    query: dict[str, str]
    headers: dict[str, str]
    body: bytes


class FakeXero:
    """Records every request and answers with a configurable response."""

    def __init__(self):
        self.requests: list[RecordedRequest] = []
        self.status = 200
        self.response_body = CONTACTS_XML
        self.content_type = "text/xml"
        self.base_url = ""

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                url=f"{request.scheme}://{request.host}{request.raw_path}",
                query=dict(request.query),
                headers=dict(request.headers),
                body=body,
            )
        )
        return web.Response(
            status=self.status,
            text=self.response_body,
            content_type=self.content_type,
            charset="utf-8",
        )

    @property
    def last(self) -> RecordedRequest:
        assert self.requests, "no request reached the fake Xero API"
        return self.requests[-1]


@pytest.fixture(autouse=True)
def allow_local_http(monkeypatch):
    # The fake API is served over plain http on 127.0.0.1
    monkeypatch.setenv("AUTHLIB_INSECURE_TRANSPORT", "1")


@pytest_asyncio.fixture
async def fake_xero():
    fake = FakeXero()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.base_url = str(server.make_url("/api.xro/2.0/"))
    yield fake
    await server.close()


@pytest.fixture
def config(fake_xero) -> ConnectorConfig:
    return ConnectorConfig(
        api_url=fake_xero.base_url,
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        access_key="access-key",
        access_secret="access-secret",
        timeout=10,
    )


@pytest.fixture
def client(config) -> XeroClient:
    return XeroClient(config)
