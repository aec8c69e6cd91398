"""
In-process fake of the REST backend, mounted as a requests transport adapter.
"""
import json
from urllib.parse import parse_qs, urlparse

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from evservice.client import ApiClient
from evservice.config import Settings
from evservice.notify import ErrorThrottle, Notifier, RecordingSink
from evservice.resources import EVServiceAPI
from evservice.storage import MemoryTokenStore

BASE_URL = "http://api.test"


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend(BaseAdapter):
    """Answers requests from canned routes and records what was sent."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.calls = []
        self.fail_with = None
        self.served = set()

    def add(self, method, path, status=200, body=None, raw=None, content_type="application/json"):
        """Queue a response; the last queued response for a route repeats."""
        self.routes.setdefault((method.upper(), path), []).append(
            (status, body, raw, content_type)
        )
        return self

    def send(self, request, **kwargs):
        self.calls.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        path = urlparse(request.url).path
        key = (request.method, path)
        queue = self.routes.get(key)
        if queue and key in self.served and len(queue) > 1:
            # The head was already served while it was the last entry.
            queue.pop(0)
        self.served.discard(key)
        if not queue:
            status, body, raw, content_type = 404, {"success": False, "message": "Not Found"}, None, "application/json"
        elif len(queue) == 1:
            status, body, raw, content_type = queue[0]
            self.served.add(key)
        else:
            status, body, raw, content_type = queue.pop(0)

        response = requests.Response()
        response.status_code = status
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        response.headers = CaseInsensitiveDict({"Content-Type": content_type})
        if raw is not None:
            response._content = raw
        elif body is not None:
            response._content = json.dumps(body).encode("utf-8")
        else:
            response._content = b""
        return response

    def close(self):
        pass

    # Inspection helpers

    @property
    def last(self):
        return self.calls[-1]

    def last_params(self):
        return parse_qs(urlparse(self.last.url).query)

    def last_json(self):
        return json.loads(self.last.body) if self.last.body else None

    def paths(self):
        return [(call.method, urlparse(call.url).path) for call in self.calls]


def make_api(token=None, clock=None, on_unauthorized=None):
    """Return (api, backend, sink) wired to a fresh fake backend."""
    backend = FakeBackend()
    session = requests.Session()
    session.mount("http://", backend)
    sink = RecordingSink()
    settings = Settings(api_url=BASE_URL, error_throttle_seconds=5)
    notifier = Notifier(sink=sink, throttle=ErrorThrottle(5, clock or FakeClock()))
    client = ApiClient(
        settings=settings,
        token_store=MemoryTokenStore(token),
        notifier=notifier,
        session=session,
        on_unauthorized=on_unauthorized,
    )
    return EVServiceAPI(client), backend, sink


def user_payload(user_id="u1", role="staff", **extra):
    user = {
        "_id": user_id,
        "email": f"{user_id}@evcenter.vn",
        "firstName": "Lan",
        "lastName": "Nguyen",
        "phone": "0901234567",
        "role": role,
        "isActive": True,
    }
    user.update(extra)
    return user
