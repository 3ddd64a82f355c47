"""HTTP plumbing shared by every API mixin."""

from __future__ import annotations

import json
import re
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests

from .payload import decode, encode, query_params

BASE_URL_FORMAT = "https://{subdomain}.zendesk.com/api/v2"
DEFAULT_HEADERS = {
    "User-Agent": "zendesk_client",
    "Content-Type": "application/json",
}

_SUBDOMAIN = re.compile(r"[a-z0-9][a-z0-9-]+[a-z0-9]")
_NO_BODY = object()


class APIError(Exception):
    """The API answered with an unexpected status code."""

    def __init__(self, status, body):
        self.status = status
        self.body = body
        super().__init__(status, body)

    def __str__(self):
        if isinstance(self.body, bytes):
            text = self.body.decode("utf-8", "replace")
        else:
            text = str(self.body)
        return f"{self.status}: {text}"


class OptionsError(ValueError):
    """Options required by a call were missing or invalid."""

    def __init__(self, options):
        self.options = options
        super().__init__(f"invalid options: {options!r}")


def add_options(path, options):
    """Replace the query string of ``path`` with one built from ``options``."""
    parts = urlsplit(path)
    return urlunsplit(parts._replace(query=urlencode(query_params(options))))


def _load(body: bytes) -> dict:
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object in the response")
    return data


class BaseClient:
    """Sends authenticated JSON requests to the API."""

    def __init__(
        self,
        session=None,
        *,
        subdomain=None,
        endpoint_url=None,
        email=None,
        secret=None,
        bearer_token=None,
    ):
        self.session = session if session is not None else requests.Session()
        self.headers = dict(DEFAULT_HEADERS)
        self.base_url = None
        self.email = email
        self.secret = secret
        self.bearer_token = bearer_token
        if subdomain is not None:
            self.use_subdomain(subdomain)
        if endpoint_url is not None:
            self.base_url = endpoint_url

    def use_subdomain(self, subdomain):
        """Point the client at the given account subdomain."""
        if not isinstance(subdomain, str) or not _SUBDOMAIN.fullmatch(subdomain):
            raise ValueError(f"{subdomain} is invalid subdomain")
        self.base_url = BASE_URL_FORMAT.format(subdomain=subdomain)

    def _url(self, path: str) -> str:
        if self.base_url is None:
            raise RuntimeError("client has no subdomain or endpoint URL")
        return self.base_url + path

    def _send(self, method, path, ok, data=_NO_BODY) -> bytes:
        headers = dict(self.headers)
        auth = None
        if self.bearer_token is not None:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        elif self.email is not None or self.secret is not None:
            auth = (self.email or "", self.secret or "")
        body = None
        if data is not _NO_BODY:
            body = json.dumps(
                encode(data), ensure_ascii=False, separators=(",", ":")
            ).encode("utf-8")
        response = self.session.request(
            method, self._url(path), data=body, headers=headers, auth=auth
        )
        content = response.content
        if response.status_code not in ok:
            raise APIError(response.status_code, content)
        return content

    def get(self, path):
        """GET ``path`` and return the raw response body."""
        return self._send("GET", path, {200})

    def post(self, path, data):
        """POST ``data`` as JSON and return the raw response body."""
        return self._send("POST", path, {200, 201}, data)

    def put(self, path, data):
        """PUT ``data`` as JSON and return the raw response body."""
        return self._send("PUT", path, {200, 204}, data)

    def delete(self, path):
        """DELETE ``path``; the API must answer 204."""
        self._send("DELETE", path, {204})

    def _get_json(self, path) -> dict:
        return _load(self.get(path))

    def _post_json(self, path, data) -> dict:
        return _load(self.post(path, data))

    def _put_json(self, path, data) -> dict:
        return _load(self.put(path, data))

    def _list(self, path, key, cls):
        result = self._get_json(path)
        items = [decode(cls, item) for item in result.get(key) or []]
        page = {k: v for k, v in result.items() if k != key}
        return items, page