"""Cookie jars the cookie persistence backend writes through."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from starlette.responses import Response

SameSite = Literal["lax", "strict", "none"]


@dataclass(frozen=True)
class CookieAttributes:
    max_age: int
    path: str = "/"
    samesite: SameSite = "lax"


class CookieJar(ABC):
    @abstractmethod
    def get(self, name: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, name: str, value: str, attributes: CookieAttributes) -> None:
        raise NotImplementedError


class MemoryCookieJar(CookieJar):
    """In-process jar, used by SiteSession and tests."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self.attributes: dict[str, CookieAttributes] = {}

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str, attributes: CookieAttributes) -> None:
        if attributes.max_age <= 0:
            self._values.pop(name, None)
            self.attributes.pop(name, None)
            return
        self._values[name] = value
        self.attributes[name] = attributes

    def clear(self) -> None:
        self._values.clear()
        self.attributes.clear()


class HttpCookieJar(CookieJar):
    """
    Reads cookies sent with a request and writes Set-Cookie headers on the response.

    Values written during the request are visible to later reads in the same request.
    """

    def __init__(self, request_cookies: Mapping[str, str], response: Response) -> None:
        self._request_cookies = request_cookies
        self._response = response
        self._pending: dict[str, str] = {}

    def get(self, name: str) -> str | None:
        if name in self._pending:
            return self._pending[name]
        return self._request_cookies.get(name)

    def set(self, name: str, value: str, attributes: CookieAttributes) -> None:
        self._response.set_cookie(
            key=name,
            value=value,
            max_age=attributes.max_age,
            path=attributes.path,
            samesite=attributes.samesite,
        )
        self._pending[name] = value
