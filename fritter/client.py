"""
Client-side cache of server state.

``FritterStore`` keeps the lists a frontend shows and refreshes them by
re-issuing the same GET requests, replacing its copies wholesale each time.
"""
import time
from typing import Any, Callable, Dict, List, Optional

import httpx

ALERT_SECONDS = 3.0


class FritterStore:

    def __init__(self, client: httpx.Client, api_prefix: str = "/api",
                 clock: Callable[[], float] = time.monotonic):
        self.client = client
        self.api_prefix = api_prefix.rstrip("/")
        self.clock = clock

        self.filter: Optional[str] = None  # username to filter freets by, None shows all
        self.freets: List[Dict[str, Any]] = []
        self.quotes: List[Dict[str, Any]] = []
        self.username: Optional[str] = None  # signed in user
        self.highlights: List[Dict[str, Any]] = []
        self.fritform: Optional[Dict[str, Any]] = None
        self._alerts: Dict[str, tuple] = {}

    @property
    def alerts(self) -> Dict[str, str]:
        """Status messages younger than ``ALERT_SECONDS``, keyed by message."""
        now = self.clock()
        self._alerts = {
            message: (status, expires)
            for message, (status, expires) in self._alerts.items()
            if expires > now
        }
        return {message: status for message, (status, _) in self._alerts.items()}

    def alert(self, message: str, status: str) -> None:
        self._alerts[message] = (status, self.clock() + ALERT_SECONDS)

    def set_username(self, username: Optional[str]) -> None:
        self.username = username

    def update_filter(self, filter: Optional[str]) -> None:
        self.filter = filter

    def update_freets(self, freets: List[Dict[str, Any]]) -> None:
        self.freets = freets

    def update_quotes(self, quotes: List[Dict[str, Any]]) -> None:
        self.quotes = quotes

    def update_fritform(self, fritform: Optional[Dict[str, Any]]) -> None:
        self.fritform = fritform

    def _url(self, path: str) -> str:
        return f"{self.api_prefix}{path}"

    def _filter_params(self) -> Dict[str, str]:
        return {"author": self.filter} if self.filter else {}

    def refresh_freets(self) -> List[Dict[str, Any]]:
        response = self.client.get(self._url("/freets"), params=self._filter_params())
        response.raise_for_status()
        self.freets = response.json()
        return self.freets

    def refresh_quotes(self) -> List[Dict[str, Any]]:
        response = self.client.get(self._url("/quotes"), params=self._filter_params())
        response.raise_for_status()
        self.quotes = response.json()
        return self.quotes

    def refresh_highlights(self) -> List[Dict[str, Any]]:
        if self.username is None:
            self.highlights = []
            return self.highlights
        response = self.client.get(self._url("/users/highlights"), params={"author": self.username})
        response.raise_for_status()
        self.highlights = response.json()
        return self.highlights

    def refresh_fritform(self) -> Optional[Dict[str, Any]]:
        response = self.client.get(self._url("/fritforms"))
        self.fritform = response.json() if response.is_success else None
        return self.fritform
