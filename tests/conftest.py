"""Shared fixtures: synthetic at-a-glance pages and stubbed HTTP clients."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

import httpx
import pytest

BASE_URL = "http://www.bbc.co.uk"

Entry = Tuple[str, str, str, str]


def entry_lines(start: str, end: str, href: str, title: str) -> List[str]:
    return [
        '<li class="programme">',
        f'    <span class="starttime">{start}</span><span class="endtime">&#8211;{end}</span>',
        f'    <a class="url" href="{href}">',
        f'        <span class="title">{title}</span>',
        "    </a>",
        "</li>",
    ]


@pytest.fixture()
def build_page() -> Callable[[List[Entry]], str]:
    """Return a function rendering (start, end, href, title) tuples as a schedule page."""

    def _build(entries: List[Entry]) -> str:
        lines = ["<html>", "<body>", "", '<ul class="schedule">']
        for entry in entries:
            lines.extend(entry_lines(*entry))
            lines.append("")
        lines.extend(["</ul>", "</body>", "</html>"])
        return "\n".join(lines)

    return _build


class RecordingTransport:
    """Answers every request with a fixed response and remembers the URLs asked for."""

    def __init__(self, body: str = "", status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requested: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requested.append(str(request.url))
        return httpx.Response(self.status_code, text=self.body)


@pytest.fixture()
def stub_client() -> Callable[..., Tuple[httpx.Client, RecordingTransport]]:
    """Return a factory for httpx clients backed by a RecordingTransport."""
    clients: List[httpx.Client] = []

    def _make(body: str = "", status_code: int = 200) -> Tuple[httpx.Client, RecordingTransport]:
        transport = RecordingTransport(body, status_code)
        client = httpx.Client(transport=httpx.MockTransport(transport))
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        client.close()


@pytest.fixture()
def two_entry_page(build_page) -> str:
    return build_page(
        [
            ("06:30", "10:00", "/programmes/b00x1", "Greg James"),
            ("10:00", "12:45", "/programmes/b00x2", "Fearne Cotton"),
        ]
    )


@pytest.fixture()
def radio1_params() -> Dict[str, object]:
    return {"channel": "radio1", "location": "england", "year": 2011, "month": 4, "day": 4}
