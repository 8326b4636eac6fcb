"""Shared fixtures for update check tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from themecheck.features.update_check import UpdateCandidate, UpdateImpactChecker
from themecheck.platform.db import InMemoryOptionStore

SUCCESS_PAYLOAD: dict[str, Any] = {
    "status_code": "200",
    "data": {"global_diff": 5, "gallery": "https://x/y"},
}


class FakeImpactAPI:
    """Record requests and replay a canned payload or error."""

    def __init__(self, payload: object = None, error: Exception | None = None) -> None:
        self.payload: object = SUCCESS_PAYLOAD if payload is None else payload
        self.error = error
        self.calls: list[UpdateCandidate] = []

    def request_impact(self, candidate: UpdateCandidate) -> Mapping[str, Any]:
        self.calls.append(candidate)
        if self.error is not None:
            raise self.error
        return self.payload  # pyright: ignore[reportReturnType] - malformed payloads on purpose


@pytest.fixture
def store() -> InMemoryOptionStore:
    return InMemoryOptionStore()


@pytest.fixture
def api() -> FakeImpactAPI:
    return FakeImpactAPI()


@pytest.fixture
def checker(store: InMemoryOptionStore, api: FakeImpactAPI) -> UpdateImpactChecker:
    return UpdateImpactChecker(store=store, api=api, secret="test-secret")


@pytest.fixture
def api_factory() -> type[FakeImpactAPI]:
    return FakeImpactAPI
