"""Tests for the served frontend's initial view state."""

from html.parser import HTMLParser

import pytest
from httpx import AsyncClient


class _ControlCollector(HTMLParser):
    """Collect attributes of form inputs and buttons by id."""

    def __init__(self) -> None:
        super().__init__()
        self.controls: dict[str, dict[str, str | None]] = {}

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attributes = dict(attrs)
        if tag in ("input", "button") and attributes.get("id"):
            self.controls[attributes["id"]] = attributes  # type: ignore[index]


async def _controls(client: AsyncClient) -> dict[str, dict[str, str | None]]:
    response = await client.get("/")
    assert response.status_code == 200
    collector = _ControlCollector()
    collector.feed(response.text)
    return collector.controls


class TestInitialViewingState:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "email", "interests"])
    async def test_inputs_start_disabled(self, client: AsyncClient, field: str):
        controls = await _controls(client)

        assert "disabled" in controls[field]

    @pytest.mark.asyncio
    async def test_edit_visible_and_save_hidden(self, client: AsyncClient):
        controls = await _controls(client)

        assert "hidden" not in controls["edit-btn"]
        assert "hidden" in controls["save-btn"]
        assert controls["save-btn"]["type"] == "submit"


class TestControllerScript:
    @pytest.mark.asyncio
    async def test_script_targets_profile_routes(self, client: AsyncClient):
        response = await client.get("/script.js")

        assert response.status_code == 200
        assert "fetch('/get-profile')" in response.text
        assert "fetch('/update-profile'" in response.text
        assert "alert(body.error" in response.text
