from __future__ import annotations

import io
import json

import httpx
import pytest
import yaml

from meshery_app_view.client import ApplicationClient
from meshery_app_view.errors import (
    ApiError,
    ConflictingSelectorsError,
    InvalidOutputFormatError,
    NoSelectorProvidedError,
    NotFoundError,
)
from meshery_app_view.projection import SUMMARY_SEPARATOR
from meshery_app_view.view import view_applications

from .payloads import APP_ID, OTHER_ID, application, page


def run(server, args, **kwargs) -> str:
    out = io.StringIO()
    client = ApplicationClient(base_url="http://meshery.test", transport=server.transport)
    with client:
        view_applications(client, args, out=out, **kwargs)
    return out.getvalue()


def test_by_name_writes_summary_then_yaml(reply) -> None:
    server = reply({"total_count": 1, "applications": [{"name": "my-app", "id": APP_ID}]})
    output = run(server, ["my-app"])

    summary, structured = output.split(SUMMARY_SEPARATOR + "\n")
    assert summary.splitlines()[0] == "Name: my-app"
    assert yaml.safe_load(structured)["ID"] == APP_ID


def test_all_as_json_drops_other_keys(reply) -> None:
    payload = page(application("a"), application("b", OTHER_ID))
    output = run(reply(payload), [], select_all=True, output_format="json")
    assert json.loads(output) == {"applications": payload["applications"]}
    assert output.startswith('{\n  "applications"')


def test_by_id_renders_whole_payload(reply) -> None:
    payload = application("my-app")
    output = run(reply(payload), [APP_ID])
    assert yaml.safe_load(output) == payload
    assert "Name:" not in output


def test_missing_selector_makes_no_request(reply) -> None:
    server = reply(page())
    with pytest.raises(NoSelectorProvidedError):
        run(server, [])
    assert server.requests == []


def test_conflicting_selectors_make_no_request(reply) -> None:
    server = reply(page())
    with pytest.raises(ConflictingSelectorsError):
        run(server, ["my-app"], select_all=True)
    assert server.requests == []


def test_invalid_format_fails_before_fetching(reply) -> None:
    server = reply(page(application("my-app")))
    with pytest.raises(InvalidOutputFormatError):
        run(server, ["my-app"], output_format="xml")
    assert server.requests == []


def test_unknown_id_is_not_decoded() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(404, content=b"this is not json")

    out = io.StringIO()
    with ApplicationClient(
        base_url="http://meshery.test", transport=httpx.MockTransport(handler)
    ) as client:
        with pytest.raises(ApiError, match="possible invalid ID"):
            view_applications(client, [APP_ID], out=out)
    assert out.getvalue() == ""


def test_no_output_when_name_missing(reply) -> None:
    out = io.StringIO()
    with ApplicationClient(
        base_url="http://meshery.test", transport=reply(page()).transport
    ) as client:
        with pytest.raises(NotFoundError):
            view_applications(client, ["my-app"], out=out)
    assert out.getvalue() == ""
