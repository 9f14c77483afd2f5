"""Unit tests for the github-activity command."""

from __future__ import annotations

import typing as typ

import httpx
import pytest

from ghactivity import cli
from ghactivity.github import GitHubEventsClient, GitHubEventsConfig
from ghactivity.logging import normalize_log_level
from tests.helpers.event_builders import EventSpec
from tests.helpers.femtologging_capture import capture_femto_logs

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_Handler = typ.Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the caller's env and global logging."""
    for name in (
        "GHACTIVITY_API_URL",
        "GHACTIVITY_TIMEOUT_S",
        "GHACTIVITY_USER_AGENT",
        "GHACTIVITY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        cli, "configure_logging", lambda level: (level.upper(), False)
    )


@pytest.fixture
def serve(
    monkeypatch: pytest.MonkeyPatch,
) -> cabc.Callable[[_Handler], list[httpx.Request]]:
    """Route the CLI's client through an httpx MockTransport."""

    def _install(handler: _Handler) -> list[httpx.Request]:
        requests: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def _factory(config: GitHubEventsConfig) -> GitHubEventsClient:
            http_client = httpx.Client(transport=httpx.MockTransport(_recording))
            return GitHubEventsClient(config, http_client=http_client)

        monkeypatch.setattr(cli, "GitHubEventsClient", _factory)
        return requests

    return _install


@pytest.mark.parametrize("argv", [[], ["alice", "bob"]])
def test_wrong_argument_count_is_a_usage_error(
    argv: list[str],
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Anything but exactly one username exits 2 without fetching."""
    requests = serve(lambda _request: httpx.Response(200, json=[]))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 2
    assert requests == []
    assert "usage: github-activity" in capsys.readouterr().err


def test_prints_summary_for_user(
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A successful run prints one line per rendered rule and returns 0."""
    specs = [
        EventSpec(event_type="WatchEvent", login="alice", repo="r1", minute=4),
        EventSpec(
            event_type="PushEvent", login="alice", repo="octo/demo", commit_count=3
        ),
    ]
    requests = serve(
        lambda _request: httpx.Response(200, json=[spec.as_json() for spec in specs])
    )

    assert cli.main(["alice"]) == 0

    assert [request.url.path for request in requests] == ["/users/alice/events"]
    out = capsys.readouterr().out
    assert out == "- alice pushed 3 commits (octo/demo)\n- alice starred r1\n"


def test_prints_no_activity_message(
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An empty feed is not an error."""
    serve(lambda _request: httpx.Response(200, json=[]))

    assert cli.main(["quiet"]) == 0
    assert capsys.readouterr().out == "Specified user has no public activity\n"


@pytest.mark.parametrize(
    ("response", "fragment"),
    [
        pytest.param(
            httpx.Response(404, json={"message": "Not Found"}),
            "HTTP 404: Not Found",
            id="http-error",
        ),
        pytest.param(
            httpx.Response(200, text="<html>rate limited</html>"),
            "not valid",
            id="decode-error",
        ),
    ],
)
def test_fetch_failures_exit_1_without_output(
    response: httpx.Response,
    fragment: str,
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """HTTP and decode failures print a message on stderr and nothing on stdout."""
    serve(lambda _request: response)

    assert cli.main(["alice"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert fragment in captured.err


def test_transport_failure_exits_1(
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Network errors are fatal."""

    def _fail(request: httpx.Request) -> httpx.Response:
        msg = "name resolution failed"
        raise httpx.ConnectError(msg, request=request)

    serve(_fail)

    assert cli.main(["alice"]) == 1
    assert "name resolution failed" in capsys.readouterr().err


def test_invalid_configuration_exits_1(
    monkeypatch: pytest.MonkeyPatch,
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Malformed settings stop the run before any request."""
    requests = serve(lambda _request: httpx.Response(200, json=[]))
    monkeypatch.setenv("GHACTIVITY_TIMEOUT_S", "never")

    assert cli.main(["alice"]) == 1

    assert requests == []
    assert "GHACTIVITY_TIMEOUT_S" in capsys.readouterr().err


def test_uses_configured_api_url(
    monkeypatch: pytest.MonkeyPatch,
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
) -> None:
    """GHACTIVITY_API_URL redirects the request."""
    requests = serve(lambda _request: httpx.Response(200, json=[]))
    monkeypatch.setenv("GHACTIVITY_API_URL", "https://ghe.example/api/v3")

    assert cli.main(["alice"]) == 0

    assert str(requests[0].url) == "https://ghe.example/api/v3/users/alice/events"


def test_configures_logging_from_env(
    monkeypatch: pytest.MonkeyPatch,
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
) -> None:
    """GHACTIVITY_LOG_LEVEL is handed to the logging setup."""
    seen: list[str] = []

    def _configure(level: str) -> tuple[str, bool]:
        seen.append(level)
        return (level.upper(), False)

    monkeypatch.setattr(cli, "configure_logging", _configure)
    monkeypatch.setenv("GHACTIVITY_LOG_LEVEL", "debug")
    serve(lambda _request: httpx.Response(200, json=[]))

    assert cli.main(["alice"]) == 0
    assert seen == ["debug"]


def test_unencodable_username_exits_1(
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A login that cannot form a URL is reported, not raised."""
    requests = serve(lambda _request: httpx.Response(200, json=[]))

    assert cli.main(["bad\x01name"]) == 1

    assert requests == []
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_invalid_log_level_logs_warning(
    monkeypatch: pytest.MonkeyPatch,
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
) -> None:
    """An unknown GHACTIVITY_LOG_LEVEL falls back with a warning."""
    monkeypatch.setattr(cli, "configure_logging", normalize_log_level)
    monkeypatch.setenv("GHACTIVITY_LOG_LEVEL", "loud")
    serve(lambda _request: httpx.Response(200, json=[]))

    with capture_femto_logs("ghactivity.cli") as capture:
        assert cli.main(["alice"]) == 0
        capture.wait_for_count(1)

    assert capture.messages == [
        "Invalid GHACTIVITY_LOG_LEVEL 'loud', falling back to WARNING"
    ]


def test_fetch_failure_logs_error(
    serve: cabc.Callable[[_Handler], list[httpx.Request]],
) -> None:
    """Fetch failures emit an ERROR record alongside the stderr message."""
    serve(lambda _request: httpx.Response(404, json={"message": "Not Found"}))

    with capture_femto_logs("ghactivity.cli") as capture:
        assert cli.main(["ghost"]) == 1
        capture.wait_for_count(1)

    [record] = capture.records
    assert record.level.upper().startswith("ERROR")
    assert record.message == (
        "Fetching activity for ghost failed: GitHub events HTTP 404: Not Found"
    )
