"""End-to-end tests for the synq command tree."""

import io
import json
import sys

import pytest
from rich.console import Console

from synq.core.config import DEFAULT_BASE_URL

from conftest import TEST_API_KEY

AUTHENTICATED_COMMANDS = [
    ["video", "create", "--title", "Intro"],
    ["video", "details", "abc"],
    ["video", "upload", "abc"],
    ["video", "update", "abc", "--title", "New"],
    ["video", "query"],
    ["stream", "--title", "Live"],
    ["uploader", "abc"],
]


class TestHelp:
    """Help output and argument errors."""

    def test_no_arguments_prints_help(self, run_cli, capsys):
        """Should show the command overview and exit 0."""
        assert run_cli() == 0
        out = capsys.readouterr().out
        assert "Available Commands" in out
        assert "video update" in out

    def test_help_for_one_command(self, run_cli, capsys):
        assert run_cli("help", "video", "update") == 0
        assert "synq video update <video-id>" in capsys.readouterr().out

    def test_help_for_group(self, run_cli, capsys):
        """Should describe every subcommand of a group."""
        assert run_cli("help", "config") == 0
        out = capsys.readouterr().out
        assert "config set" in out
        assert "config clear" in out

    def test_help_unknown_command(self, run_cli, capsys):
        assert run_cli("help", "rewind") == 1
        assert "Unknown command: rewind" in capsys.readouterr().err

    def test_version(self, run_cli, capsys):
        assert run_cli("--version") == 0
        assert "1.0.0" in capsys.readouterr().out

    def test_missing_positional_is_usage_error(self, run_cli, fake_api):
        assert run_cli("video", "details") == 1
        assert fake_api.requests == []

    def test_group_without_subcommand(self, run_cli):
        assert run_cli("video") == 1


class TestConfigCommands:
    """config set / show / clear."""

    def test_set_then_show_masks_key(self, run_cli, capsys):
        """Should only ever display the first 8 characters of the key."""
        assert run_cli("config", "set", "--api-key", TEST_API_KEY) == 0
        capsys.readouterr()

        assert run_cli("config", "show") == 0
        out = capsys.readouterr().out
        assert TEST_API_KEY[:8] + "..." in out
        assert TEST_API_KEY not in out

    def test_show_json_masks_key(self, run_cli, configured_store, capsys):
        assert run_cli("config", "show", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"apiKey": TEST_API_KEY[:8] + "...", "baseUrl": DEFAULT_BASE_URL}

    def test_short_key_fully_masked(self, run_cli, store, capsys):
        store.set("apiKey", "short")
        run_cli("config", "show")
        out = capsys.readouterr().out
        assert "*****" in out
        assert "short" not in out

    def test_set_base_url(self, run_cli, store, capsys):
        assert run_cli("config", "set", "--base-url", "https://example.test/v1") == 0
        assert store.get("baseUrl") == "https://example.test/v1"
        assert "Base URL set" in capsys.readouterr().out

    def test_set_over_damaged_value(self, run_cli, store):
        """Should make the new base URL readable even if the file held an invalid key."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"apiKey": null}')

        assert run_cli("config", "set", "--base-url", "https://x.test/v1") == 0
        assert store.get("baseUrl") == "https://x.test/v1"

    def test_set_without_options_fails(self, run_cli, store, capsys):
        """Should refuse when there is nothing to set and no terminal to ask."""
        assert run_cli("config", "set") == 1
        assert "No options provided" in capsys.readouterr().err
        assert store.is_configured() is False

    def test_set_prompts_for_key_on_terminal(self, run_cli, store, monkeypatch):
        monkeypatch.setattr(sys.stdin, "isatty", lambda: True)
        monkeypatch.setattr("synq.commands.config.prompt", lambda *a, **kw: " typed-key-123 ")

        assert run_cli("config", "set") == 0
        assert store.get("apiKey") == "typed-key-123"

    def test_clear_then_show_reports_defaults(self, run_cli, store, capsys):
        """Should revert the base URL and report the key as not set."""
        store.set("apiKey", TEST_API_KEY)
        store.set("baseUrl", "https://example.test/v1")

        assert run_cli("config", "clear") == 0
        capsys.readouterr()

        assert run_cli("config", "show") == 0
        out = capsys.readouterr().out
        assert DEFAULT_BASE_URL in out
        assert "not set" in out

    def test_config_commands_need_no_auth(self, run_cli, fake_api):
        assert run_cli("config", "show") == 0
        assert fake_api.requests == []


class TestAuthGuard:
    """Commands that talk to the API need a stored key."""

    @pytest.mark.parametrize("argv", AUTHENTICATED_COMMANDS)
    def test_fails_without_key(self, run_cli, fake_api, capsys, argv):
        """Should fail locally and make zero requests."""
        assert run_cli(*argv) == 1
        err = capsys.readouterr().err
        assert "API key not configured" in err
        assert "synq config set --api-key" in err
        assert fake_api.requests == []


class TestLocalValidation:
    """Bad input is rejected before any request."""

    @pytest.mark.parametrize("authenticated", [False, True])
    def test_update_without_fields(self, run_cli, store, fake_api, capsys, authenticated):
        if authenticated:
            store.set("apiKey", TEST_API_KEY)

        assert run_cli("video", "update", "abc") == 1
        assert "No metadata provided" in capsys.readouterr().err
        assert fake_api.requests == []

    def test_query_with_invalid_filter(self, run_cli, configured_store, fake_api, capsys):
        assert run_cli("video", "query", "--filter", "not json") == 1
        assert "Invalid JSON filter" in capsys.readouterr().err
        assert fake_api.requests == []

    def test_query_with_non_object_filter(self, run_cli, configured_store, fake_api, capsys):
        assert run_cli("video", "query", "--filter", "[1, 2]") == 1
        assert "Invalid JSON filter" in capsys.readouterr().err
        assert fake_api.requests == []


class TestJsonOutput:
    """--json prints exactly what the API returned."""

    @pytest.mark.parametrize(
        "argv, endpoint",
        [
            (["video", "create", "--title", "Intro", "--json"], "/video/create"),
            (["video", "details", "abc", "--json"], "/video/details"),
            (["video", "upload", "abc", "--json"], "/video/upload"),
            (["video", "update", "abc", "--description", "d", "--json"], "/video/update"),
            (["video", "query", "--json"], "/video/query"),
            (["stream", "--json"], "/video/stream"),
            (["uploader", "abc", "--json"], "/video/uploader"),
        ],
    )
    def test_raw_response(self, run_cli, configured_store, fake_api, capsys, argv, endpoint):
        payload = {
            "video_id": "abc",
            "state": "created",
            "upload_url": "https://uploads.example.test/" + "x" * 120,
            "videos": [{"video_id": "abc", "title": "Ünïcode"}],
        }
        fake_api.respond(endpoint, json=payload)

        assert run_cli(*argv) == 0
        assert json.loads(capsys.readouterr().out) == payload


class TestRemoteFailures:
    """Errors from the service or the network."""

    def test_api_error_message(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/details", json={"message": "quota exceeded"}, status_code=429)

        assert run_cli("video", "details", "abc") == 1
        captured = capsys.readouterr()
        assert "quota exceeded" in captured.err
        assert captured.out == ""

    def test_connection_refused(self, run_cli, configured_store, fake_api, capsys):
        fake_api.refuse_connections()

        assert run_cli("video", "create", "--json") == 1
        captured = capsys.readouterr()
        assert "Request failed" in captured.err
        assert "Connection refused" in captured.err
        assert captured.out == ""

    def test_api_error_message_kept_verbatim(self, run_cli, configured_store, fake_api, capsys):
        """Should not turn :name: shortcodes or brackets in the message into emoji or markup."""
        message = "quota exceeded :smile: try later [bold]"
        fake_api.respond("/video/details", json={"message": message}, status_code=429)

        assert run_cli("video", "details", "abc") == 1
        assert capsys.readouterr().err == f"✗ {message}\n"


class TestHumanOutput:
    """Readable rendering of each response."""

    def test_create(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/create", json={"video_id": "v42", "title": "Intro"})

        assert run_cli("video", "create", "--title", "Intro", "--description", "First") == 0
        out = capsys.readouterr().out
        assert "Video ID:" in out
        assert "v42" in out
        assert "Video created successfully" in out
        assert fake_api.bodies[0] == {
            "api_key": TEST_API_KEY,
            "title": "Intro",
            "description": "First",
        }

    def test_create_falls_back_to_id(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/create", json={"id": "v43"})
        run_cli("video", "create")
        assert "v43" in capsys.readouterr().out

    def test_details_skips_missing_fields(self, run_cli, configured_store, fake_api, capsys):
        """Should print only the fields the API returned."""
        fake_api.respond("/video/details", json={"state": "uploading"})

        assert run_cli("video", "details", "abc") == 0
        out = capsys.readouterr().out
        assert "abc" in out
        assert "uploading" in out
        assert "Title:" not in out
        assert "Playback:" not in out

    def test_update(self, run_cli, configured_store, fake_api, capsys):
        assert run_cli("video", "update", "abc", "--title", "New") == 0
        assert "Video abc updated successfully" in capsys.readouterr().out
        assert fake_api.bodies[0]["source"] == {"title": "New"}

    def test_query_lists_videos(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/query", json={"results": [
            {"video_id": "a1", "title": "First"},
            {"id": "a2"},
        ]})

        assert run_cli("video", "query", "--filter", '{"state": "uploaded"}') == 0
        out = capsys.readouterr().out
        assert "a1 - First" in out
        assert "a2 - Untitled" in out
        assert "2 video(s) found" in out
        assert fake_api.bodies[0]["filter"] == {"state": "uploaded"}

    def test_query_empty(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/query", json={"videos": []})
        assert run_cli("video", "query") == 0
        assert "No videos found." in capsys.readouterr().out
        assert fake_api.bodies[0]["filter"] == {}

    def test_stream(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/stream", json={"video_id": "s1", "stream_url": "rtmp://x/live"})

        assert run_cli("stream", "--title", "Live") == 0
        out = capsys.readouterr().out
        assert "rtmp://x/live" in out
        assert "Playback URL:" not in out

    def test_uploader(self, run_cli, configured_store, fake_api, capsys):
        fake_api.respond("/video/uploader", json={"uploader_url": "https://u.test/w"})

        assert run_cli("uploader", "abc") == 0
        out = capsys.readouterr().out
        assert "https://u.test/w" in out
        assert "Embed this URL" in out


HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TestProgressIndicator:
    """The spinner runs during the request and is gone before output."""

    @pytest.fixture
    def terminal(self, monkeypatch):
        """Route the spinner to a fake terminal and return its buffer."""
        monkeypatch.setenv("TERM", "xterm-256color")
        buffer = io.StringIO()
        monkeypatch.setattr(
            "synq.ui.spinners.err_console",
            Console(file=buffer, force_terminal=True, width=80),
        )
        return buffer

    @pytest.fixture
    def seen_during_request(self, fake_api, terminal, monkeypatch):
        """Snapshot the terminal at the moment the request is sent."""
        snapshots = []
        handler = fake_api.handler

        def recording_handler(request):
            snapshots.append(terminal.getvalue())
            return handler(request)

        monkeypatch.setattr(fake_api, "handler", recording_handler)
        return snapshots

    def test_spinner_stops_before_rendering(
        self, run_cli, configured_store, fake_api, terminal, seen_during_request, capsys
    ):
        fake_api.respond("/video/details", json={"video_id": "abc", "state": "ready"})

        assert run_cli("video", "details", "abc") == 0

        during = seen_during_request[0]
        assert HIDE_CURSOR in during
        assert SHOW_CURSOR not in during
        final = terminal.getvalue()
        assert final.rfind(SHOW_CURSOR) > final.rfind(HIDE_CURSOR)
        assert "Fetching details for abc" in final
        assert "ready" in capsys.readouterr().out

    def test_spinner_stops_on_failure(
        self, run_cli, configured_store, fake_api, terminal, seen_during_request, capsys
    ):
        fake_api.respond("/video/details", json={"message": "quota exceeded"}, status_code=429)

        assert run_cli("video", "details", "abc") == 1

        assert SHOW_CURSOR not in seen_during_request[0]
        final = terminal.getvalue()
        assert final.rfind(SHOW_CURSOR) > final.rfind(HIDE_CURSOR)
        assert "quota exceeded" in capsys.readouterr().err

    def test_no_spinner_for_local_failures(self, run_cli, configured_store, terminal):
        """Should not start the spinner when the command fails before the request."""
        assert run_cli("video", "query", "--filter", "not json") == 1
        assert terminal.getvalue() == ""
