"""Tests for the anki-bridge CLI."""

import json

import httpx
import pytest
import respx
from typer.testing import CliRunner

from anki_bridge import __version__
from anki_bridge.cli import app
from anki_bridge.cli_commands.anki_handler import parse_params

runner = CliRunner()

ANKI_URL = "http://127.0.0.1:8765"


def reply(result=None, error=None):
    return httpx.Response(200, json={"result": result, "error": error})


class TestVersion:
    @respx.mock
    def test_version(self) -> None:
        respx.post(ANKI_URL).mock(return_value=reply(6))

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
        assert "AnkiConnect API version: 6" in result.stdout

    @respx.mock
    def test_version_connection_refused(self) -> None:
        respx.post(ANKI_URL).mock(side_effect=httpx.ConnectError)

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 1
        assert "ANK-CONN-001" in result.stdout


class TestDecks:
    @respx.mock
    def test_decks_sorted(self) -> None:
        respx.post(ANKI_URL).mock(return_value=reply(["Zoology", "Default"]))

        result = runner.invoke(app, ["decks"])

        assert result.exit_code == 0
        assert result.stdout.index("Default") < result.stdout.index("Zoology")

    @respx.mock
    def test_no_decks(self) -> None:
        respx.post(ANKI_URL).mock(return_value=reply([]))

        result = runner.invoke(app, ["decks"])

        assert result.exit_code == 0
        assert "No decks available." in result.stdout

    @respx.mock
    def test_host_and_port_options(self) -> None:
        route = respx.post("http://anki.local:9000").mock(return_value=reply(["Default"]))

        result = runner.invoke(app, ["decks", "--host", "anki.local", "--port", "9000"])

        assert result.exit_code == 0
        assert route.called

    def test_invalid_port(self) -> None:
        result = runner.invoke(app, ["decks", "--port", "0"])

        assert result.exit_code == 1
        assert "CFG-INVALID-001" in result.stdout


class TestDeckStats:
    @respx.mock
    def test_table(self) -> None:
        route = respx.post(ANKI_URL).mock(
            return_value=reply(
                {
                    "Deck1": {
                        "total_in_deck": 10,
                        "new_count": 3,
                        "learn_count": 1,
                        "review_count": 6,
                    }
                }
            )
        )

        result = runner.invoke(app, ["deck-stats", "Deck1"])

        assert result.exit_code == 0
        assert "Deck1" in result.stdout
        assert "10" in result.stdout
        body = json.loads(route.calls.last.request.content)
        assert body["params"] == {"decks": ["Deck1"]}

    @respx.mock
    def test_server_error_message_verbatim(self) -> None:
        respx.post(ANKI_URL).mock(return_value=reply(error="deck was not found"))

        result = runner.invoke(app, ["deck-stats", "Missing"])

        assert result.exit_code == 1
        assert "deck was not found" in result.stdout

    def test_requires_deck(self) -> None:
        result = runner.invoke(app, ["deck-stats"])

        assert result.exit_code == 2


class TestInvoke:
    @respx.mock
    def test_invoke_with_params(self) -> None:
        route = respx.post(ANKI_URL).mock(return_value=reply([1494723142483]))

        result = runner.invoke(
            app, ["invoke", "findCards", "--params", '{"query": "deck:current"}']
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [1494723142483]
        assert json.loads(route.calls.last.request.content) == {
            "action": "findCards",
            "version": 6,
            "params": {"query": "deck:current"},
        }

    @respx.mock
    def test_invoke_without_params(self) -> None:
        route = respx.post(ANKI_URL).mock(return_value=reply(None))

        result = runner.invoke(app, ["invoke", "guiDeckBrowser"])

        assert result.exit_code == 0
        assert route.calls.last.request.content == b'{"action":"guiDeckBrowser","version":6}'

    @respx.mock
    def test_invoke_protocol_error(self) -> None:
        respx.post(ANKI_URL).mock(return_value=httpx.Response(200, json=[1, 2]))

        result = runner.invoke(app, ["invoke", "version"])

        assert result.exit_code == 1
        assert "ANK-PROTO-001" in result.stdout

    def test_invoke_rejects_non_object_params(self) -> None:
        result = runner.invoke(app, ["invoke", "findCards", "--params", "[1]"])

        assert result.exit_code == 2


class TestParseParams:
    def test_none(self) -> None:
        assert parse_params(None) is None

    def test_empty_object(self) -> None:
        assert parse_params("{}") == {}

    @pytest.mark.parametrize("raw", ["not json", "[1]", '"x"'])
    def test_invalid(self, raw) -> None:
        import typer

        with pytest.raises(typer.BadParameter):
            parse_params(raw)
