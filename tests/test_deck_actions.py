"""Tests for deck actions."""

import pytest

from anki_bridge.anki.actions.deck import (
    DeckConfig,
    DeckNamesRequest,
    DeckStats,
    GetDeckStatsRequest,
)
from anki_bridge.exceptions import DecodeError, ServerError
from tests.fixtures import err, ok

DECK_STATS = {
    "Deck1": {"total_in_deck": 10, "new_count": 3, "learn_count": 1, "review_count": 6},
    "Deck2": {"total_in_deck": 0, "new_count": 0, "learn_count": 0, "review_count": 0},
}

DECK_CONFIG = {
    "lapse": {
        "leechFails": 8,
        "delays": [10],
        "minInt": 1,
        "leechAction": 0,
        "mult": 0,
    },
    "dyn": False,
    "autoplay": True,
    "mod": 1502970872,
    "id": 1,
    "maxTaken": 60,
    "new": {
        "bury": True,
        "order": 1,
        "initialFactor": 2500,
        "perDay": 20,
        "delays": [1, 10],
        "separate": True,
        "ints": [1, 4, 7],
    },
    "name": "Default",
    "rev": {
        "bury": True,
        "ivlFct": 1,
        "ease4": 1.3,
        "maxIvl": 36500,
        "perDay": 100,
        "minSpace": 1,
        "fuzz": 0.05,
    },
    "timer": 0,
    "replayq": True,
    "usn": -1,
}


class TestGetDeckStats:
    """Test getDeckStats end to end over a fake transport."""

    def test_two_decks(self, anki, transport, sent) -> None:
        transport.queue(ok(DECK_STATS))

        stats = anki.deck.get_deck_stats(["Deck1", "Deck2"])

        assert len(stats) == 2
        assert stats["Deck1"] == DeckStats(
            total_in_deck=10, new_count=3, learn_count=1, review_count=6
        )
        assert stats["Deck2"].total_in_deck == 0
        assert sent() == [
            {"action": "getDeckStats", "version": 6, "params": {"decks": ["Deck1", "Deck2"]}}
        ]

    def test_keyed_by_deck_id(self, anki, transport) -> None:
        transport.queue(
            ok(
                {
                    "1651445861967": {
                        "deck_id": 1651445861967,
                        "name": "Japanese::JLPT N5",
                        "new_count": 20,
                        "learn_count": 0,
                        "review_count": 0,
                        "total_in_deck": 1506,
                    }
                }
            )
        )

        stats = anki.deck.get_deck_stats(["Japanese::JLPT N5"])

        assert stats["1651445861967"].name == "Japanese::JLPT N5"
        assert stats["1651445861967"].deck_id == 1651445861967

    def test_malformed_result(self, anki, transport) -> None:
        transport.queue(ok("not-an-object"))

        with pytest.raises(DecodeError) as exc_info:
            anki.deck.get_deck_stats(["Deck1"])

        assert exc_info.value.context["action"] == "getDeckStats"

    def test_missing_count_is_decode_error(self, anki, transport) -> None:
        transport.queue(ok({"Deck1": {"total_in_deck": 1}}))

        with pytest.raises(DecodeError):
            anki.deck.get_deck_stats(["Deck1"])

    def test_string_counts_are_decode_error(self, anki, transport) -> None:
        transport.queue(
            ok(
                {
                    "Deck1": {
                        "total_in_deck": "10",
                        "new_count": "3",
                        "learn_count": 1.0,
                        "review_count": 6,
                    }
                }
            )
        )

        with pytest.raises(DecodeError) as exc_info:
            anki.deck.get_deck_stats(["Deck1"])

        assert exc_info.value.context["error_count"] == 3

    def test_server_error(self, anki, transport) -> None:
        transport.queue(err("deck was not found"))

        with pytest.raises(ServerError) as exc_info:
            anki.deck.get_deck_stats(["Missing"])

        assert exc_info.value.upstream_message == "deck was not found"

    def test_empty_list_sent_verbatim(self, anki, transport, sent) -> None:
        transport.queue(ok({}))

        assert anki.deck.get_deck_stats([]) == {}
        assert sent()[0]["params"] == {"decks": []}

    @pytest.mark.asyncio()
    async def test_async_client(self, async_anki, async_transport) -> None:
        async_transport.queue(ok(DECK_STATS))

        stats = await async_anki.deck.get_deck_stats(["Deck1", "Deck2"])

        assert stats["Deck1"].review_count == 6


class TestRequestModels:
    """Test wire encoding of deck requests."""

    def test_parameterless_request_has_no_params(self) -> None:
        assert DeckNamesRequest().to_params() is None

    def test_params_are_camel_case(self) -> None:
        from anki_bridge.anki.actions.deck import (
            CloneDeckConfigIdRequest,
            DeleteDecksRequest,
        )

        assert DeleteDecksRequest(decks=["A"]).to_params() == {
            "decks": ["A"],
            "cardsToo": True,
        }
        assert CloneDeckConfigIdRequest(name="Copy", clone_from=1).to_params() == {
            "name": "Copy",
            "cloneFrom": 1,
        }

    def test_optional_params_are_omitted(self) -> None:
        from anki_bridge.anki.actions.deck import CloneDeckConfigIdRequest

        assert CloneDeckConfigIdRequest(name="Copy").to_params() == {"name": "Copy"}

    def test_request_metadata(self) -> None:
        assert GetDeckStatsRequest.action == "getDeckStats"
        assert GetDeckStatsRequest(decks=["A"]).to_params() == {"decks": ["A"]}


class TestDeckOperations:
    """Test the remaining deck family operations."""

    def test_deck_names(self, anki, transport, sent) -> None:
        transport.queue(ok(["Default", "Filtered Deck 1"]))

        assert anki.deck.deck_names() == ["Default", "Filtered Deck 1"]
        assert "params" not in sent()[0]

    def test_deck_names_and_ids(self, anki, transport) -> None:
        transport.queue(ok({"Default": 1}))

        assert anki.deck.deck_names_and_ids() == {"Default": 1}

    def test_get_decks(self, anki, transport, sent) -> None:
        transport.queue(ok({"Default": [1502032366472], "Japanese::JLPT N3": [1502298036657]}))

        decks = anki.deck.get_decks([1502032366472, 1502298036657])

        assert decks["Default"] == [1502032366472]
        assert sent()[0]["params"] == {"cards": [1502032366472, 1502298036657]}

    def test_create_deck(self, anki, transport) -> None:
        transport.queue(ok(1519323742721))

        assert anki.deck.create_deck("Japanese::Tokyo") == 1519323742721

    def test_change_deck_returns_none(self, anki, transport, sent) -> None:
        transport.queue(ok(None))

        assert anki.deck.change_deck([1502098034045], "Japanese::JLPT N3") is None
        assert sent()[0]["params"] == {"cards": [1502098034045], "deck": "Japanese::JLPT N3"}

    def test_delete_decks(self, anki, transport, sent) -> None:
        transport.queue(ok(None))

        anki.deck.delete_decks(["Japanese::JLPT N5"])

        assert sent()[0]["params"] == {"decks": ["Japanese::JLPT N5"], "cardsToo": True}

    def test_get_deck_config_keeps_unknown_keys(self, anki, transport) -> None:
        transport.queue(ok(DECK_CONFIG))

        config = anki.deck.get_deck_config("Default")

        assert isinstance(config, DeckConfig)
        assert config.new.per_day == 20
        assert config.rev.max_ivl == 36500
        assert config.model_extra == {}
        assert config.new.model_extra == {"separate": True}

    def test_save_deck_config_round_trips(self, anki, transport, sent) -> None:
        transport.queue(ok(DECK_CONFIG))
        config = anki.deck.get_deck_config("Default")
        transport.queue(ok(True))

        assert anki.deck.save_deck_config(config) is True

        saved = sent()[-1]["params"]["config"]
        assert saved["maxTaken"] == 60
        assert saved["new"]["perDay"] == 20
        assert saved["new"]["separate"] is True
        assert saved["rev"]["fuzz"] == 0.05

    def test_set_deck_config_id(self, anki, transport, sent) -> None:
        transport.queue(ok(True))

        assert anki.deck.set_deck_config_id(["Default"], 1) is True
        assert sent()[0]["params"] == {"decks": ["Default"], "configId": 1}

    def test_clone_deck_config_id(self, anki, transport) -> None:
        transport.queue(ok(1502972374573))

        assert anki.deck.clone_deck_config_id("Copy of Default", 1) == 1502972374573

    def test_clone_from_unknown_config(self, anki, transport) -> None:
        transport.queue(ok(False))

        assert anki.deck.clone_deck_config_id("Copy", 999) is False

    def test_remove_deck_config_id(self, anki, transport, sent) -> None:
        transport.queue(ok(True))

        assert anki.deck.remove_deck_config_id(1502972374573) is True
        assert sent()[0]["params"] == {"configId": 1502972374573}
