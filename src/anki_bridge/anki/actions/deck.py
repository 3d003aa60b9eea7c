"""Deck actions."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import ActionFamily, AnkiRequest, Outcome


class DeckStats(BaseModel):
    """Card counts for one deck, as returned by ``getDeckStats``."""

    model_config = ConfigDict(extra="ignore")

    total_in_deck: int
    new_count: int
    learn_count: int
    review_count: int
    deck_id: int | None = None
    name: str | None = None


class DeckConfigNew(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    bury: bool
    delays: list[float]
    initial_factor: int
    ints: list[int]
    order: int
    per_day: int


class DeckConfigLapse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    delays: list[float]
    leech_action: int
    leech_fails: int
    min_int: int
    mult: float


class DeckConfigRev(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    bury: bool
    ease4: float
    ivl_fct: float
    max_ivl: int
    per_day: int
    hard_factor: float | None = None


class DeckConfig(BaseModel):
    """Options group of a deck.

    Keys this model does not name are kept, so a config fetched with
    ``get_deck_config`` can be edited and passed to ``save_deck_config``
    without dropping settings.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: int
    name: str
    autoplay: bool
    dyn: bool
    max_taken: int
    mod: int
    replayq: bool
    timer: int
    usn: int
    new: DeckConfigNew
    lapse: DeckConfigLapse
    rev: DeckConfigRev
    bury_interday_learning: bool | None = None
    new_gather_priority: int | None = None
    new_mix: int | None = None
    new_per_day_minimum: int | None = None
    new_sort_order: int | None = None
    review_order: int | None = None


class DeckNamesRequest(AnkiRequest[list[str]]):
    action: ClassVar[str] = "deckNames"
    result_type: ClassVar[Any] = list[str]


class DeckNamesAndIdsRequest(AnkiRequest[dict[str, int]]):
    action: ClassVar[str] = "deckNamesAndIds"
    result_type: ClassVar[Any] = dict[str, int]


class GetDecksRequest(AnkiRequest[dict[str, list[int]]]):
    action: ClassVar[str] = "getDecks"
    result_type: ClassVar[Any] = dict[str, list[int]]

    cards: list[int]


class CreateDeckRequest(AnkiRequest[int]):
    action: ClassVar[str] = "createDeck"
    result_type: ClassVar[Any] = int

    deck: str


class ChangeDeckRequest(AnkiRequest[None]):
    action: ClassVar[str] = "changeDeck"
    result_type: ClassVar[Any] = None

    cards: list[int]
    deck: str


class DeleteDecksRequest(AnkiRequest[None]):
    action: ClassVar[str] = "deleteDecks"
    result_type: ClassVar[Any] = None

    decks: list[str]
    cards_too: bool = True


class GetDeckConfigRequest(AnkiRequest[DeckConfig]):
    action: ClassVar[str] = "getDeckConfig"
    result_type: ClassVar[Any] = DeckConfig

    deck: str


class SaveDeckConfigRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "saveDeckConfig"
    result_type: ClassVar[Any] = bool

    config: DeckConfig


class SetDeckConfigIdRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "setDeckConfigId"
    result_type: ClassVar[Any] = bool

    decks: list[str]
    config_id: int


class CloneDeckConfigIdRequest(AnkiRequest[int | bool]):
    """Result is the new group id, or ``False`` if ``clone_from`` is unknown."""

    action: ClassVar[str] = "cloneDeckConfigId"
    result_type: ClassVar[Any] = int | bool

    name: str
    clone_from: int | None = None


class RemoveDeckConfigIdRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "removeDeckConfigId"
    result_type: ClassVar[Any] = bool

    config_id: int


class GetDeckStatsRequest(AnkiRequest[dict[str, DeckStats]]):
    action: ClassVar[str] = "getDeckStats"
    result_type: ClassVar[Any] = dict[str, DeckStats]

    decks: list[str] = Field(description="Deck names, sent in the given order")


class DeckActions(ActionFamily):
    """Deck operations: names, creation, moving cards, options groups, stats."""

    def deck_names(self) -> Outcome[list[str]]:
        """Names of all decks."""
        return self._client.request(DeckNamesRequest())

    def deck_names_and_ids(self) -> Outcome[dict[str, int]]:
        return self._client.request(DeckNamesAndIdsRequest())

    def get_decks(self, cards: list[int]) -> Outcome[dict[str, list[int]]]:
        """Group the given card ids by the deck they belong to."""
        return self._client.request(GetDecksRequest(cards=cards))

    def create_deck(self, deck: str) -> Outcome[int]:
        """Create an empty deck (existing decks are left untouched); returns its id."""
        return self._client.request(CreateDeckRequest(deck=deck))

    def change_deck(self, cards: list[int], deck: str) -> Outcome[None]:
        """Move cards to ``deck``, creating it if needed."""
        return self._client.request(ChangeDeckRequest(cards=cards, deck=deck))

    def delete_decks(self, decks: list[str], cards_too: bool = True) -> Outcome[None]:
        """Delete decks. AnkiConnect requires ``cards_too`` to be true."""
        return self._client.request(DeleteDecksRequest(decks=decks, cards_too=cards_too))

    def get_deck_config(self, deck: str) -> Outcome[DeckConfig]:
        return self._client.request(GetDeckConfigRequest(deck=deck))

    def save_deck_config(self, config: DeckConfig) -> Outcome[bool]:
        """Save an options group; False if its id does not exist."""
        return self._client.request(SaveDeckConfigRequest(config=config))

    def set_deck_config_id(self, decks: list[str], config_id: int) -> Outcome[bool]:
        return self._client.request(SetDeckConfigIdRequest(decks=decks, config_id=config_id))

    def clone_deck_config_id(
        self, name: str, clone_from: int | None = None
    ) -> Outcome[int | bool]:
        """Create an options group named ``name``, copied from ``clone_from`` or the default."""
        return self._client.request(CloneDeckConfigIdRequest(name=name, clone_from=clone_from))

    def remove_deck_config_id(self, config_id: int) -> Outcome[bool]:
        return self._client.request(RemoveDeckConfigIdRequest(config_id=config_id))

    def get_deck_stats(self, decks: list[str]) -> Outcome[dict[str, DeckStats]]:
        """Total/new/learning/review counts per requested deck, keyed as AnkiConnect returns them."""
        return self._client.request(GetDeckStatsRequest(decks=decks))
