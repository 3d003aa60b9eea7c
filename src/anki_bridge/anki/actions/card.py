"""Card actions."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import Field

from .base import ActionFamily, AnkiRequest, AnkiResult, Outcome


class CardField(AnkiResult):
    value: str
    order: int


class CardInfo(AnkiResult):
    """One entry of ``cardsInfo``: rendered sides, note fields and scheduling state."""

    card_id: int
    note: int
    deck_name: str
    model_name: str
    question: str
    answer: str
    css: str
    fields: dict[str, CardField]
    field_order: int
    ord: int
    card_type: int = Field(alias="type")
    queue: int
    due: int
    interval: int
    reps: int
    lapses: int
    left: int
    mod: int


class CardModTime(AnkiResult):
    card_id: int
    mod: int


class GetEaseFactorsRequest(AnkiRequest[list[int]]):
    action: ClassVar[str] = "getEaseFactors"
    result_type: ClassVar[Any] = list[int]

    cards: list[int]


class SetEaseFactorsRequest(AnkiRequest[list[bool]]):
    action: ClassVar[str] = "setEaseFactors"
    result_type: ClassVar[Any] = list[bool]

    cards: list[int]
    ease_factors: list[int]


class SetSpecificValueOfCardRequest(AnkiRequest[list[bool]]):
    action: ClassVar[str] = "setSpecificValueOfCard"
    result_type: ClassVar[Any] = list[bool]

    card: int
    keys: list[str]
    new_values: list[str]
    warning_check: bool | None = None


class SuspendRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "suspend"
    result_type: ClassVar[Any] = bool

    cards: list[int]


class UnsuspendRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "unsuspend"
    result_type: ClassVar[Any] = bool

    cards: list[int]


class SuspendedRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "suspended"
    result_type: ClassVar[Any] = bool

    card: int


class AreSuspendedRequest(AnkiRequest[list[bool | None]]):
    action: ClassVar[str] = "areSuspended"
    result_type: ClassVar[Any] = list[bool | None]

    cards: list[int]


class AreDueRequest(AnkiRequest[list[bool]]):
    action: ClassVar[str] = "areDue"
    result_type: ClassVar[Any] = list[bool]

    cards: list[int]


class GetIntervalsRequest(AnkiRequest[list[int]]):
    action: ClassVar[str] = "getIntervals"
    result_type: ClassVar[Any] = list[int]

    cards: list[int]


class GetIntervalHistoryRequest(AnkiRequest[list[list[int]]]):
    """``getIntervals`` with ``complete=true``: every past interval per card."""

    action: ClassVar[str] = "getIntervals"
    result_type: ClassVar[Any] = list[list[int]]

    cards: list[int]
    complete: Literal[True] = True


class FindCardsRequest(AnkiRequest[list[int]]):
    action: ClassVar[str] = "findCards"
    result_type: ClassVar[Any] = list[int]

    query: str


class CardsToNotesRequest(AnkiRequest[list[int]]):
    action: ClassVar[str] = "cardsToNotes"
    result_type: ClassVar[Any] = list[int]

    cards: list[int]


class CardsModTimeRequest(AnkiRequest[list[CardModTime]]):
    action: ClassVar[str] = "cardsModTime"
    result_type: ClassVar[Any] = list[CardModTime]

    cards: list[int]


class CardsInfoRequest(AnkiRequest[list[CardInfo]]):
    action: ClassVar[str] = "cardsInfo"
    result_type: ClassVar[Any] = list[CardInfo]

    cards: list[int]


class ForgetCardsRequest(AnkiRequest[None]):
    action: ClassVar[str] = "forgetCards"
    result_type: ClassVar[Any] = None

    cards: list[int]


class RelearnCardsRequest(AnkiRequest[None]):
    action: ClassVar[str] = "relearnCards"
    result_type: ClassVar[Any] = None

    cards: list[int]


class CardActions(ActionFamily):
    """Card operations keyed by card id."""

    def get_ease_factors(self, cards: list[int]) -> Outcome[list[int]]:
        """Ease factor of each card, in the order given."""
        return self._client.request(GetEaseFactorsRequest(cards=cards))

    def set_ease_factors(
        self, cards: list[int], ease_factors: list[int]
    ) -> Outcome[list[bool]]:
        return self._client.request(
            SetEaseFactorsRequest(cards=cards, ease_factors=ease_factors)
        )

    def set_specific_value_of_card(
        self,
        card: int,
        keys: list[str],
        new_values: list[str],
        warning_check: bool | None = None,
    ) -> Outcome[list[bool]]:
        """Set raw card columns. Some keys need ``warning_check=True``."""
        return self._client.request(
            SetSpecificValueOfCardRequest(
                card=card, keys=keys, new_values=new_values, warning_check=warning_check
            )
        )

    def suspend(self, cards: list[int]) -> Outcome[bool]:
        """True if at least one card was not already suspended."""
        return self._client.request(SuspendRequest(cards=cards))

    def unsuspend(self, cards: list[int]) -> Outcome[bool]:
        """True if at least one card was suspended."""
        return self._client.request(UnsuspendRequest(cards=cards))

    def suspended(self, card: int) -> Outcome[bool]:
        return self._client.request(SuspendedRequest(card=card))

    def are_suspended(self, cards: list[int]) -> Outcome[list[bool | None]]:
        """Per card suspension flag; None for cards that do not exist."""
        return self._client.request(AreSuspendedRequest(cards=cards))

    def are_due(self, cards: list[int]) -> Outcome[list[bool]]:
        return self._client.request(AreDueRequest(cards=cards))

    def get_intervals(self, cards: list[int]) -> Outcome[list[int]]:
        """Most recent interval per card (negative: seconds, positive: days)."""
        return self._client.request(GetIntervalsRequest(cards=cards))

    def get_interval_history(self, cards: list[int]) -> Outcome[list[list[int]]]:
        return self._client.request(GetIntervalHistoryRequest(cards=cards))

    def find_cards(self, query: str) -> Outcome[list[int]]:
        """Card ids matching an Anki search query."""
        return self._client.request(FindCardsRequest(query=query))

    def cards_to_notes(self, cards: list[int]) -> Outcome[list[int]]:
        """Unordered, de-duplicated note ids of the given cards."""
        return self._client.request(CardsToNotesRequest(cards=cards))

    def cards_mod_time(self, cards: list[int]) -> Outcome[list[CardModTime]]:
        return self._client.request(CardsModTimeRequest(cards=cards))

    def cards_info(self, cards: list[int]) -> Outcome[list[CardInfo]]:
        return self._client.request(CardsInfoRequest(cards=cards))

    def forget_cards(self, cards: list[int]) -> Outcome[None]:
        """Reset cards to new."""
        return self._client.request(ForgetCardsRequest(cards=cards))

    def relearn_cards(self, cards: list[int]) -> Outcome[None]:
        return self._client.request(RelearnCardsRequest(cards=cards))
