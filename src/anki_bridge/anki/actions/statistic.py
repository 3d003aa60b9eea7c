"""Review statistics."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, model_validator

from .base import ActionFamily, AnkiRequest, AnkiResult, Outcome


class CardReview(AnkiResult):
    """One review row of ``cardReviews``.

    AnkiConnect sends each row as a positional array in the column order
    below; a mapping with these names is accepted as well.
    """

    review_time: int
    card_id: int
    usn: int
    button_pressed: int
    new_interval: int
    previous_interval: int
    new_factor: int
    review_duration: int
    review_type: int

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            columns = list(cls.model_fields)
            if len(data) != len(columns):
                raise ValueError(
                    f"expected {len(columns)} columns, got {len(data)}"
                )
            return dict(zip(columns, data))
        return data


class Review(AnkiResult):
    """One entry of the review log of a card."""

    id: int
    usn: int
    ease: int
    ivl: int
    last_ivl: int
    factor: int
    time: int
    review_type: int = Field(alias="type")


class CardReviewsRequest(AnkiRequest[list[CardReview]]):
    action: ClassVar[str] = "cardReviews"
    result_type: ClassVar[Any] = list[CardReview]

    deck: str
    start_id: int = Field(alias="startID")


class GetReviewsOfCardsRequest(AnkiRequest[dict[str, list[Review]]]):
    action: ClassVar[str] = "getReviewsOfCards"
    result_type: ClassVar[Any] = dict[str, list[Review]]

    cards: list[int]


class StatisticActions(ActionFamily):
    """Review history of decks and cards."""

    def card_reviews(self, deck: str, start_id: int) -> Outcome[list[CardReview]]:
        """Reviews in ``deck`` with a review time after ``start_id`` (ms epoch)."""
        return self._client.request(CardReviewsRequest(deck=deck, start_id=start_id))

    def get_reviews_of_cards(self, cards: list[int]) -> Outcome[dict[str, list[Review]]]:
        """Review log per card, keyed by card id as a string."""
        return self._client.request(GetReviewsOfCardsRequest(cards=cards))
