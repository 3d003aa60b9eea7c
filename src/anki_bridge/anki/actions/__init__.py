"""Typed AnkiConnect actions, one module per family."""

from .base import ActionFamily, AnkiRequest, AnkiResult, Outcome
from .card import CardActions, CardInfo, CardModTime
from .deck import DeckActions, DeckConfig, DeckStats
from .graphical import CurrentCard, GraphicalActions, NewNote
from .misc import MiscActions
from .note import NoteActions, NoteInfo, NoteMedia
from .statistic import CardReview, Review, StatisticActions

__all__ = [
    "ActionFamily",
    "AnkiRequest",
    "AnkiResult",
    "CardActions",
    "CardInfo",
    "CardModTime",
    "CardReview",
    "CurrentCard",
    "DeckActions",
    "DeckConfig",
    "DeckStats",
    "GraphicalActions",
    "MiscActions",
    "NewNote",
    "NoteActions",
    "NoteInfo",
    "NoteMedia",
    "Outcome",
    "Review",
    "StatisticActions",
]
