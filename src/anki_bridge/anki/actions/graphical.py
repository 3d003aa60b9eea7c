"""Graphical actions: ask Anki to open or drive one of its windows."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import ActionFamily, AnkiRequest, AnkiResult, Outcome
from .card import CardField
from .note import NoteMedia

Ease = Literal[1, 2, 3, 4]


class NewNote(BaseModel):
    """Prefilled contents of the Add Cards dialog."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, protected_namespaces=()
    )

    deck_name: str
    model_name: str
    fields: dict[str, str]
    tags: list[str] = Field(default_factory=list)
    audio: list[NoteMedia] | None = None
    video: list[NoteMedia] | None = None
    picture: list[NoteMedia] | None = None


class CurrentCard(AnkiResult):
    """The card under review, as reported by ``guiCurrentCard``."""

    card_id: int
    deck_name: str
    model_name: str
    question: str
    answer: str
    fields: dict[str, CardField]
    field_order: int
    template: str
    buttons: list[int]
    next_reviews: list[str]


class GuiBrowseRequest(AnkiRequest[list[int]]):
    action: ClassVar[str] = "guiBrowse"
    result_type: ClassVar[Any] = list[int]

    query: str


class GuiSelectedNotesRequest(AnkiRequest[list[int]]):
    action: ClassVar[str] = "guiSelectedNotes"
    result_type: ClassVar[Any] = list[int]


class GuiAddCardsRequest(AnkiRequest[int]):
    action: ClassVar[str] = "guiAddCards"
    result_type: ClassVar[Any] = int

    note: NewNote


class GuiEditNoteRequest(AnkiRequest[None]):
    action: ClassVar[str] = "guiEditNote"
    result_type: ClassVar[Any] = None

    note: int


class GuiCurrentCardRequest(AnkiRequest[CurrentCard | None]):
    action: ClassVar[str] = "guiCurrentCard"
    result_type: ClassVar[Any] = CurrentCard | None


class GuiStartCardTimerRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiStartCardTimer"
    result_type: ClassVar[Any] = bool


class GuiShowQuestionRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiShowQuestion"
    result_type: ClassVar[Any] = bool


class GuiShowAnswerRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiShowAnswer"
    result_type: ClassVar[Any] = bool


class GuiAnswerCardRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiAnswerCard"
    result_type: ClassVar[Any] = bool

    ease: Ease


class GuiDeckOverviewRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiDeckOverview"
    result_type: ClassVar[Any] = bool

    name: str


class GuiDeckBrowserRequest(AnkiRequest[None]):
    action: ClassVar[str] = "guiDeckBrowser"
    result_type: ClassVar[Any] = None


class GuiDeckReviewRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiDeckReview"
    result_type: ClassVar[Any] = bool

    name: str


class GuiExitAnkiRequest(AnkiRequest[None]):
    action: ClassVar[str] = "guiExitAnki"
    result_type: ClassVar[Any] = None


class GuiCheckDatabaseRequest(AnkiRequest[bool]):
    action: ClassVar[str] = "guiCheckDatabase"
    result_type: ClassVar[Any] = bool


class GraphicalActions(ActionFamily):
    """Operations that open, drive or close Anki windows."""

    def gui_browse(self, query: str) -> Outcome[list[int]]:
        """Open the Card Browser on ``query``; returns the matching card ids."""
        return self._client.request(GuiBrowseRequest(query=query))

    def gui_selected_notes(self) -> Outcome[list[int]]:
        """Note ids selected in an open Card Browser (empty if it is closed)."""
        return self._client.request(GuiSelectedNotesRequest())

    def gui_add_cards(self, note: NewNote) -> Outcome[int]:
        """Open Add Cards prefilled with ``note``; returns the id it would get."""
        return self._client.request(GuiAddCardsRequest(note=note))

    def gui_edit_note(self, note_id: int) -> Outcome[None]:
        return self._client.request(GuiEditNoteRequest(note=note_id))

    def gui_current_card(self) -> Outcome[CurrentCard | None]:
        """Card under review, or None outside review mode."""
        return self._client.request(GuiCurrentCardRequest())

    def gui_start_card_timer(self) -> Outcome[bool]:
        return self._client.request(GuiStartCardTimerRequest())

    def gui_show_question(self) -> Outcome[bool]:
        return self._client.request(GuiShowQuestionRequest())

    def gui_show_answer(self) -> Outcome[bool]:
        return self._client.request(GuiShowAnswerRequest())

    def gui_answer_card(self, ease: Ease) -> Outcome[bool]:
        """Answer the current card. The answer side must be showing."""
        return self._client.request(GuiAnswerCardRequest(ease=ease))

    def gui_deck_overview(self, name: str) -> Outcome[bool]:
        return self._client.request(GuiDeckOverviewRequest(name=name))

    def gui_deck_browser(self) -> Outcome[None]:
        return self._client.request(GuiDeckBrowserRequest())

    def gui_deck_review(self, name: str) -> Outcome[bool]:
        """Start reviewing the named deck."""
        return self._client.request(GuiDeckReviewRequest(name=name))

    def gui_exit_anki(self) -> Outcome[None]:
        """Schedule a graceful shutdown; returns before Anki exits."""
        return self._client.request(GuiExitAnkiRequest())

    def gui_check_database(self) -> Outcome[bool]:
        """Start a database check; always True as it does not wait for the result."""
        return self._client.request(GuiCheckDatabaseRequest())
