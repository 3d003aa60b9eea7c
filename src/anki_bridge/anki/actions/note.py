"""Note actions."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .base import ActionFamily, AnkiRequest, AnkiResult, Outcome


class NoteMedia(BaseModel):
    """Audio, video or picture attached to note fields.

    Exactly one of ``url``, ``path`` or ``data`` (base64) should be set;
    AnkiConnect decides what to do otherwise.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    filename: str
    fields: list[str]
    url: str | None = None
    path: str | None = None
    data: str | None = None
    skip_hash: str | None = None


class NoteField(AnkiResult):
    value: str
    order: int


class NoteInfo(AnkiResult):
    note_id: int
    model_name: str
    tags: list[str]
    fields: dict[str, NoteField]
    cards: list[int] | None = None
    mod: int | None = None


class NoteFieldsUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    fields: dict[str, str]
    audio: list[NoteMedia] | None = None
    video: list[NoteMedia] | None = None
    picture: list[NoteMedia] | None = None


class NotesInfoRequest(AnkiRequest[list[NoteInfo]]):
    action: ClassVar[str] = "notesInfo"
    result_type: ClassVar[Any] = list[NoteInfo]

    notes: list[int]


class UpdateNoteFieldsRequest(AnkiRequest[None]):
    action: ClassVar[str] = "updateNoteFields"
    result_type: ClassVar[Any] = None

    note: NoteFieldsUpdate


class NoteActions(ActionFamily):
    """Note operations keyed by note id."""

    def notes_info(self, notes: list[int]) -> Outcome[list[NoteInfo]]:
        """Model, tags and field values of each note."""
        return self._client.request(NotesInfoRequest(notes=notes))

    def update_note_fields(
        self,
        note_id: int,
        fields: dict[str, str],
        *,
        audio: list[NoteMedia] | None = None,
        video: list[NoteMedia] | None = None,
        picture: list[NoteMedia] | None = None,
    ) -> Outcome[None]:
        """Overwrite the given fields of a note; other fields are kept."""
        return self._client.request(
            UpdateNoteFieldsRequest(
                note=NoteFieldsUpdate(
                    id=note_id,
                    fields=fields,
                    audio=audio,
                    video=video,
                    picture=picture,
                )
            )
        )
