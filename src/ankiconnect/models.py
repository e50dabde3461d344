"""Value types exchanged with the bridge.

Small immutable records with constructor checks and a ``to_params`` /
``to_list`` rendering into the exact shape the actions expect. Invalid
construction raises :class:`~ankiconnect.exceptions.ValidationError`
before anything is sent.
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ankiconnect.exceptions import ValidationError

# Option keys the bridge understands, with the type each must have.
# Any other key is passed through untouched.
NOTE_OPTION_TYPES: dict[str, type] = {
    "allowDuplicate": bool,
    "duplicateScope": str,
    "closeAfterAdding": bool,
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _collection(value: Any, what: str) -> tuple[Any, ...]:
    # A bare string is iterable but never a collection of names.
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValidationError(f"{what} must be a collection, got {type(value).__name__}")
    return tuple(value)


@dataclass(frozen=True)
class Template:
    """Card template of a model.

    Attributes:
        name: Template name (e.g., "Card 1")
        front: Question-side markup
        back: Answer-side markup
    """

    name: str
    front: str
    back: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Template name cannot be empty")

    def to_params(self) -> dict[str, str]:
        """Render as the ``{Front, Back}`` pair used by updateModelTemplates."""
        return {"Front": self.front, "Back": self.back}

    def to_card_template(self) -> dict[str, str]:
        """Render as a createModel ``cardTemplates`` entry."""
        return {"Name": self.name, "Front": self.front, "Back": self.back}


@dataclass(frozen=True)
class Model:
    """Note type definition used to create a model.

    Attributes:
        name: Model name
        fields: Field names, in order
        templates: Card templates, every one a :class:`Template`
        css: Optional styling; the bridge uses its built-in css when None

    Example:
        >>> model = Model("Vocab", ["Word", "Meaning"], [Template("Card 1", "{{Word}}", "{{Meaning}}")])
        >>> model.to_params()["inOrderFields"]
        ['Word', 'Meaning']
    """

    name: str
    fields: tuple[str, ...]
    templates: tuple[Template, ...]
    css: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Model name cannot be empty")
        object.__setattr__(self, "fields", _collection(self.fields, "Model fields"))
        object.__setattr__(self, "templates", _collection(self.templates, "Model templates"))
        for name in self.fields:
            if not isinstance(name, str) or not name:
                raise ValidationError(f"Invalid model field name: {name!r}")
        for template in self.templates:
            if not isinstance(template, Template):
                raise ValidationError(
                    "Model templates must only contain Template instances, "
                    f"got {type(template).__name__}"
                )

    def with_css(self, css: str) -> Model:
        return dataclasses.replace(self, css=css)

    def to_params(self) -> dict[str, Any]:
        """Render as createModel params."""
        params: dict[str, Any] = {
            "modelName": self.name,
            "inOrderFields": list(self.fields),
        }
        if self.css:
            params["css"] = self.css
        params["cardTemplates"] = [t.to_card_template() for t in self.templates]
        return params


@dataclass(frozen=True)
class Note:
    """Note to be added.

    Attributes:
        deck_name: Target deck
        model_name: Note type
        fields: Field name to value
        tags: Tags, de-duplicated in first-seen order
        options: Add options (``allowDuplicate``, ``duplicateScope``,
            ``closeAfterAdding``; unknown keys pass through)
        audio: Audio attachments, each with ``url`` and ``filename`` and
            optionally ``skipHash`` and ``fields``

    Example:
        >>> note = Note("Default", "Basic", {"Front": "cat", "Back": "neko"}).with_tags(["animals"])
        >>> note.to_params()["tags"]
        ['animals']
    """

    deck_name: str
    model_name: str
    fields: Mapping[str, str]
    tags: tuple[str, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    audio: tuple[Mapping[str, Any], ...] = ()

    # Holds dicts, so equal notes compare equal but cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not self.deck_name:
            raise ValidationError("Note deck name cannot be empty")
        if not self.model_name:
            raise ValidationError("Note model name cannot be empty")

        if not isinstance(self.fields, Mapping):
            raise ValidationError(
                f"Note fields must map field names to values, got {type(self.fields).__name__}"
            )
        for name, value in self.fields.items():
            if not isinstance(name, str) or not name:
                raise ValidationError(f"Invalid note field name: {name!r}")
            if not isinstance(value, str):
                raise ValidationError(
                    f"Note field '{name}' must be str, got {type(value).__name__}"
                )

        if isinstance(self.tags, str):
            raise ValidationError("Note tags must be a collection of strings, not a string")
        tags = tuple(dict.fromkeys(_collection(self.tags, "Note tags")))
        for tag in tags:
            if not isinstance(tag, str) or not tag:
                raise ValidationError(f"Invalid tag: {tag!r}")

        for key, expected in NOTE_OPTION_TYPES.items():
            if key in self.options and not isinstance(self.options[key], expected):
                raise ValidationError(
                    f"Note option '{key}' must be {expected.__name__}, "
                    f"got {type(self.options[key]).__name__}"
                )

        audio = tuple(dict(entry) for entry in self.audio)
        for entry in audio:
            if not entry.get("url") or not entry.get("filename"):
                raise ValidationError("Audio entries require 'url' and 'filename'")

        object.__setattr__(self, "fields", dict(self.fields))
        object.__setattr__(self, "tags", tags)
        object.__setattr__(self, "options", dict(self.options))
        object.__setattr__(self, "audio", audio)

    def with_tags(self, tags: Iterable[str]) -> Note:
        return dataclasses.replace(self, tags=tuple(tags))

    def with_option(self, key: str, value: Any) -> Note:
        return dataclasses.replace(self, options={**self.options, key: value})

    def with_audio(self, audio: Iterable[Mapping[str, Any]]) -> Note:
        return dataclasses.replace(self, audio=tuple(audio))

    def to_params(self) -> dict[str, Any]:
        """Render the non-empty members as the ``note`` param."""
        params: dict[str, Any] = {
            "deckName": self.deck_name,
            "modelName": self.model_name,
            "fields": dict(self.fields),
        }
        if self.options:
            params["options"] = dict(self.options)
        if self.tags:
            params["tags"] = list(self.tags)
        if self.audio:
            params["audio"] = [dict(entry) for entry in self.audio]
        return params


@dataclass(frozen=True)
class Review:
    """One review-log entry.

    The wire format is a positional array; the field order below is the
    order on the wire and must not change.
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

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            if not _is_int(getattr(self, f.name)):
                raise ValidationError(f"Review {f.name} must be an integer")

    @classmethod
    def from_list(cls, values: Sequence[int]) -> Review:
        """Build a review from its positional wire array."""
        if len(values) != 9:
            raise ValidationError(f"Review arrays hold 9 values, got {len(values)}")
        return cls(*values)

    def to_list(self) -> list[int]:
        """Render as the positional wire array."""
        return [
            self.review_time,
            self.card_id,
            self.usn,
            self.button_pressed,
            self.new_interval,
            self.previous_interval,
            self.new_factor,
            self.review_duration,
            self.review_type,
        ]


@dataclass(frozen=True)
class Config:
    """Deck options group.

    Wraps the opaque configuration object returned by getDeckConfig so it
    can be edited and saved back. The payload is copied on the way in and
    on the way out.

    Example:
        >>> config = Config({"id": 1, "name": "Default", "new": {"perDay": 20}})
        >>> config.with_values(name="Renamed").to_params()["name"]
        'Renamed'
    """

    payload: Mapping[str, Any]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.payload, Mapping) or not _is_int(self.payload.get("id")):
            raise ValidationError(f"Invalid config, integer 'id' required: {self.payload!r}")
        object.__setattr__(self, "payload", copy.deepcopy(dict(self.payload)))

    @property
    def id(self) -> int:
        return self.payload["id"]

    @property
    def name(self) -> str | None:
        return self.payload.get("name")

    def with_values(self, **values: Any) -> Config:
        """Return a copy with top-level members replaced."""
        return Config({**self.payload, **values})

    def to_params(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.payload))
