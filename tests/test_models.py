"""Unit tests for the value types."""

from __future__ import annotations

import dataclasses

import pytest

from ankiconnect.exceptions import ValidationError
from ankiconnect.models import Config, Model, Note, Review, Template


class TestTemplate:
    """Tests for Template."""

    def test_renderings(self) -> None:
        template = Template("Card 1", "{{Front}}", "{{Back}}")

        assert template.to_params() == {"Front": "{{Front}}", "Back": "{{Back}}"}
        assert template.to_card_template() == {
            "Name": "Card 1",
            "Front": "{{Front}}",
            "Back": "{{Back}}",
        }

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Template name cannot be empty"):
            Template("", "{{Front}}", "{{Back}}")


class TestModel:
    """Tests for Model."""

    def test_non_template_rejected(self) -> None:
        """CRITICAL: Test a template list with a foreign element fails."""
        with pytest.raises(ValidationError, match="got dict"):
            Model("Custom", ["Front"], [{"Name": "Card 1", "Front": "", "Back": ""}])  # type: ignore[list-item]

    def test_sequences_become_tuples(self) -> None:
        model = Model("Custom", ["Front", "Back"], [Template("Card 1", "{{Front}}", "{{Back}}")])

        assert model.fields == ("Front", "Back")
        assert isinstance(model.templates, tuple)

    def test_with_css_returns_new_model(self) -> None:
        model = Model("Custom", ["Front"], [Template("Card 1", "{{Front}}", "")])

        styled = model.with_css(".card {}")

        assert styled.css == ".card {}"
        assert model.css is None

    def test_string_fields_rejected(self) -> None:
        """CRITICAL: Test a bare field name is not split into characters."""
        with pytest.raises(ValidationError, match="Model fields must be a collection, got str"):
            Model("Custom", "Front", [Template("Card 1", "{{Front}}", "")])  # type: ignore[arg-type]

    def test_string_templates_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Model templates must be a collection"):
            Model("Custom", ["Front"], "Card 1")  # type: ignore[arg-type]

    def test_non_iterable_fields_rejected(self) -> None:
        with pytest.raises(ValidationError, match="got int"):
            Model("Custom", 3, [Template("Card 1", "{{Front}}", "")])  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", ["", 1, None])
    def test_invalid_field_names_rejected(self, name: object) -> None:
        with pytest.raises(ValidationError, match="Invalid model field name"):
            Model("Custom", ["Front", name], [Template("Card 1", "{{Front}}", "")])  # type: ignore[list-item]

    def test_model_is_hashable(self) -> None:
        model = Model("Custom", ["Front"], [Template("Card 1", "{{Front}}", "")])

        assert hash(model) == hash(Model("Custom", ("Front",), (Template("Card 1", "{{Front}}", ""),)))

    def test_to_params_order(self) -> None:
        model = Model("Custom", ["Front"], [Template("Card 1", "{{Front}}", "")], css="p {}")

        assert list(model.to_params()) == ["modelName", "inOrderFields", "css", "cardTemplates"]


class TestNote:
    """Tests for Note."""

    def test_minimal_params(self) -> None:
        """Test empty members are left out."""
        note = Note("Default", "Basic", {"Front": "front", "Back": "back"})

        assert note.to_params() == {
            "deckName": "Default",
            "modelName": "Basic",
            "fields": {"Front": "front", "Back": "back"},
        }

    def test_tags_are_deduplicated_in_order(self) -> None:
        note = Note("Default", "Basic", {}, tags=["b", "a", "b"])

        assert note.tags == ("b", "a")

    def test_string_tags_rejected(self) -> None:
        """Test a bare string is not split into characters."""
        with pytest.raises(ValidationError, match="not a string"):
            Note("Default", "Basic", {}, tags="animals")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("key", "value"),
        [("allowDuplicate", "yes"), ("duplicateScope", 1), ("closeAfterAdding", 0)],
    )
    def test_known_option_types_checked(self, key: str, value: object) -> None:
        with pytest.raises(ValidationError, match=key):
            Note("Default", "Basic", {}, options={key: value})

    def test_unknown_options_pass_through(self) -> None:
        note = Note("Default", "Basic", {}).with_option("duplicateScopeOptions", {"deckName": "Default"})

        assert note.to_params()["options"] == {"duplicateScopeOptions": {"deckName": "Default"}}

    def test_audio_requires_url_and_filename(self) -> None:
        with pytest.raises(ValidationError, match="'url' and 'filename'"):
            Note("Default", "Basic", {}, audio=({"url": "https://example.com/a.mp3"},))

    def test_with_methods_return_new_notes(self) -> None:
        note = Note("Default", "Basic", {"Front": "x"})

        tagged = note.with_tags(["t"])

        assert tagged.tags == ("t",)
        assert note.tags == ()

    def test_note_is_frozen(self) -> None:
        note = Note("Default", "Basic", {})

        with pytest.raises(dataclasses.FrozenInstanceError):
            note.deck_name = "Other"  # type: ignore[misc]

    def test_empty_deck_rejected(self) -> None:
        with pytest.raises(ValidationError, match="deck name"):
            Note("", "Basic", {})

    def test_field_list_rejected(self) -> None:
        """Test a list of field names is refused instead of leaking a ValueError."""
        with pytest.raises(ValidationError, match="must map field names to values, got list"):
            Note("Default", "Basic", ["Front"])  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"": "x"}, "Invalid note field name"),
            ({1: "x"}, "Invalid note field name"),
            ({"Front": 1}, "Note field 'Front' must be str, got int"),
            ({"Front": None}, "got NoneType"),
        ],
    )
    def test_field_entries_checked(self, fields: dict, message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            Note("Default", "Basic", fields)

    def test_non_iterable_tags_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Note tags must be a collection"):
            Note("Default", "Basic", {}, tags=5)  # type: ignore[arg-type]

    def test_note_is_unhashable(self) -> None:
        """Test notes compare by value but refuse to hash their dict members."""
        note = Note("Default", "Basic", {"Front": "a"})

        assert note == Note("Default", "Basic", {"Front": "a"})
        with pytest.raises(TypeError, match="unhashable"):
            hash(note)


class TestReview:
    """Tests for Review."""

    ROW = [1594194095746, 1485369733217, -1, 3, 4, -60, 2500, 6157, 0]

    def test_round_trip_keeps_order(self) -> None:
        """CRITICAL: Test the positional order survives."""
        review = Review.from_list(self.ROW)

        assert review.to_list() == self.ROW
        assert review.previous_interval == -60
        assert review.new_factor == 2500

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValidationError, match="got 8"):
            Review.from_list(self.ROW[:8])

    def test_booleans_rejected(self) -> None:
        with pytest.raises(ValidationError, match="usn"):
            Review(1, 2, True, 3, 4, 5, 6, 7, 8)  # type: ignore[arg-type]


class TestConfig:
    """Tests for Config."""

    def test_payload_is_copied(self) -> None:
        """Test later edits to the source dict do not leak in."""
        source = {"id": 1, "name": "Default", "new": {"perDay": 20}}
        config = Config(source)

        source["new"]["perDay"] = 99
        params = config.to_params()
        params["new"]["perDay"] = 50

        assert config.payload["new"]["perDay"] == 20

    def test_with_values(self) -> None:
        config = Config({"id": 1, "name": "Default"})

        renamed = config.with_values(name="Renamed")

        assert renamed.name == "Renamed"
        assert config.name == "Default"
        assert renamed.id == 1

    def test_config_is_unhashable(self) -> None:
        config = Config({"id": 1, "name": "Default"})

        assert config == Config({"id": 1, "name": "Default"})
        with pytest.raises(TypeError, match="unhashable"):
            hash(config)

    @pytest.mark.parametrize("payload", [{}, {"id": "1"}, {"id": True}])
    def test_integer_id_required(self, payload: dict) -> None:
        with pytest.raises(ValidationError, match="integer 'id' required"):
            Config(payload)
