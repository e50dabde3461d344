"""Unit tests for model and template operations."""

from __future__ import annotations

import json

import pytest

from ankiconnect.models import Model, Template
from ankiconnect.protocol.exceptions import UnexpectedResultError
from ankiconnect.services.anki import Anki
from fakes import FakeTransport

CSS = (
    ".card {\n font-family: arial;\n font-size: 20px;\n text-align: center;\n"
    " color: black;\n background-color: white;\n}\n"
)

TEMPLATES = {
    "Card 1": {"Front": "{{Front}}", "Back": "{{FrontSide}}\n\n<hr id=answer>\n\n{{Back}}"},
    "Card 2": {"Front": "{{Back}}", "Back": "{{FrontSide}}\n\n<hr id=answer>\n\n{{Front}}"},
}


class TestModelQueries:
    """Tests for reading models."""

    def test_list_models(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result(["Basic", "Basic (and reversed card)"])

        assert anki.list_models() == ["Basic", "Basic (and reversed card)"]
        assert transport.last_body == '{"action":"modelNames","version":6}'

    def test_get_model_fields(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result(["Front", "Back"])

        assert anki.get_model_fields("Basic") == ["Front", "Back"]
        assert transport.last_body == (
            '{"action":"modelFieldNames","version":6,"params":{"modelName":"Basic"}}'
        )

    def test_get_model_css(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result({"css": CSS})

        assert anki.get_model_css("Basic (and reversed card)") == CSS
        assert transport.last_request["params"] == {"modelName": "Basic (and reversed card)"}

    def test_get_model_css_requires_css_member(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result({"style": CSS})

        with pytest.raises(UnexpectedResultError):
            anki.get_model_css("Basic")

    def test_get_model_templates(self, anki: Anki, transport: FakeTransport) -> None:
        """Test templates come back as Template values in remote order."""
        transport.queue_result(TEMPLATES)

        templates = anki.get_model_templates("Basic (and reversed card)")

        assert [t.name for t in templates] == ["Card 1", "Card 2"]
        assert all(isinstance(t, Template) for t in templates)
        assert templates[0].front == "{{Front}}"
        assert templates[1].back == "{{FrontSide}}\n\n<hr id=answer>\n\n{{Front}}"
        assert transport.last_request["action"] == "modelTemplates"

    def test_get_model_templates_rejects_non_object(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result([])

        with pytest.raises(UnexpectedResultError):
            anki.get_model_templates("Basic")


class TestModelUpdates:
    """Tests for changing models."""

    def test_update_model_css(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result(None)

        assert anki.update_model_css("Custom", "p { color: blue; }") is anki
        assert transport.last_body == (
            '{"action":"updateModelStyling","version":6,"params":'
            '{"model":{"name":"Custom","css":"p { color: blue; }"}}}'
        )

    def test_update_model_template(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result(None)
        template = Template("Card 1", "{{Question}}?", "{{Answer}}!")

        assert anki.update_model_template("Custom", template) is anki
        assert transport.last_body == (
            '{"action":"updateModelTemplates","version":6,"params":{"model":{"name":"Custom",'
            '"templates":{"Card 1":{"Front":"{{Question}}?","Back":"{{Answer}}!"}}}}}'
        )

    def test_create_model(self, anki: Anki, transport: FakeTransport) -> None:
        """Test the model is sent in wire order and a string id is accepted."""
        transport.queue_result({"name": "newModelName", "id": "1551462107104", "tags": []})
        model = Model(
            "newModelName",
            ["Field1", "Field2", "Field3"],
            [Template("My Card 1", "Front html {{Field1}}", "Back html {{Field2}}")],
        ).with_css("Optional CSS with default to builtin css")

        assert anki.create_model(model) is anki
        assert transport.last_body == (
            '{"action":"createModel","version":6,"params":{"modelName":"newModelName",'
            '"inOrderFields":["Field1","Field2","Field3"],'
            '"css":"Optional CSS with default to builtin css",'
            '"cardTemplates":[{"Name":"My Card 1","Front":"Front html {{Field1}}",'
            '"Back":"Back html {{Field2}}"}]}}'
        )

    def test_create_model_without_css(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue_result({"id": 1551462107104})
        model = Model("Plain", ["Front"], [Template("Card 1", "{{Front}}", "")])

        anki.create_model(model)

        assert "css" not in transport.last_request["params"]

    def test_create_model_requires_numeric_id(self, anki: Anki, transport: FakeTransport) -> None:
        transport.queue(json.dumps({"result": {"id": "not-a-number"}, "error": None}))
        model = Model("Plain", ["Front"], [Template("Card 1", "{{Front}}", "")])

        with pytest.raises(UnexpectedResultError):
            anki.create_model(model)
