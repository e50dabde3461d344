"""Model (note type) and template operations."""

from __future__ import annotations

from typing import Self

from ankiconnect.models import Model, Template
from ankiconnect.services.base import ServiceBase


class ModelService(ServiceBase):
    """Operations on note types, their styling and card templates."""

    def list_models(self) -> list[str]:
        return self._invoke("modelNames")

    def get_model_fields(self, model: str) -> list[str]:
        """Return the field names of a model, in order."""
        return self._invoke("modelFieldNames", {"modelName": model})

    def get_model_css(self, model: str) -> str:
        return self._invoke("modelStyling", {"modelName": model})["css"]

    def get_model_templates(self, model: str) -> list[Template]:
        """Return the card templates of a model.

        Args:
            model: Model name

        Returns:
            Templates in the order the bridge lists them

        Example:
            >>> [t.name for t in anki.get_model_templates("Basic (and reversed card)")]
            ['Card 1', 'Card 2']
        """
        result = self._invoke("modelTemplates", {"modelName": model})
        return [
            Template(name, sides["Front"], sides["Back"])
            for name, sides in result.items()
        ]

    def update_model_css(self, model: str, css: str) -> Self:
        self._invoke("updateModelStyling", {"model": {"name": model, "css": css}})
        return self

    def update_model_template(self, model: str, template: Template) -> Self:
        """Replace the front and back of one template of a model."""
        self._invoke(
            "updateModelTemplates",
            {
                "model": {
                    "name": model,
                    "templates": {template.name: template.to_params()},
                }
            },
        )
        return self

    def create_model(self, model: Model) -> Self:
        """Create a new note type.

        Raises:
            ApiError: If the bridge rejects the model (e.g., name taken)
        """
        self._invoke("createModel", model.to_params())
        return self
