"""Credential template registry interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from marshmallow import EXCLUDE, fields

from ..core.error import BaseError
from ..models.base import BaseModel, BaseModelSchema
from ..vc.models.credential import VerifiableCredential


class TemplateError(BaseError):
    """Base class for template registry errors."""


class TemplateNotFoundError(TemplateError):
    """Raised when no template is registered under the requested name."""


class VcTemplate(BaseModel):
    """A named, unsigned credential skeleton."""

    class Meta:
        """VcTemplate metadata."""

        schema_class = "VcTemplateSchema"

    def __init__(self, name: str, template: str, mutable: bool = False):
        """Initialize a VcTemplate.

        Args:
            name: Template identifier
            template: JSON text of the partial credential
            mutable: Whether the registry may overwrite this template

        """
        super().__init__()
        self.name = name
        self.template = template
        self.mutable = mutable


class VcTemplateSchema(BaseModelSchema):
    """VcTemplate schema."""

    class Meta:
        """VcTemplateSchema metadata."""

        model_class = VcTemplate
        unknown = EXCLUDE

    name = fields.Str(required=True, metadata={"example": "vc-template-default"})
    template = fields.Str(
        required=True, metadata={"description": "Partial credential as JSON"}
    )
    mutable = fields.Bool(required=False)


class BaseTemplateRegistry(ABC):
    """Lookup of credential templates by name."""

    @abstractmethod
    def get_template(self, name: str) -> VcTemplate:
        """Fetch a template.

        Raises:
            TemplateNotFoundError: If no template is registered under `name`

        """

    @abstractmethod
    def list_templates(self) -> Sequence[str]:
        """List the names of all registered templates."""

    def load_template(self, name: str) -> VerifiableCredential:
        """Fetch a template and parse it into an unsigned credential."""
        return VerifiableCredential.from_json(self.get_template(name).template)
