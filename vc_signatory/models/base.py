"""Base classes for Models and Schemas."""

import importlib
import json
import logging
from abc import ABC
from typing import Optional, Type, TypeVar, Union, cast

from marshmallow import EXCLUDE, Schema, ValidationError, post_dump, post_load

from ..core.error import BaseError

LOGGER = logging.getLogger(__name__)


class ClassNotFoundError(BaseError):
    """Class not found error."""


class BaseModelError(BaseError):
    """Base exception class for base model errors."""


def resolve_class(the_cls, relative_cls: Optional[type] = None) -> type:
    """
    Resolve a class from a type or a name.

    Names without a module path are looked up in the module of `relative_cls`.

    Raises:
        ClassNotFoundError: If the class could not be loaded

    """
    if isinstance(the_cls, type):
        return the_cls
    if not isinstance(the_cls, str):
        raise TypeError(
            f"Could not resolve class from {the_cls}; incorrect type {type(the_cls)}"
        )

    if "." in the_cls:
        module_name, class_name = the_cls.rsplit(".", 1)
    else:
        module_name, class_name = relative_cls and relative_cls.__module__, the_cls
    if not module_name:
        raise ClassNotFoundError(f"No module to resolve class {the_cls} from")

    try:
        module = importlib.import_module(module_name)
    except ImportError as err:
        raise ClassNotFoundError(f"Unable to import module {module_name}") from err

    resolved = getattr(module, class_name, None)
    if not isinstance(resolved, type):
        raise ClassNotFoundError(f"Class {class_name} not found in {module_name}")
    return resolved


def resolve_meta_property(obj, prop_name: str, defval=None):
    """Return a `Meta` attribute of a class or instance, searching base classes."""
    cls = obj if isinstance(obj, type) else obj.__class__
    while cls and cls is not object:
        meta = getattr(cls, "Meta", None)
        if meta and hasattr(meta, prop_name):
            return getattr(meta, prop_name)
        cls = cls.__bases__[0]
    return defval


def _make_schema(schema_cls, unknown: Optional[str] = None) -> Schema:
    return schema_cls(
        unknown=unknown or resolve_meta_property(schema_cls, "unknown", EXCLUDE)
    )


ModelType = TypeVar("ModelType", bound="BaseModel")


class BaseModel(ABC):
    """Base model that provides convenience methods."""

    class Meta:
        """BaseModel meta data."""

        schema_class = None

    def __init__(self):
        """
        Initialize BaseModel.

        Raises:
            TypeError: If schema_class is not set on Meta

        """
        if not self.Meta.schema_class:
            raise TypeError(
                f"Can't instantiate abstract class {self.__class__.__name__} "
                "with no schema_class"
            )

    @classmethod
    def _get_schema_class(cls) -> Type["BaseModelSchema"]:
        resolved = resolve_class(cls.Meta.schema_class, cls)
        if not issubclass(resolved, BaseModelSchema):
            raise TypeError(
                f"Resolved class is not a subclass of BaseModelSchema: {resolved}"
            )
        return resolved

    @classmethod
    def deserialize(
        cls: Type[ModelType],
        obj,
        *,
        unknown: Optional[str] = None,
    ) -> ModelType:
        """
        Convert from JSON representation to a model instance.

        Args:
            obj: The dict (or JSON string) to load into a model instance
            unknown: Behaviour for unknown attributes, the schema's by default

        Raises:
            BaseModelError: If the data does not match the schema

        """
        schema = _make_schema(cls._get_schema_class(), unknown)
        try:
            return cast(
                ModelType,
                schema.loads(obj) if isinstance(obj, str) else schema.load(obj),
            )
        except (AttributeError, ValidationError) as err:
            LOGGER.exception("%s schema validation error:", cls.__name__)
            raise BaseModelError(f"{cls.__name__} schema validation failed") from err

    def serialize(
        self,
        *,
        as_string: bool = False,
        unknown: Optional[str] = None,
    ) -> Union[str, dict]:
        """
        Create a JSON-compatible dict representation of the model instance.

        Args:
            as_string: Return a compact JSON string instead of a dict
            unknown: Behaviour for unknown attributes

        Raises:
            BaseModelError: If the model cannot be dumped

        """
        schema = _make_schema(self._get_schema_class(), unknown)
        try:
            if as_string:
                return schema.dumps(self, separators=(",", ":"))
            return schema.dump(self)
        except (AttributeError, ValidationError) as err:
            LOGGER.exception("%s serialization error:", self.__class__.__name__)
            raise BaseModelError(
                f"{self.__class__.__name__} schema validation failed"
            ) from err

    @classmethod
    def from_json(cls, json_repr: Union[str, bytes], unknown: Optional[str] = None):
        """
        Parse a JSON string into a model instance.

        Raises:
            BaseModelError: If the JSON cannot be parsed or does not match the schema

        """
        try:
            parsed = json.loads(json_repr)
        except ValueError as err:
            LOGGER.exception("%s JSON parse error:", cls.__name__)
            raise BaseModelError(f"{cls.__name__} JSON parsing failed") from err
        return cls.deserialize(parsed, unknown=unknown)

    def to_json(self, unknown: str = None) -> str:
        """Create a JSON representation of the model instance."""
        return json.dumps(self.serialize(unknown=unknown))

    def __repr__(self) -> str:
        """Return a human readable representation of this model."""
        exclude = resolve_meta_property(self, "repr_exclude", [])
        items = (
            f"{key}={value!r}"
            for key, value in self.__dict__.items()
            if key not in exclude
        )
        return f"<{self.__class__.__name__}({', '.join(items)})>"


class BaseModelSchema(Schema):
    """BaseModel schema."""

    class Meta:
        """BaseModelSchema metadata."""

        model_class = None
        skip_values = [None]
        ordered = True

    def __init__(self, *args, **kwargs):
        """
        Initialize BaseModelSchema.

        Raises:
            TypeError: If model_class is not set on Meta

        """
        super().__init__(*args, **kwargs)
        if not self.Meta.model_class:
            raise TypeError(
                f"Can't instantiate abstract class {self.__class__.__name__} "
                "with no model_class"
            )

    @property
    def Model(self) -> type:
        """Accessor for the schema's model class."""
        return resolve_class(self.Meta.model_class, self.__class__)

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Return model instance after loading."""
        return self.Model(**data)

    @post_dump
    def remove_skipped_values(self, data, **kwargs):
        """Remove values that are are marked to skip."""
        skip_vals = resolve_meta_property(self, "skip_values", [])
        return {key: value for key, value in data.items() if value not in skip_vals}
