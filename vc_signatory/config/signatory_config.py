"""Signatory configuration loaded from a YAML or JSON file."""

import logging
from os import PathLike
from typing import Union

import yaml
from marshmallow import EXCLUDE, fields

from ..models.base import BaseModel, BaseModelError, BaseModelSchema
from ..vc.models.proof_config import ProofConfig, ProofConfigSchema
from .error import ConfigError

LOGGER = logging.getLogger(__name__)


class SignatoryConfig(BaseModel):
    """Static signatory settings."""

    class Meta:
        """SignatoryConfig metadata."""

        schema_class = "SignatoryConfigSchema"

    def __init__(self, proof_config: ProofConfig):
        """Initialize the signatory configuration.

        Args:
            proof_config: Proof configuration used when a caller supplies none

        """
        super().__init__()
        self.proof_config = proof_config


class SignatoryConfigSchema(BaseModelSchema):
    """SignatoryConfig schema."""

    class Meta:
        """SignatoryConfigSchema metadata."""

        model_class = SignatoryConfig
        unknown = EXCLUDE

    proof_config = fields.Nested(
        ProofConfigSchema(),
        required=True,
        data_key="proofConfig",
        metadata={"description": "Default proof configuration"},
    )


def load_signatory_config(path: Union[str, PathLike]) -> SignatoryConfig:
    """Load signatory settings from a file.

    Args:
        path: Location of a YAML (or JSON) document holding a `proofConfig` object

    Raises:
        ConfigError: If the file is missing, unparsable or invalid

    """
    try:
        with open(path, "r") as stream:
            settings = yaml.safe_load(stream)
    except OSError as err:
        raise ConfigError(f"Unable to read signatory config file: {path}") from err
    except yaml.YAMLError as err:
        raise ConfigError(f"Unable to parse signatory config file: {path}") from err

    if not isinstance(settings, dict):
        raise ConfigError(f"Signatory config file must hold a mapping: {path}")

    try:
        config = SignatoryConfig.deserialize(settings)
    except BaseModelError as err:
        raise ConfigError(f"Invalid signatory config in {path}") from err

    LOGGER.debug("Loaded signatory config from %s", path)
    return config
