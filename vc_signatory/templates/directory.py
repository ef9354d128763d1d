"""Template registry backed by directories of JSON files."""

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from .base import BaseTemplateRegistry, TemplateError, TemplateNotFoundError, VcTemplate

LOGGER = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".json"
TEMPLATE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
BUILTIN_RESOURCE_PATH = f"{__package__}.resources"


def _builtin_templates() -> Dict[str, str]:
    """Read the templates bundled with the package."""
    return {
        entry.name[: -len(TEMPLATE_SUFFIX)]: entry.read_text()
        for entry in resources.files(BUILTIN_RESOURCE_PATH).iterdir()
        if entry.name.endswith(TEMPLATE_SUFFIX)
    }


class DirectoryTemplateRegistry(BaseTemplateRegistry):
    """Serve `<name>.json` templates from directories.

    Directories are searched in the order given, then the bundled templates.
    New templates are saved to the first directory.
    """

    def __init__(
        self,
        directories: Optional[Sequence[Union[str, Path]]] = None,
        *,
        include_builtin: bool = True,
    ):
        """Initialize the registry.

        Args:
            directories: Directories holding custom templates
            include_builtin: Whether to serve the bundled templates

        """
        self.directories = [Path(directory) for directory in directories or []]
        self._builtin = _builtin_templates() if include_builtin else {}

    def _template_path(self, directory: Path, name: str) -> Path:
        if not TEMPLATE_NAME_PATTERN.match(name):
            raise TemplateError(f"Invalid template name: {name}")
        return directory / f"{name}{TEMPLATE_SUFFIX}"

    def get_template(self, name: str) -> VcTemplate:
        """Fetch a template by name.

        Raises:
            TemplateNotFoundError: If no directory nor the bundle holds `name`

        """
        if TEMPLATE_NAME_PATTERN.match(name):
            for directory in self.directories:
                path = self._template_path(directory, name)
                if path.is_file():
                    LOGGER.debug("Loading template %s from %s", name, path)
                    return VcTemplate(name, path.read_text(), mutable=True)
            if name in self._builtin:
                return VcTemplate(name, self._builtin[name])

        raise TemplateNotFoundError(f"No template found with name: {name}")

    def list_templates(self) -> Sequence[str]:
        """List template names, custom templates first."""
        names = []
        for directory in self.directories:
            if directory.is_dir():
                names.extend(
                    sorted(path.stem for path in directory.glob(f"*{TEMPLATE_SUFFIX}"))
                )
        names.extend(sorted(self._builtin))
        return list(dict.fromkeys(names))

    def save_template(self, name: str, template: str) -> VcTemplate:
        """Write a template to the first directory.

        Raises:
            TemplateError: If no directory is configured or the name is invalid

        """
        if not self.directories:
            raise TemplateError("No template directory configured for saving")
        path = self._template_path(self.directories[0], name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(template)
        LOGGER.debug("Saved template %s to %s", name, path)
        return VcTemplate(name, template, mutable=True)
