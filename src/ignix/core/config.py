"""Project configuration loading.

Reads ``ignix.toml`` from the project directory (falling back to the
``[tool.ignix]`` table of ``pyproject.toml``). Config files are plain data;
nothing in them is executed.
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "ignix.toml"

_REGISTRY_ROOT = "https://raw.githubusercontent.com/mindfiredigital/ignix-ui/main/packages/registry"

DEFAULTS: dict[str, str] = {
    "registry_url": f"{_REGISTRY_ROOT}/registry.json",
    "template_url": f"{_REGISTRY_ROOT}/templates.json",
    "theme_url": f"{_REGISTRY_ROOT}/themes.json",
    "components_dir": "src/components/ui",
    "template_dir": "src/components/templates",
    "themes_dir": "src/themes",
}


@dataclass(frozen=True)
class IgnixConfig:
    """Immutable project configuration.

    Loaded once per command, inside the scoped working directory. Directory
    fields are absolute, resolved against the project directory.
    """

    registry_url: str
    template_url: str
    theme_url: str
    components_dir: Path
    template_dir: Path
    themes_dir: Path

    @staticmethod
    def for_test(
        project_dir: Path,
        registry_url: str = "https://registry.test/registry.json",
        template_url: str = "https://registry.test/templates.json",
        theme_url: str = "https://registry.test/themes.json",
    ) -> "IgnixConfig":
        """Create a config rooted at project_dir with test registry URLs."""
        return IgnixConfig(
            registry_url=registry_url,
            template_url=template_url,
            theme_url=theme_url,
            components_dir=project_dir / DEFAULTS["components_dir"],
            template_dir=project_dir / DEFAULTS["template_dir"],
            themes_dir=project_dir / DEFAULTS["themes_dir"],
        )


def _read_pyproject_section(project_dir: Path) -> dict[str, Any]:
    pyproject_path = project_dir / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    tool_section = data.get("tool", {})
    if not isinstance(tool_section, dict):
        raise ValueError(f"Invalid 'tool' in {pyproject_path}: expected a table")

    ignix_section = tool_section.get("ignix", {})
    if not isinstance(ignix_section, dict):
        raise ValueError(f"Invalid 'tool.ignix' in {pyproject_path}: expected a table")
    return ignix_section


def load_config(project_dir: Path) -> IgnixConfig:
    """Load configuration for the project rooted at project_dir.

    Precedence: ``ignix.toml`` over ``[tool.ignix]`` in ``pyproject.toml``
    over built-in defaults. A missing config file is not an error.

    Example ignix.toml:
      registry_url = "https://example.com/registry/registry.json"
      components_dir = "src/components/ui"

    Raises:
        ValueError: If a known key holds a non-string value, or the TOML is malformed
    """
    cfg_path = project_dir / CONFIG_FILENAME

    values: dict[str, Any] = dict(DEFAULTS)
    source = cfg_path
    try:
        pyproject_values = _read_pyproject_section(project_dir)
        file_values: dict[str, Any] = {}
        if cfg_path.exists():
            file_values = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config in {project_dir}: {e}") from e

    if pyproject_values and not file_values:
        source = project_dir / "pyproject.toml"

    for layer in (pyproject_values, file_values):
        for key, value in layer.items():
            if key not in DEFAULTS:
                logger.debug("Ignoring unknown config key %r in %s", key, source)
                continue
            if not isinstance(value, str):
                raise ValueError(f"Invalid '{key}' in {source}: expected a string")
            values[key] = value

    return IgnixConfig(
        registry_url=values["registry_url"],
        template_url=values["template_url"],
        theme_url=values["theme_url"],
        components_dir=(project_dir / values["components_dir"]).resolve(),
        template_dir=(project_dir / values["template_dir"]).resolve(),
        themes_dir=(project_dir / values["themes_dir"]).resolve(),
    )
