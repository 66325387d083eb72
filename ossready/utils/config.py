"""Configuration management for ossready."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import toml

from ossready.readiness.layouts import ProjectLayout, detect_layout, get_layout
from ossready.readiness.thresholds import RELEASE_MINIMUM_SCORE, ScoreThresholds

logger = logging.getLogger(__name__)


@dataclass
class ProjectConfig:
    """Configuration loaded from pyproject.toml [tool.ossready] section."""

    release_minimum: int = RELEASE_MINIMUM_SCORE
    layout: str | None = None
    exclude: list[str] = field(default_factory=list)

    @classmethod
    def from_pyproject(cls, project_path: Path) -> "ProjectConfig":
        """Load configuration from pyproject.toml if it exists."""
        pyproject_path = project_path / "pyproject.toml"
        config = cls()

        if pyproject_path.is_file():
            try:
                data = toml.load(pyproject_path)
            except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
                # If we can't parse the config, use defaults
                logger.debug(f"Ignoring unreadable {pyproject_path}: {e}")
                return cls()

            tool = data.get("tool")
            ossready_config = tool.get("ossready") if isinstance(tool, dict) else None
            if not isinstance(ossready_config, dict):
                return config

            try:
                if "release_minimum" in ossready_config:
                    config.release_minimum = int(ossready_config["release_minimum"])
                if "layout" in ossready_config:
                    config.layout = str(ossready_config["layout"])
            except (TypeError, ValueError) as e:
                logger.debug(f"Ignoring invalid [tool.ossready] in {pyproject_path}: {e}")
                return cls()

            exclude = ossready_config.get("exclude")
            if isinstance(exclude, list):
                config.exclude = [str(d) for d in exclude]
            elif exclude is not None:
                logger.debug(f"Ignoring non-list [tool.ossready] exclude: {exclude!r}")

        return config

    def thresholds(self) -> ScoreThresholds:
        """Build the score thresholds, with the release minimum applied."""
        return ScoreThresholds(release_minimum=self.release_minimum)

    def resolve_layout(self, project_path: Path, override: str | None = None) -> ProjectLayout:
        """Pick the layout: explicit override, then config, then detection.

        Raises:
            ValueError: If the named layout does not exist
        """
        name = override or self.layout
        layout = get_layout(name) if name else detect_layout(project_path)
        if self.exclude:
            layout = layout.with_excluded_dirs(tuple(self.exclude))
        return layout
