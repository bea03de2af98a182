"""Tree generation options and the JSON settings file they can be read from.

Settings use the same keys as the editor extension this tool grew out of
(``maxDepth``, ``excludePatterns``, ``useGitignore``, ``defaultFormat``), so one
settings object can drive both. Reading settings is never fatal: a missing,
unreadable, or malformed file behaves like an empty one.
"""

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from platformdirs import user_config_dir

from filetreegen.exceptions import UnsupportedFormatError
from filetreegen.types import PathType, TreeFormat

logger = logging.getLogger(__name__)

APP_NAME = "filetreegen"
SETTINGS_FILENAME = "settings.json"
DEFAULT_SETTINGS_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / SETTINGS_FILENAME

UNLIMITED_DEPTH = -1


def parse_format(value: Union[str, TreeFormat]) -> TreeFormat:
    """Convert a format name to a TreeFormat.

    Raises:
        UnsupportedFormatError: If the name is not one of text, markdown, json.

    Example:
        >>> parse_format("markdown")
        <TreeFormat.MARKDOWN: 'markdown'>
    """
    if isinstance(value, TreeFormat):
        return value
    try:
        return TreeFormat(str(value).lower())
    except ValueError:
        raise UnsupportedFormatError(str(value)) from None


@dataclass(frozen=True)
class TreeOptions:
    """Options for one tree build, immutable once created.

    Attributes:
        max_depth: Number of directory levels to descend below the root, or -1 for
            no limit.
        exclude_patterns: Gitignore-style patterns applied after any .gitignore rules.
        use_gitignore: Whether to load rules from the nearest ancestor .gitignore.
        format: Output format the tree is rendered in.

    Example:
        >>> options = TreeOptions(max_depth=2, exclude_patterns=["*.log"], format="json")
        >>> options.exclude_patterns
        ('*.log',)
        >>> options.format
        <TreeFormat.JSON: 'json'>
    """

    max_depth: int = UNLIMITED_DEPTH
    exclude_patterns: Tuple[str, ...] = field(default_factory=tuple)
    use_gitignore: bool = True
    format: TreeFormat = TreeFormat.TEXT

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < UNLIMITED_DEPTH:
            raise ValueError(f"max_depth must be -1 (unlimited) or a non-negative integer, got {self.max_depth}")
        if isinstance(self.exclude_patterns, str):
            raise ValueError("exclude_patterns must be a sequence of patterns, not a single string")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))
        object.__setattr__(self, "format", parse_format(self.format))

    @property
    def needs_matcher(self) -> bool:
        """True when a build with these options filters entries at all."""
        return self.use_gitignore or bool(self.exclude_patterns)

    def replace(self, **changes: Any) -> "TreeOptions":
        """Return a copy with the given fields changed, e.g. CLI overrides."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "TreeOptions":
        """Build options from a settings mapping.

        Missing keys take their defaults. Values of the wrong type are skipped with a
        warning instead of failing the whole load.

        Example:
            >>> TreeOptions.from_mapping({"maxDepth": 3, "defaultFormat": "markdown"})
            TreeOptions(max_depth=3, exclude_patterns=(), use_gitignore=True, format=<TreeFormat.MARKDOWN: 'markdown'>)
        """
        values: Dict[str, Any] = {}

        max_depth = settings.get("maxDepth")
        if max_depth is not None:
            if isinstance(max_depth, int) and not isinstance(max_depth, bool) and max_depth >= UNLIMITED_DEPTH:
                values["max_depth"] = max_depth
            else:
                logger.warning("Ignoring invalid maxDepth setting: %r", max_depth)

        patterns = settings.get("excludePatterns")
        if patterns is not None:
            if _is_pattern_list(patterns):
                values["exclude_patterns"] = tuple(patterns)
            else:
                logger.warning("Ignoring invalid excludePatterns setting: %r", patterns)

        use_gitignore = settings.get("useGitignore")
        if use_gitignore is not None:
            if isinstance(use_gitignore, bool):
                values["use_gitignore"] = use_gitignore
            else:
                logger.warning("Ignoring invalid useGitignore setting: %r", use_gitignore)

        fmt = settings.get("defaultFormat")
        if fmt is not None:
            try:
                values["format"] = parse_format(fmt)
            except UnsupportedFormatError:
                logger.warning("Ignoring invalid defaultFormat setting: %r", fmt)

        return cls(**values)


def _is_pattern_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str) and all(isinstance(p, str) for p in value)


def load_settings(path: Optional[PathType] = None) -> Dict[str, Any]:
    """Load the JSON settings object.

    Args:
        path: Settings file to read. Defaults to ``settings.json`` in the user config
            directory.

    Returns:
        The decoded settings, or an empty dict when the file is missing, unreadable,
        malformed, or not a JSON object.
    """
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug("No settings file at %s", settings_path)
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top-level value is not an object", settings_path)
        return {}
    return data

