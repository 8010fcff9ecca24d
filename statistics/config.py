"""
Configuration for the statistics engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from dive_stats.units import LengthUnit

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

DEFAULT_METRIC_DEPTH_STEPS = [5, 10, 20]
DEFAULT_IMPERIAL_DEPTH_STEPS = [15, 30, 60]


def _validate_steps(steps: Any, unit: str) -> List[int]:
    """
    Check a list of depth step sizes.

    Raises:
        ValueError: If steps is empty, repeats a size or holds anything but
            positive integers.
    """
    if not isinstance(steps, (list, tuple)) or not steps:
        raise ValueError(f"Depth steps for {unit} must be a non-empty list, got {steps!r}")
    for step in steps:
        if isinstance(step, bool) or not isinstance(step, int) or step <= 0:
            raise ValueError(f"Depth step for {unit} must be a positive integer, got {step!r}")
    if len(set(steps)) != len(steps):
        raise ValueError(f"Depth steps for {unit} must not repeat, got {steps!r}")
    return list(steps)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """
    Get a sub-mapping of the config, empty if absent.

    Raises:
        ValueError: If the section is present but not a mapping.
    """
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {section!r}")
    return section


def _enabled_flags(categories_config: Dict[str, Any]) -> Dict[str, bool]:
    flags = {}
    for type_id, settings in categories_config.items():
        if isinstance(settings, dict):
            flags[type_id] = bool(settings.get('enabled', True))
        elif isinstance(settings, bool):
            flags[type_id] = settings
    return flags


@dataclass
class StatsConfig:
    """
    Configuration for dive statistics.

    The length unit is a user preference and may change while the program
    runs; categories read it each time their binners are requested.

    Attributes:
        length_unit: Preferred unit system for depths
        metric_depth_steps: Depth bin sizes offered in meters
        imperial_depth_steps: Depth bin sizes offered in feet
        categories: Dict of type_id -> enabled status
        config_file: Path to YAML config file (optional)
    """
    length_unit: LengthUnit = LengthUnit.METERS
    metric_depth_steps: List[int] = field(default_factory=lambda: list(DEFAULT_METRIC_DEPTH_STEPS))
    imperial_depth_steps: List[int] = field(default_factory=lambda: list(DEFAULT_IMPERIAL_DEPTH_STEPS))
    categories: Dict[str, bool] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists."""
        self.length_unit = LengthUnit.parse(self.length_unit)
        self.metric_depth_steps = _validate_steps(self.metric_depth_steps, 'meters')
        self.imperial_depth_steps = _validate_steps(self.imperial_depth_steps, 'feet')
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()
        elif self.config_file:
            logger.warning(f"Statistics config file not found: {self.config_file}")

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section. A file that cannot be read or holds
        invalid values leaves the current settings untouched.
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Expected a mapping at top level, got {type(data).__name__}")
            loaded = StatsConfig.from_dict(_section(data, 'statistics'))
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")
            return

        self.length_unit = loaded.length_unit
        self.metric_depth_steps = loaded.metric_depth_steps
        self.imperial_depth_steps = loaded.imperial_depth_steps
        self.categories.update(loaded.categories)
        logger.info(f"Loaded statistics config from {self.config_file}")

    @property
    def depth_steps(self) -> List[int]:
        """Depth bin sizes for the currently preferred unit."""
        if self.length_unit is LengthUnit.METERS:
            return list(self.metric_depth_steps)
        return list(self.imperial_depth_steps)

    def is_enabled(self, type_id: str) -> bool:
        """
        Check if a category is enabled.

        Args:
            type_id: Identifier of the category to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.categories.get(type_id, True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatsConfig:
        """
        Create configuration from dictionary.

        The dictionary has the layout of the 'statistics' section of the
        YAML file:

            units: {length: meters}
            depth_steps: {meters: [5, 10, 20], feet: [15, 30, 60]}
            categories: {buddy: true, dive_mode: {enabled: false}}

        Raises:
            ValueError: On a section that is not a mapping, an unknown unit or
                invalid depth steps.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Statistics config must be a mapping, got {data!r}")
        units = _section(data, 'units')
        depth_steps = _section(data, 'depth_steps')
        return cls(
            length_unit=LengthUnit.parse(units.get('length', LengthUnit.METERS)),
            metric_depth_steps=_validate_steps(depth_steps.get('meters', DEFAULT_METRIC_DEPTH_STEPS), 'meters'),
            imperial_depth_steps=_validate_steps(depth_steps.get('feet', DEFAULT_IMPERIAL_DEPTH_STEPS), 'feet'),
            categories=_enabled_flags(_section(data, 'categories')),
        )
