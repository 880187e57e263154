"""
Configuration for photo extraction: preprocessing, object filtering,
boundary tracing and line segmentation.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from ..lines.segmentation import (
    EXTENDING_MIN_LENGTH,
    HALVING_MIN_LENGTH,
    MAX_LOOK_AHEAD,
    SegmentationStrategy,
)


@dataclass
class ExtractionConfig:
    """
    Configuration for extracting photo outlines from a scan.

    Attributes:
        blur_amount: Gaussian blur sigma before quantizing (0 disables)
        quantize_levels: Number of color bins per channel
        min_object_distance: Objects whose first and last pixels are not
            further apart than this are skipped (really small objects)
        max_line_error: Mean distance from a line as a fraction of its length
        strategy: Line segmentation strategy
        max_trace_length: Boundary path cap (None = 2 * width * height)
        halving_min_length: Minimum line length for the halving strategy
        extending_min_length: Minimum line length for the extending strategy
        max_look_ahead: Non-improving points tolerated when extending a line
    """
    blur_amount: int = 2
    quantize_levels: int = 10
    min_object_distance: float = 100.0
    max_line_error: float = 0.04
    strategy: SegmentationStrategy = SegmentationStrategy.EXTENDING_DECREASING_ERROR
    max_trace_length: Optional[int] = None
    halving_min_length: int = HALVING_MIN_LENGTH
    extending_min_length: int = EXTENDING_MIN_LENGTH
    max_look_ahead: int = MAX_LOOK_AHEAD

    def __post_init__(self):
        """Validate configuration values."""
        self._validate()

    def _validate(self):
        """Validate all configuration values."""
        # Accept the strategy by name too
        if not isinstance(self.strategy, SegmentationStrategy):
            try:
                self.strategy = SegmentationStrategy(self.strategy)
            except ValueError:
                choices = ", ".join(s.value for s in SegmentationStrategy)
                raise ValueError(f"strategy must be one of {choices}, got {self.strategy!r}")

        if self.blur_amount < 0:
            raise ValueError(f"blur_amount must be >= 0, got {self.blur_amount}")

        if self.quantize_levels < 2:
            raise ValueError(f"quantize_levels must be >= 2, got {self.quantize_levels}")

        if self.min_object_distance < 0:
            raise ValueError(
                f"min_object_distance must be >= 0, got {self.min_object_distance}"
            )

        if self.max_line_error < 0:
            raise ValueError(f"max_line_error must be >= 0, got {self.max_line_error}")

        if self.max_trace_length is not None and self.max_trace_length < 1:
            raise ValueError(
                f"max_trace_length must be >= 1 or None, got {self.max_trace_length}"
            )

        if self.halving_min_length < 1:
            raise ValueError(f"halving_min_length must be >= 1, got {self.halving_min_length}")

        if self.extending_min_length < 1:
            raise ValueError(
                f"extending_min_length must be >= 1, got {self.extending_min_length}"
            )

        if self.max_look_ahead < 0:
            raise ValueError(f"max_look_ahead must be >= 0, got {self.max_look_ahead}")

    def trace_length_for(self, width: int, height: int) -> int:
        """Boundary path cap for an image of the given size."""
        if self.max_trace_length is not None:
            return self.max_trace_length
        return max(2 * width * height, 1)

    def segmentation_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for find_lines() with the configured strategy."""
        if self.strategy == SegmentationStrategy.HALVING_EXTENDING:
            return {"min_length": self.halving_min_length}
        return {
            "min_length": self.extending_min_length,
            "max_look_ahead": self.max_look_ahead,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "blur_amount": self.blur_amount,
            "quantize_levels": self.quantize_levels,
            "min_object_distance": self.min_object_distance,
            "max_line_error": self.max_line_error,
            "strategy": self.strategy.value,
            "max_trace_length": self.max_trace_length,
            "halving_min_length": self.halving_min_length,
            "extending_min_length": self.extending_min_length,
            "max_look_ahead": self.max_look_ahead,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractionConfig":
        """Create from dictionary (e.g., from YAML config)."""
        defaults = cls()
        return cls(
            blur_amount=data.get("blur_amount", defaults.blur_amount),
            quantize_levels=data.get("quantize_levels", defaults.quantize_levels),
            min_object_distance=data.get("min_object_distance", defaults.min_object_distance),
            max_line_error=data.get("max_line_error", defaults.max_line_error),
            strategy=data.get("strategy", defaults.strategy),
            max_trace_length=data.get("max_trace_length", defaults.max_trace_length),
            halving_min_length=data.get("halving_min_length", defaults.halving_min_length),
            extending_min_length=data.get("extending_min_length", defaults.extending_min_length),
            max_look_ahead=data.get("max_look_ahead", defaults.max_look_ahead),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ExtractionConfig":
        """Load configuration from YAML file."""
        import yaml

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("extraction", data))

    @classmethod
    def default(cls) -> "ExtractionConfig":
        """Create default configuration."""
        return cls()
