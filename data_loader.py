"""
Settings loading for selection runs and the benchmark.

Provides a typed loader that returns a ``SelectionSettings`` value with
defaults filled in for every key the file leaves out.
"""
import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from inputvalidations import validate_settings


@dataclass(frozen=True)
class SelectionSettings:
    """
    Budget, filter bounds and benchmark sizing.

    Attributes
    ----------
    budget           : total cost allowed per selection
    min_benefit      : inclusive lower benefit bound for the filter
    max_benefit      : inclusive upper benefit bound for the filter
    max_size         : number of benchmark steps; exhaustive input size at the last step
    repeats          : timed runs averaged per step
    greedy_size_step : greedy input size per step is greedy_size_step * step
    """
    budget: float = 2500.0
    min_benefit: float = 1.0
    max_benefit: float = 2500.0
    max_size: int = 20
    repeats: int = 10
    greedy_size_step: int = 200

    def validate(self) -> "SelectionSettings":
        validate_settings(
            budget=self.budget,
            min_benefit=self.min_benefit,
            max_benefit=self.max_benefit,
            max_size=self.max_size,
            repeats=self.repeats,
            greedy_size_step=self.greedy_size_step,
        )
        return self

    def with_overrides(self, **overrides: Any) -> "SelectionSettings":
        """Return a copy with every non-None override applied, validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()


_INT_KEYS = ("max_size", "repeats", "greedy_size_step")


def load_settings(path: str) -> SelectionSettings:
    """Load selection settings.

    Expects a JSON object; every key is optional:
      - "budget" (number >= 0)
      - "min_benefit", "max_benefit" (numbers, min <= max)
      - "max_size" (int, 1..63), "repeats" (int >= 1), "greedy_size_step" (int >= 1)

    Example JSON:
    {
      "budget": 2500,
      "max_size": 16,
      "repeats": 5
    }

    Args:
        path: Path to a JSON settings file.

    Returns:
        A validated SelectionSettings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not a JSON object, has unknown keys,
            or holds invalid values.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Settings file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse settings JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Settings file must contain a JSON object.")
    known = {fld.name for fld in fields(SelectionSettings)}
    unknown = sorted(k for k in data if k not in known)
    if unknown:
        raise ValueError(f"Settings file has unknown keys: {unknown}")

    values: Dict[str, Any] = {}
    for key, raw in data.items():
        if key in _INT_KEYS:
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise ValueError(f"{key} must be an integer, got {raw!r}.")
            values[key] = raw
        else:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ValueError(f"{key} must be a number, got {raw!r}.")
            try:
                values[key] = float(raw)
            except (TypeError, ValueError, OverflowError) as e:
                raise ValueError(f"{key} must be numeric, got {raw!r}.") from e
    return SelectionSettings(**values).validate()
