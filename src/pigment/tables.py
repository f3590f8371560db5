from __future__ import annotations

"""Packaged lookup tables (harmony angles/bands and naming word banks).

Both tables ship as YAML under ``pigment/data`` and are read once per
process. The returned structures are immutable so callers can share them
freely across threads.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Tuple

import yaml

_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class HarmonySpec:
    """One row of the harmony table."""

    name: str
    offsets: Tuple[float, ...]
    weight: float
    saturation: Tuple[float, float]
    lightness: Tuple[float, float]


@dataclass(frozen=True)
class HarmonyTable:
    golden_angle: float
    legible_lightness: Tuple[float, float]
    min_saturation: float
    harmonies: Mapping[str, HarmonySpec]


def _load_yaml(filename: str) -> dict[str, Any]:
    path = _DATA_DIR / filename
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{filename}: top-level mapping expected")
    return data


def _freeze(obj: Any) -> Any:
    if isinstance(obj, dict):
        return MappingProxyType({str(k): _freeze(v) for k, v in obj.items()})
    if isinstance(obj, list):
        return tuple(_freeze(v) for v in obj)
    return obj


def _band(row: Mapping[str, Any], key: str, name: str) -> Tuple[float, float]:
    lo, hi = (float(v) for v in row[key])
    if lo > hi:
        raise ValueError(f"harmony '{name}': {key} band is inverted ({lo} > {hi})")
    return (lo, hi)


@lru_cache(maxsize=None)
def harmony_table() -> HarmonyTable:
    """Load and validate ``harmonies.yaml``.

    Raises
    ------
    ValueError
        If a row is malformed or the selection weights do not sum to 1.0.
    """
    data = _load_yaml("harmonies.yaml")
    rows: dict[str, HarmonySpec] = {}
    for name, row in data["harmonies"].items():
        offsets = tuple(float(o) for o in row["offsets"])
        if not offsets:
            raise ValueError(f"harmony '{name}' has no offsets")
        rows[name] = HarmonySpec(
            name=name,
            offsets=offsets,
            weight=float(row["weight"]),
            saturation=_band(row, "saturation", name),
            lightness=_band(row, "lightness", name),
        )
    total = math.fsum(spec.weight for spec in rows.values())
    if abs(total - 1.0) > 1e-9:
        raise ValueError(f"harmony weights must sum to 1.0 (got {total})")
    legibility = data["legibility"]
    return HarmonyTable(
        golden_angle=float(data["golden_angle"]),
        legible_lightness=(
            float(legibility["lightness"][0]),
            float(legibility["lightness"][1]),
        ),
        min_saturation=float(legibility["min_saturation"]),
        harmonies=MappingProxyType(rows),
    )


@lru_cache(maxsize=None)
def name_banks() -> Mapping[str, Any]:
    """Load ``name_banks.yaml`` as nested read-only mappings of word tuples."""
    data = _load_yaml("name_banks.yaml")
    for key in ("hue", "themes", "saturation", "lightness", "type", "suffixes"):
        if key not in data:
            raise ValueError(f"name_banks.yaml: missing '{key}' bank")
    return _freeze(data)


__all__ = ["HarmonySpec", "HarmonyTable", "harmony_table", "name_banks"]
