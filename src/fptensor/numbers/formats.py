"""Format descriptors for the fixed-point kernel.

Per-format constants are data, not code: they live in ``formats.yaml`` next to
this module and are loaded once. One `FixedFormat` is built per `FormatTag`;
every format-sensitive routine takes the descriptor instead of branching on
the tag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..config import default_config
from ..errors import FormatError
from .types import FormatTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedFormat:
    """Descriptor of one fixed-point format."""

    tag: FormatTag
    frac_bits: int
    log2_e: int
    exp2_poly: tuple[int, ...]
    reference_places: int

    @property
    def one(self) -> int:
        return 1 << self.frac_bits

    @property
    def half(self) -> int:
        return 1 << (self.frac_bits - 1)


def _table_path() -> Path:
    return Path(__file__).resolve().parent / "formats.yaml"


def _require_int(name: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise FormatError(f"{name} must be an int")
    return value


def _parse_format(tag: FormatTag, obj: Mapping[str, Any]) -> FixedFormat:
    if not isinstance(obj, Mapping):
        raise FormatError(f"{tag.value}: entry must be a mapping")
    frac_bits = _require_int(f"{tag.value}.frac_bits", obj.get("frac_bits"))
    if frac_bits <= 0:
        raise FormatError(f"{tag.value}.frac_bits must be positive")
    poly = obj.get("exp2_poly")
    if not isinstance(poly, list) or not poly:
        raise FormatError(f"{tag.value}.exp2_poly must be a non-empty list")
    coeffs = tuple(_require_int(f"{tag.value}.exp2_poly[{i}]", c) for i, c in enumerate(poly))
    return FixedFormat(
        tag=tag,
        frac_bits=frac_bits,
        log2_e=_require_int(f"{tag.value}.log2_e", obj.get("log2_e")),
        exp2_poly=coeffs,
        reference_places=_require_int(f"{tag.value}.reference_places", obj.get("reference_places")),
    )


@lru_cache(maxsize=1)
def format_table() -> dict[FormatTag, FixedFormat]:
    path = _table_path()
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping) or not isinstance(obj.get("formats"), Mapping):
        raise FormatError(f"{path.name}: missing 'formats' mapping")
    entries = obj["formats"]
    table: dict[FormatTag, FixedFormat] = {}
    for tag in FormatTag:
        if tag.value not in entries:
            raise FormatError(f"{path.name}: no entry for {tag.value}")
        table[tag] = _parse_format(tag, entries[tag.value])
    logger.debug("loaded %d fixed-point formats from %s", len(table), path)
    return table


def parse_tag(value: Union[FormatTag, str]) -> FormatTag:
    if isinstance(value, FormatTag):
        return value
    try:
        return FormatTag(value)
    except ValueError:
        raise FormatError(f"unknown fixed-point format: {value!r}") from None


def default_tag() -> FormatTag:
    return parse_tag(default_config().default_format)


def get_format(tag: Optional[Union[FormatTag, str]] = None) -> FixedFormat:
    """Descriptor for `tag`, or for the configured default format when None."""
    resolved = default_tag() if tag is None else parse_tag(tag)
    return format_table()[resolved]
