"""Bidirectional map between code points and HTML entity names.

The encode direction uses exactly one canonical name per code point, taken
from :data:`~uniescape.codec.entity_names.CANONICAL_ENTITY_NAMES`.  The decode
direction additionally accepts every HTML5 alias that stands for a single
code point (``&nbsp;`` and ``&NonBreakingSpace;`` both decode to U+00A0).
"""

import html.entities
from logging import getLogger
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .entity_names import CANONICAL_ENTITY_NAMES

logger = getLogger(__name__)

MAX_ENTITY_NAME_LENGTH = 32


class NamedEntityTable:
    """
    Immutable code point <-> entity name lookup.

    Build it once and share it; nothing mutates the maps after ``__init__``,
    so concurrent readers need no locking.

    Args:
        pairs: ``(code_point, canonical_name)`` pairs for the encode direction.
        aliases: Extra ``name -> code_point`` entries accepted when decoding.
            Canonical names always win over an alias spelled the same way.
    """

    def __init__(
        self,
        pairs: Iterable[Tuple[int, str]],
        aliases: Optional[Mapping[str, int]] = None,
    ):
        by_code_point = {}
        by_name = dict(aliases or {})
        canonical_names = set()

        for code_point, name in pairs:
            if code_point in by_code_point:
                raise ValueError(f"Duplicate canonical name for U+{code_point:04X}: {name}")
            if name in canonical_names:
                raise ValueError(f"Entity name used twice: {name}")
            canonical_names.add(name)
            by_code_point[code_point] = name
            by_name[name] = code_point

        self._names = MappingProxyType(by_code_point)
        self._code_points = MappingProxyType(by_name)

    def name_for(self, code_point: int) -> Optional[str]:
        """Canonical entity name for *code_point*, or None when it has none."""
        return self._names.get(code_point)

    def code_point_for(self, name: str) -> Optional[int]:
        """Code point an entity *name* (without ``&`` and ``;``) stands for."""
        return self._code_points.get(name)

    def is_known_name(self, name: str) -> bool:
        return name in self._code_points

    @property
    def names(self) -> Mapping[int, str]:
        """Read-only ``code_point -> canonical name`` view."""
        return self._names

    @property
    def code_points(self) -> Mapping[str, int]:
        """Read-only ``name -> code_point`` view, aliases included."""
        return self._code_points

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"NamedEntityTable(canonical={len(self._names)}, names={len(self._code_points)})"


def html5_single_code_point_names() -> dict:
    """Every HTML5 entity name that expands to exactly one code point."""
    result = {}
    for key, value in html.entities.html5.items():
        # Keys without the trailing semicolon are legacy duplicates.
        if not key.endswith(";") or len(value) != 1:
            continue
        result[key[:-1]] = ord(value)
    return result


def build_default_table() -> NamedEntityTable:
    """
    Build the table from the canonical name list and the HTML5 alias list.

    Canonical pairs whose name does not stand for that very code point in
    HTML5 (multi-character entities such as ``fjlig``) are left out of the
    encode direction.
    """
    aliases = html5_single_code_point_names()

    pairs = []
    for code_point, name in CANONICAL_ENTITY_NAMES:
        if aliases.get(name) != code_point:
            logger.debug("Skipping canonical entity %s for U+%04X: not an HTML5 alias", name, code_point)
            continue
        pairs.append((code_point, name))

    table = NamedEntityTable(pairs, aliases)
    logger.debug("Built %r", table)
    return table


_default_table: Optional[NamedEntityTable] = None


def get_entity_table() -> NamedEntityTable:
    """Return the process-wide entity table, building it on first use."""
    global _default_table
    if _default_table is None:
        _default_table = build_default_table()
    return _default_table


__all__ = [
    "MAX_ENTITY_NAME_LENGTH",
    "NamedEntityTable",
    "build_default_table",
    "get_entity_table",
    "html5_single_code_point_names",
]
