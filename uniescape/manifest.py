"""Declarative plugin metadata used by listings and the CLI.

Usage::

    from uniescape.manifest import PluginManifest

    manifest = PluginManifest(
        name="codepoint",
        display_name="Code Points",
        description="Encode and decode Unicode escape notations.",
        group="Codec",
        notations=["named", "hex", "javascript"],
    )
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PluginManifest:
    """Metadata about a plugin.

    Every :class:`~uniescape.plugins.base.TransformerPlugin` exposes a
    ``manifest`` property.  The base class generates one from the plugin
    ``name``; subclasses override it to describe themselves.
    """

    name: str
    display_name: str = ""
    description: str = ""
    version: str = "0.1.0"
    group: Optional[str] = None  # "Codec" | "Text"

    # Escape notations the plugin's transformers read or write.
    notations: List[str] = field(default_factory=list)

    experimental: bool = False
    deprecated: Optional[str] = None  # Deprecation message

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.name.replace("_", " ").title()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict suitable for JSON output."""
        d: Dict[str, Any] = {
            "name": self.name,
            "displayName": self.display_name,
            "description": self.description,
            "version": self.version,
        }
        if self.group is not None:
            d["group"] = self.group
        if self.notations:
            d["notations"] = list(self.notations)
        if self.experimental:
            d["experimental"] = True
        if self.deprecated is not None:
            d["deprecated"] = self.deprecated
        return d


__all__ = [
    "PluginManifest",
]
