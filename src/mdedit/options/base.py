#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for mdedit options.

All options are frozen dataclasses: they are shared freely between editor
sessions and serializer calls and changed only by creating updated copies.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build options from a mapping, ignoring keys that are not fields.

        Dashes in keys are accepted in place of underscores so that values
        read from TOML or YAML config files map directly.

        Parameters
        ----------
        data : dict
            Option values

        Returns
        -------
        Self
            New options instance

        """
        names = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name in names:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
        pass
