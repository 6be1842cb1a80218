"""RenderConfig: immutable settings for the rendering API.

Holds the default layout used when a caller does not pass a style, and the
size of the text cache. Validated on construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sapling_ast.tree.json import JSONFormat

__all__ = ["RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable rendering configuration.

    Attributes:
        format_style: Layout used when no explicit style is given.
            Accepts a ``JSONFormat`` or its string value ("compact",
            "pretty"). Defaults to PRETTY.
        cache_max_size: Number of rendered texts a ``TextCache`` built from
            this config holds before evicting (>= 1).
    """

    format_style: JSONFormat = JSONFormat.PRETTY
    cache_max_size: int = 512

    def __post_init__(self) -> None:
        try:
            style = JSONFormat(self.format_style)
        except ValueError:
            msg = (
                f"format_style must be one of {[s.value for s in JSONFormat]}, "
                f"got {self.format_style!r}"
            )
            raise ValueError(msg) from None
        # frozen: bypass __setattr__ to store the coerced enum member
        object.__setattr__(self, "format_style", style)
        if self.cache_max_size < 1:
            msg = f"cache_max_size must be >= 1, got {self.cache_max_size}"
            raise ValueError(msg)
