"""Domain components: mapping specs and payload builders."""

from wowapi.components import builders, specs


__all__ = ["builders", "specs"]
