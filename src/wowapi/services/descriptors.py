"""Resource descriptors: the per-resource configuration of a service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceDescriptor:
    """Everything that distinguishes one API resource from another.

    Attributes:
        name: Unique resource name, e.g. "character".
        path_template: Path below the API prefix with ``:name`` placeholders.
        builder: Turns the decoded body into domain components.
        max_fields: Cap on field selectors, or None for no cap.
        sort_whitelist: Keys the resource's list results may be sorted by.
        account: Use the account API prefix instead of the game prefix.
        authenticated: Requires the user's access token.
        timeout: Resource-specific timeout in seconds.
    """

    name: str
    path_template: str
    builder: Callable[[Any], Any]
    max_fields: int | None = None
    sort_whitelist: tuple[str, ...] = field(default_factory=tuple)
    account: bool = False
    authenticated: bool = False
    timeout: float | None = None
