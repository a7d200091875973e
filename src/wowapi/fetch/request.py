"""Request construction: URL templating, field selectors and sort keys."""

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wowapi.config.constants import ACCOUNT_PATH, DEFAULT_HEADERS, WOW_PATH
from wowapi.config.options import ClientOptions
from wowapi.errors import ERROR_CODE_MISSING_TOKEN, ApiError, IllegalArgumentError
from wowapi.fetch.constants import FIELDS_QUERY_PARAM


_PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def build_path(template: str, substitutions: Mapping[str, Any] | None = None) -> str:
    """Replace ``:name`` placeholders in a path template.

    Placeholders without a supplied value are left as they are. Values are
    inserted in a single pass, so a value containing ``:name`` is never
    substituted again.

    Args:
        template: Path template, e.g. "character/:realm/:character".
        substitutions: Placeholder name -> value.

    Returns:
        The substituted path.
    """
    values = substitutions or {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    return _PLACEHOLDER_PATTERN.sub(_replace, template)


def normalize_protocol(protocol: str) -> str:
    """Ensure a protocol ends with a colon ("https" -> "https:")."""
    return protocol if protocol.endswith(":") else f"{protocol}:"


def build_base_uri(options: ClientOptions) -> str:
    """Substitute protocol and region into the options' base URI template."""
    return build_path(
        options.base_uri,
        {"protocol": normalize_protocol(options.protocol), "region": options.region},
    )


def format_slug(name: str) -> str:
    """Turn a realm name or slug into a slug.

    Spaces become dashes, apostrophes are dropped and the result is lower
    cased, so both "Mal'Ganis" and "malganis" give "malganis".
    """
    return name.replace(" ", "-").replace("'", "").lower()


def validate_fields(
    fields: Iterable[str] | None, max_fields: int | None = None
) -> str | None:
    """Validate field selectors and join them for the query string.

    Each selector must name exactly one field; a candidate containing a comma
    is a malformed multi-field item and rejects the whole request.

    Args:
        fields: Requested field selectors.
        max_fields: Per-resource cap, or None for no cap.

    Returns:
        Comma-joined selectors, or None when no selector is given.

    Raises:
        IllegalArgumentError: If a selector is not a string, contains a
            comma, or more than max_fields selectors are given.
    """
    if fields is None or isinstance(fields, str):
        return None

    accepted = list(fields)
    not_strings = [f for f in accepted if not isinstance(f, str)]
    if not_strings:
        msg = "Field selectors must be strings."
        raise IllegalArgumentError(msg, detail={"fields": not_strings})

    malformed = [f for f in accepted if "," in f]
    if malformed:
        msg = "Each field selector must name a single field."
        raise IllegalArgumentError(msg, detail={"fields": malformed})

    if max_fields is not None and len(accepted) > max_fields:
        msg = (
            "The maximum amount of fields per request for this service is "
            f"{max_fields}."
        )
        raise IllegalArgumentError(
            msg, detail={"max_fields": max_fields, "fields": accepted}
        )

    return ",".join(accepted) if accepted else None


def check_sort(
    sort_spec: Mapping[str, Any] | None, whitelist: Sequence[str]
) -> tuple[str, Any] | None:
    """Validate a single-entry sort specification.

    Args:
        sort_spec: Mapping of one sort key to the value to match, or None.
        whitelist: Sort keys the resource allows.

    Returns:
        The (key, value) pair, or None when no sort was requested.

    Raises:
        IllegalArgumentError: If the spec is malformed or the key is not allowed.
    """
    if sort_spec is None:
        return None

    if not isinstance(sort_spec, Mapping) or len(sort_spec) != 1:
        msg = "Parameter was set incorrectly."
        raise IllegalArgumentError(msg)

    key, value = next(iter(sort_spec.items()))
    if key not in whitelist:
        allowed = ", ".join(whitelist) if whitelist else "No allowed keys found"
        msg = f"You may only choose the following sort keys: {allowed}"
        raise IllegalArgumentError(msg, detail={"allowed": list(whitelist)})

    return key, value


def sort_data(
    items: Iterable[Mapping[str, Any]], sort_spec: tuple[str, Any]
) -> list[Mapping[str, Any]]:
    """Keep the items whose value at the sort key equals the requested value."""
    key, value = sort_spec
    return [item for item in items if item.get(key) == value]


class RequestSpec(BaseModel):
    """Immutable description of one outbound request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: str = "GET"
    base_uri: str = Field(min_length=1)
    prefix: str = WOW_PATH
    path_template: str
    substitutions: dict[str, Any] = Field(default_factory=dict)
    query: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(gt=0)

    @property
    def path(self) -> str:
        """Get the substituted path, including the API prefix."""
        return self.prefix + build_path(self.path_template, self.substitutions)

    @property
    def url(self) -> str:
        """Get the fully qualified URL, without query string."""
        return self.base_uri + self.path


class RequestBuilder:
    """Builds RequestSpecs for one client instance.

    Holds the instance-wide defaults (base URI, locale and API key query
    parameters, headers, timeout) and combines them with per-call inputs
    into a new RequestSpec on every ``build`` call. The builder itself is
    never changed by a call.
    """

    def __init__(self, api_key: str, options: ClientOptions) -> None:
        self._api_key = api_key
        self._options = options
        self._base_uri = build_base_uri(options)

    @property
    def base_uri(self) -> str:
        """Get the resolved base URI."""
        return self._base_uri

    @property
    def options(self) -> ClientOptions:
        """Get the resolved client options."""
        return self._options

    def default_query(self) -> dict[str, Any]:
        """Get the query parameters sent with every request."""
        return {"locale": self._options.locale, "apikey": self._api_key}

    def effective_timeout(self, resource_timeout: float | None) -> float:
        """Get the timeout for a call.

        A timeout supplied in the client options always wins; otherwise a
        resource-specific timeout replaces the default.
        """
        if self._options.timeout_pinned or resource_timeout is None:
            return float(self._options.timeout)
        return float(resource_timeout)

    def build(  # noqa: PLR0913
        self,
        path_template: str,
        substitutions: Mapping[str, Any] | None = None,
        *,
        fields: Iterable[str] | None = None,
        max_fields: int | None = None,
        query: Mapping[str, Any] | None = None,
        account: bool = False,
        authenticated: bool = False,
        timeout: float | None = None,
    ) -> RequestSpec:
        """Build a request in one pass.

        Args:
            path_template: Resource path template, e.g. "guild/:realm/:name".
            substitutions: Placeholder values for the template.
            fields: Optional field selectors.
            max_fields: Per-resource cap for field selectors.
            query: Extra query parameters.
            account: Use the account API prefix instead of the game prefix.
            authenticated: Send the access token as a bearer header.
            timeout: Resource-specific timeout in seconds.

        Returns:
            The immutable request description.

        Raises:
            IllegalArgumentError: If field selectors are invalid.
            ApiError: If authenticated is set and no access token is configured.
        """
        params = self.default_query()
        if query:
            params.update(query)

        joined = validate_fields(fields, max_fields)
        if joined:
            params[FIELDS_QUERY_PARAM] = joined

        headers = dict(DEFAULT_HEADERS)
        if authenticated:
            if not self._options.access_token:
                raise ApiError(
                    ERROR_CODE_MISSING_TOKEN, "This service requires an access token."
                )
            headers["Authorization"] = f"Bearer {self._options.access_token}"

        return RequestSpec(
            base_uri=self._base_uri,
            prefix=ACCOUNT_PATH if account else WOW_PATH,
            path_template=path_template,
            substitutions=dict(substitutions or {}),
            query=params,
            headers=headers,
            timeout=self.effective_timeout(timeout),
        )
