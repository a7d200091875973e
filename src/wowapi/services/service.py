"""Generic resource service running one descriptor through the pipeline."""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from wowapi.cache import ResponseEnvelope
from wowapi.config.constants import COMPONENT_SERVICE
from wowapi.errors import IllegalArgumentError
from wowapi.fetch.pipeline import FetchPipeline
from wowapi.fetch.request import RequestBuilder, RequestSpec, check_sort, sort_data
from wowapi.services.descriptors import ResourceDescriptor


logger = structlog.get_logger()


class ResourceService:
    """One API resource bound to a request builder and a fetch pipeline.

    Every resource uses this same type; what differs between resources is
    the descriptor value it is created with.
    """

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        request_builder: RequestBuilder,
        pipeline: FetchPipeline,
    ) -> None:
        self._descriptor = descriptor
        self._request_builder = request_builder
        self._pipeline = pipeline
        self._log = logger.bind(component=COMPONENT_SERVICE, resource=descriptor.name)

    @property
    def descriptor(self) -> ResourceDescriptor:
        """Get the resource descriptor."""
        return self._descriptor

    @property
    def pipeline(self) -> FetchPipeline:
        """Get the fetch pipeline (and through it, the cache)."""
        return self._pipeline

    def build_request(
        self,
        substitutions: Mapping[str, Any] | None = None,
        *,
        fields: Iterable[str] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> RequestSpec:
        """Build the request for a call without sending it."""
        d = self._descriptor
        return self._request_builder.build(
            d.path_template,
            substitutions,
            fields=fields,
            max_fields=d.max_fields,
            query=query,
            account=d.account,
            authenticated=d.authenticated,
            timeout=d.timeout,
        )

    def fetch(
        self,
        substitutions: Mapping[str, Any] | None = None,
        *,
        fields: Iterable[str] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Fetch the raw envelope for a call."""
        spec = self.build_request(substitutions, fields=fields, query=query)
        return self._pipeline.fetch(spec)

    def get(
        self,
        substitutions: Mapping[str, Any] | None = None,
        *,
        fields: Iterable[str] | None = None,
        query: Mapping[str, Any] | None = None,
        sort: Mapping[str, Any] | None = None,
    ) -> Any:
        """Fetch a resource and build its domain components.

        Args:
            substitutions: Values for the path template placeholders.
            fields: Optional field selectors.
            query: Extra query parameters.
            sort: Single-entry {key: value} filter for list results.

        Returns:
            Built component(s), filtered by the sort spec when given.

        Raises:
            IllegalArgumentError: On invalid field selectors or sort keys.
            TransportError: On connection failure or timeout.
            ApiError: On a non-successful response.
        """
        # Sort keys are validated before any request is made
        sort_pair = check_sort(sort, self._descriptor.sort_whitelist)

        envelope = self.fetch(substitutions, fields=fields, query=query)
        result = self._descriptor.builder(envelope.body)

        if sort_pair is not None:
            if not isinstance(result, list):
                msg = f"Resource '{self._descriptor.name}' does not return a list"
                raise IllegalArgumentError(msg)
            result = sort_data(result, sort_pair)
            self._log.debug("sorted", key=sort_pair[0], matched=len(result))

        return result
