"""Resource services and the WowApi client."""

from wowapi.services.catalog import RESOURCES, RESOURCES_BY_NAME
from wowapi.services.client import WowApi
from wowapi.services.descriptors import ResourceDescriptor
from wowapi.services.service import ResourceService


__all__ = [
    "RESOURCES",
    "RESOURCES_BY_NAME",
    "ResourceDescriptor",
    "ResourceService",
    "WowApi",
]
