"""WowApi: the entry point bundling one service per API resource."""

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

import httpx
import structlog

from wowapi.cache import CacheEngine, SimpleCache
from wowapi.config.constants import COMPONENT_SERVICE
from wowapi.config.options import ClientOptions, resolve_options
from wowapi.errors import ApiError, ConfigurationError
from wowapi.fetch.constants import HTTP_STATUS_NOT_FOUND
from wowapi.fetch.pipeline import FetchPipeline
from wowapi.fetch.request import RequestBuilder, format_slug
from wowapi.mapping import Component
from wowapi.services.catalog import RESOURCES
from wowapi.services.service import ResourceService
from wowapi.settings.app import AppSettings, get_settings


logger = structlog.get_logger()

Fields = Iterable[str] | None
Sort = Mapping[str, Any] | None


class WowApi:
    """Client for the World of Warcraft community API.

    Options are resolved and validated once. Every resource gets its own
    ResourceService with its own fetch pipeline; pipelines share the
    injected cache engine when one is given, otherwise each owns a fresh
    SimpleCache.

    Example:
        api = WowApi("my-key", {"region": "eu", "locale": "en_GB"})
        character = api.get_character("Hyjal", "Ardeel", fields=["items"])
    """

    def __init__(
        self,
        api_key: str,
        options: Mapping[str, Any] | None = None,
        http_client: httpx.Client | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Application key sent as the ``apikey`` query parameter.
            options: Any subset of protocol, region, locale, timeout,
                access_token, cache_engine and base_uri.
            http_client: Shared httpx client for all calls.
            clock: Source of the current UTC time, for the freshness window.

        Raises:
            ConfigurationError: If the key is empty or an option is invalid.
        """
        if not api_key:
            raise ConfigurationError("An API key is required", field="api_key")

        self._options = resolve_options(options)
        self._request_builder = RequestBuilder(api_key, self._options)
        self._services: dict[str, ResourceService] = {}

        shared_cache: CacheEngine | None = self._options.cache_engine
        for descriptor in RESOURCES:
            pipeline_kwargs: dict[str, Any] = {
                "cache": shared_cache if shared_cache is not None else SimpleCache(),
                "http_client": http_client,
            }
            if clock is not None:
                pipeline_kwargs["clock"] = clock
            self._services[descriptor.name] = ResourceService(
                descriptor, self._request_builder, FetchPipeline(**pipeline_kwargs)
            )

        logger.bind(component=COMPONENT_SERVICE).info(
            "client_initialized",
            region=self._options.region,
            locale=self._options.locale,
            base_uri=self._request_builder.base_uri,
            services=len(self._services),
        )

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> "WowApi":
        """Create a client from environment-backed settings.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        settings = settings or get_settings()
        if settings.api_key is None:
            raise ConfigurationError("WOW_API_KEY is not set", field="api_key")
        return cls(
            settings.api_key.get_secret_value(),
            settings.to_options(),
            http_client=http_client,
        )

    @property
    def options(self) -> ClientOptions:
        """Get the resolved options."""
        return self._options

    @property
    def base_uri(self) -> str:
        """Get the resolved base URI."""
        return self._request_builder.base_uri

    def service(self, name: str) -> ResourceService:
        """Get the service for a resource by name.

        Raises:
            KeyError: If no resource has that name.
        """
        return self._services[name]

    # Achievements, auctions and bosses

    def get_achievement(self, achievement_id: int) -> Component:
        return self.service("achievement").get({"id": achievement_id})

    def get_auction(self, realm: str) -> Component:
        """Get the auction dump descriptor (file URLs) for a realm."""
        return self.service("auction").get({"realm": format_slug(realm)})

    def get_boss(self, boss_id: int) -> Component:
        return self.service("boss").get({"id": boss_id})

    def get_bosses(self) -> list[Component]:
        return self.service("bosses").get()

    # Challenge mode

    def get_challenge_ladder(self, realm: str) -> list[Component]:
        return self.service("challenge").get({"realm": format_slug(realm)})

    def get_region_ladder(self) -> list[Component]:
        return self.service("challenge_region").get()

    # Characters and guilds

    def get_character(
        self, realm: str, character: str, fields: Fields = None
    ) -> Component:
        """Get a character profile, with optional extra field selectors."""
        return self.service("character").get(
            {"realm": realm, "character": character}, fields=fields
        )

    def get_character_classes(self) -> list[Component]:
        return self.service("character_classes").get()

    def get_character_races(self) -> list[Component]:
        return self.service("character_races").get()

    def get_guild(self, realm: str, guild: str, fields: Fields = None) -> Component:
        return self.service("guild").get({"realm": realm, "guild": guild}, fields=fields)

    # Items

    def get_item(self, item_id: int) -> Component:
        return self.service("item").get({"id": item_id})

    def get_item_set(self, set_id: int) -> Component:
        return self.service("item_set").get({"id": set_id})

    # Mounts and pets

    def get_mounts(self) -> list[Component]:
        return self.service("mounts").get()

    def sort_mounts(self, sort: Sort) -> list[Component]:
        """Get the mounts whose flag equals the given value, e.g. {"isFlying": True}."""
        return self.service("mounts").get(sort=sort)

    def get_pets(self) -> list[Component]:
        return self.service("pets").get()

    def get_pet_ability(self, ability_id: int) -> Component:
        return self.service("pet_ability").get({"id": ability_id})

    def get_pet_species(self, species_id: int) -> Component:
        return self.service("pet_species").get({"id": species_id})

    def get_pet_species_stats(
        self,
        species_id: int,
        level: int = 1,
        breed_id: int = 3,
        quality_id: int = 1,
    ) -> Component:
        """Get a pet species' stats at a level, breed and quality."""
        return self.service("pet_stats").get(
            {"id": species_id},
            query={"level": level, "breedId": breed_id, "qualityId": quality_id},
        )

    # Quests, realms, recipes, spells and zones

    def get_quest(self, quest_id: int) -> Component:
        return self.service("quest").get({"id": quest_id})

    def get_realms(self, realms: Iterable[str] | None = None) -> list[Component]:
        """Get the status of all realms, or only the named ones."""
        query = None
        if realms:
            query = {"realms": ",".join(format_slug(r) for r in realms)}
        return self.service("realms").get(query=query)

    def get_realm(self, realm: str) -> Component:
        """Get the status of one realm.

        Raises:
            ApiError: With code 404 if the realm is unknown.
        """
        found = self.get_realms([realm])
        if not found:
            raise ApiError(HTTP_STATUS_NOT_FOUND, "Realm not found.", {"realm": realm})
        return found[0]

    def sort_realms(self, sort: Sort) -> list[Component]:
        """Get the realms matching a type or population, e.g. {"type": "pvp"}."""
        return self.service("realms").get(sort=sort)

    def get_recipe(self, recipe_id: int) -> Component:
        return self.service("recipe").get({"id": recipe_id})

    def get_spell(self, spell_id: int) -> Component:
        return self.service("spell").get({"id": spell_id})

    def get_zones(self) -> list[Component]:
        return self.service("zones").get()

    def get_zone(self, zone_id: int) -> Component:
        return self.service("zone").get({"id": zone_id})

    # Account resources, which need the user's access token

    def get_user_characters(self) -> list[Component]:
        return self.service("user_characters").get()

    def get_user_account_id(self) -> Any:
        return self.service("user_id").get()

    def get_user_battletag(self) -> Any:
        return self.service("user_battletag").get()
