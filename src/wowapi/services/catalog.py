"""Catalog of the API resources the client exposes."""

from wowapi.components import builders
from wowapi.services.descriptors import ResourceDescriptor


# Auction dumps are large; give them more time than the default
AUCTION_TIMEOUT_SECONDS = 30.0

REALM_SORT_KEYS = ("type", "population")
MOUNT_SORT_KEYS = ("isGround", "isFlying", "isAquatic", "isJumping")

RESOURCES: tuple[ResourceDescriptor, ...] = (
    ResourceDescriptor("achievement", "achievement/:id", builders.build_achievement),
    ResourceDescriptor(
        "auction",
        "auction/data/:realm",
        builders.build_auction,
        timeout=AUCTION_TIMEOUT_SECONDS,
    ),
    ResourceDescriptor("boss", "boss/:id", builders.build_boss),
    ResourceDescriptor("bosses", "boss/", builders.build_bosses),
    ResourceDescriptor("challenge", "challenge/:realm", builders.build_challenges),
    ResourceDescriptor("challenge_region", "challenge/region", builders.build_challenges),
    ResourceDescriptor(
        "character", "character/:realm/:character", builders.build_character
    ),
    ResourceDescriptor(
        "character_classes", "data/character/classes", builders.build_character_classes
    ),
    ResourceDescriptor(
        "character_races", "data/character/races", builders.build_character_races
    ),
    ResourceDescriptor("guild", "guild/:realm/:guild", builders.build_guild),
    ResourceDescriptor("item", "item/:id", builders.build_item),
    ResourceDescriptor("item_set", "item/set/:id", builders.build_item_set),
    ResourceDescriptor(
        "mounts", "mount/", builders.build_mounts, sort_whitelist=MOUNT_SORT_KEYS
    ),
    ResourceDescriptor("pets", "pet/", builders.build_pets),
    ResourceDescriptor("pet_ability", "pet/ability/:id", builders.build_pet_ability),
    ResourceDescriptor("pet_species", "pet/species/:id", builders.build_pet_species),
    ResourceDescriptor("pet_stats", "pet/stats/:id", builders.build_pet_stats),
    ResourceDescriptor("quest", "quest/:id", builders.build_quest),
    ResourceDescriptor(
        "realms", "realm/status", builders.build_realms, sort_whitelist=REALM_SORT_KEYS
    ),
    ResourceDescriptor("recipe", "recipe/:id", builders.build_recipe),
    ResourceDescriptor("spell", "spell/:id", builders.build_spell),
    ResourceDescriptor("zones", "zone/", builders.build_zones),
    ResourceDescriptor("zone", "zone/:id", builders.build_zone),
    ResourceDescriptor(
        "user_characters",
        "user/characters",
        builders.build_characters,
        authenticated=True,
    ),
    ResourceDescriptor(
        "user_id",
        "user/id",
        builders.build_user_account_id,
        account=True,
        authenticated=True,
    ),
    ResourceDescriptor(
        "user_battletag",
        "user/battletag",
        builders.build_user_battletag,
        account=True,
        authenticated=True,
    ),
)

RESOURCES_BY_NAME: dict[str, ResourceDescriptor] = {r.name: r for r in RESOURCES}
