"""Builders turning decoded payloads into domain components.

Each builder runs the generic field mapper and then rebuilds the nested
structures its type owns (reward items, challenge criteria, abilities...).
"""

from collections.abc import Mapping
from typing import Any

from wowapi.components import specs
from wowapi.errors import ApiError
from wowapi.fetch.constants import HTTP_STATUS_NOT_FOUND
from wowapi.mapping import Component, MappingSpec, map_each, map_fields


def _list_at(payload: Any, key: str) -> list[Any]:
    """Get the JSON array stored under a key, or an empty list."""
    if isinstance(payload, Mapping):
        value = payload.get(key)
        if isinstance(value, list):
            return value
    return []


def _rebuild(component: Component, field: str, spec: MappingSpec) -> Component:
    """Map a nested object or array field of a component with another spec."""
    value = component.get(field)
    if isinstance(value, list):
        return component.replace(**{field: map_each(spec, value)})
    if isinstance(value, Mapping):
        return component.replace(**{field: map_fields(spec, value)})
    return component


def build_item(payload: Any) -> Component:
    return map_fields(specs.ITEM, payload)


def build_item_set(payload: Any) -> Component:
    return map_fields(specs.ITEM_SET, payload)


def build_achievement(payload: Any) -> Component:
    """Build an Achievement, rebuilding reward items as Items."""
    achievement = map_fields(specs.ACHIEVEMENT, payload)
    return achievement.replace(
        rewardItems=map_each(specs.ITEM, achievement.rewardItems)
    )


def build_auction(payload: Any) -> Component:
    """Build an Auction whose files are AuctionFile components."""
    auction = map_fields(specs.AUCTION, payload)
    return auction.replace(files=map_each(specs.AUCTION_FILE, auction.files))


def build_boss(payload: Any) -> Component:
    return map_fields(specs.BOSS, payload)


def build_bosses(payload: Any) -> list[Component]:
    return map_each(specs.BOSS, _list_at(payload, "bosses"))


def build_challenge_map(payload: Any) -> Component:
    """Build a ChallengeMap with its three time criteria."""
    challenge_map = map_fields(specs.CHALLENGE_MAP, payload)
    for criteria in ("bronzeCriteria", "silverCriteria", "goldCriteria"):
        challenge_map = _rebuild(challenge_map, criteria, specs.CHALLENGE_TIME)
    return challenge_map


def build_challenges(payload: Any) -> list[Component]:
    """Build a challenge ladder, one Challenge per map."""
    challenges = []
    for entry in _list_at(payload, "challenge"):
        challenge = map_fields(specs.CHALLENGE, entry)
        if isinstance(challenge.map, Mapping):
            challenge = challenge.replace(map=build_challenge_map(challenge.map))
        challenges.append(challenge)
    return challenges


def build_character(payload: Any) -> Component:
    """Build a Character, rebuilding the talent spec when present."""
    return _rebuild(map_fields(specs.CHARACTER, payload), "spec", specs.TALENT_SPEC)


def build_characters(payload: Any) -> list[Component]:
    return [build_character(entry) for entry in _list_at(payload, "characters")]


def build_character_classes(payload: Any) -> list[Component]:
    return map_each(specs.CHARACTER_CLASS, _list_at(payload, "classes"))


def build_character_races(payload: Any) -> list[Component]:
    return map_each(specs.CHARACTER_RACE, _list_at(payload, "races"))


def build_guild(payload: Any) -> Component:
    return map_fields(specs.GUILD, payload)


def build_mounts(payload: Any) -> list[Component]:
    return map_each(specs.MOUNT, _list_at(payload, "mounts"))


def build_pets(payload: Any) -> list[Component]:
    return map_each(specs.PET, _list_at(payload, "pets"))


def build_pet_ability(payload: Any) -> Component:
    return map_fields(specs.PET_ABILITY, payload)


def build_pet_species(payload: Any) -> Component:
    """Build PetSpecies with its abilities as PetAbility components."""
    return _rebuild(map_fields(specs.PET_SPECIES, payload), "abilities", specs.PET_ABILITY)


def build_pet_stats(payload: Any) -> Component:
    return map_fields(specs.PET_STATS, payload)


def build_quest(payload: Any) -> Component:
    return map_fields(specs.QUEST, payload)


def build_realms(payload: Any) -> list[Component]:
    return map_each(specs.REALM, _list_at(payload, "realms"))


def build_recipe(payload: Any) -> Component:
    return map_fields(specs.RECIPE, payload)


def build_spell(payload: Any) -> Component:
    return map_fields(specs.SPELL, payload)


def build_zone(payload: Any) -> Component:
    """Build a Zone with its bosses as Boss components."""
    return _rebuild(map_fields(specs.ZONE, payload), "bosses", specs.BOSS)


def build_zones(payload: Any) -> list[Component]:
    return [build_zone(entry) for entry in _list_at(payload, "zones")]


def _required_field(payload: Any, field: str, label: str) -> Any:
    if isinstance(payload, Mapping) and payload.get(field) is not None:
        return payload[field]
    raise ApiError(HTTP_STATUS_NOT_FOUND, f"{label} not found.", payload)


def build_user_account_id(payload: Any) -> Any:
    return _required_field(payload, "id", "User id")


def build_user_battletag(payload: Any) -> Any:
    return _required_field(payload, "battletag", "Battletag")
