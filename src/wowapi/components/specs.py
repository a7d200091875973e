"""Mapping specs for every domain component returned by the API."""

from wowapi.mapping import DefaultPolicy, MappingSpec


ACHIEVEMENT = MappingSpec(
    name="Achievement",
    field_names=(
        "id",
        "title",
        "points",
        "description",
        "reward",
        "rewardItems",
        "icon",
        "criteria",
        "accountWide",
        "factionId",
    ),
)

# Items vary a lot in shape, so absent fields are left out
ITEM = MappingSpec(
    name="Item",
    field_names=(
        "id",
        "disenchantingSkillRank",
        "description",
        "name",
        "icon",
        "stackable",
        "itemBind",
        "bonusStats",
        "itemSpells",
        "buyPrice",
        "itemClass",
        "itemSubClass",
        "containerSlots",
        "weaponInfo",
        "inventoryType",
        "equippable",
        "itemLevel",
        "maxCount",
        "maxDurability",
        "minFactionId",
        "minReputation",
        "quality",
        "sellPrice",
        "requiredSkill",
        "requiredLevel",
        "requiredSkillRank",
        "itemSource",
        "baseArmor",
        "hasSockets",
        "isAuctionable",
        "armor",
        "displayInfoId",
        "nameDescription",
        "nameDescriptionColor",
        "upgradable",
        "heroicTooltip",
        "context",
        "bonusLists",
        "availableContexts",
        "bonusSummary",
    ),
    default_policy=DefaultPolicy.OMIT,
)

ITEM_SET = MappingSpec(
    name="ItemSet",
    field_names=("id", "name", "setBonuses", "items"),
)

AUCTION_FILE = MappingSpec(
    name="AuctionFile",
    field_names=("url", "lastModified"),
)

AUCTION = MappingSpec(
    name="Auction",
    field_names=("files",),
)

BOSS = MappingSpec(
    name="Boss",
    field_names=(
        "id",
        "name",
        "urlSlug",
        "description",
        "zoneId",
        "availableInNormalMode",
        "availableInHeroicMode",
        "health",
        "heroicHealth",
        "level",
        "heroicLevel",
        "journalId",
        "npcs",
    ),
    default_policy=DefaultPolicy.OMIT,
)

CHALLENGE_TIME = MappingSpec(
    name="ChallengeTime",
    field_names=("time", "hours", "minutes", "seconds", "milliseconds", "isPositive"),
)

CHALLENGE_MAP = MappingSpec(
    name="ChallengeMap",
    field_names=(
        "id",
        "name",
        "slug",
        "hasChallengeMode",
        "bronzeCriteria",
        "silverCriteria",
        "goldCriteria",
    ),
)

CHALLENGE = MappingSpec(
    name="Challenge",
    field_names=("realm", "map", "groups"),
)

# Field selectors make character payloads variable, so absent fields are left out
CHARACTER = MappingSpec(
    name="Character",
    field_names=(
        "lastModified",
        "name",
        "realm",
        "battlegroup",
        "characterClass",
        "race",
        "gender",
        "level",
        "achievementPoints",
        "thumbnail",
        "calcClass",
        "faction",
        "totalHonorableKills",
        "spec",
        "guild",
        "guildRealm",
        "items",
        "talents",
        "stats",
        "titles",
        "mounts",
        "pets",
        "progression",
        "achievements",
        "feed",
        "professions",
        "reputation",
        "hunterPets",
        "pvp",
        "quests",
        "appearance",
        "statistics",
    ),
    renames={"characterClass": "class"},
    default_policy=DefaultPolicy.OMIT,
)

CHARACTER_CLASS = MappingSpec(
    name="CharacterClass",
    field_names=("id", "mask", "powerType", "name"),
)

CHARACTER_RACE = MappingSpec(
    name="CharacterRace",
    field_names=("id", "mask", "side", "name"),
)

TALENT_SPEC = MappingSpec(
    name="Spec",
    field_names=("name", "role", "backgroundImage", "icon", "description", "order"),
)

GUILD = MappingSpec(
    name="Guild",
    field_names=(
        "lastModified",
        "name",
        "realm",
        "battlegroup",
        "level",
        "side",
        "achievementPoints",
        "emblem",
        "members",
        "achievements",
        "news",
        "challenge",
    ),
)

MOUNT = MappingSpec(
    name="Mount",
    field_names=(
        "name",
        "spellId",
        "creatureId",
        "itemId",
        "qualityId",
        "icon",
        "isGround",
        "isFlying",
        "isAquatic",
        "isJumping",
    ),
)

PET = MappingSpec(
    name="Pet",
    field_names=(
        "canBattle",
        "creatureId",
        "name",
        "family",
        "icon",
        "qualityId",
        "stats",
        "strongAgainst",
        "typeId",
        "weakAgainst",
    ),
)

PET_ABILITY = MappingSpec(
    name="PetAbility",
    field_names=(
        "id",
        "name",
        "icon",
        "cooldown",
        "rounds",
        "petTypeId",
        "isPassive",
        "hideHints",
    ),
)

PET_SPECIES = MappingSpec(
    name="PetSpecies",
    field_names=(
        "speciesId",
        "petTypeId",
        "creatureId",
        "name",
        "canBattle",
        "icon",
        "description",
        "source",
        "abilities",
    ),
)

PET_STATS = MappingSpec(
    name="PetStats",
    field_names=(
        "speciesId",
        "breedId",
        "petQualityId",
        "level",
        "health",
        "power",
        "speed",
    ),
)

QUEST = MappingSpec(
    name="Quest",
    field_names=("id", "title", "reqLevel", "suggestedPartyMembers", "category", "level"),
)

REALM = MappingSpec(
    name="Realm",
    field_names=(
        "type",
        "population",
        "queue",
        "status",
        "name",
        "slug",
        "battlegroup",
        "locale",
        "timezone",
        "connectedRealms",
    ),
    renames={"connectedRealms": "connected_realms"},
)

RECIPE = MappingSpec(
    name="Recipe",
    field_names=("id", "name", "profession", "icon"),
)

SPELL = MappingSpec(
    name="Spell",
    field_names=(
        "id",
        "name",
        "icon",
        "description",
        "range",
        "powerCost",
        "castTime",
        "cooldown",
    ),
    default_policy=DefaultPolicy.OMIT,
)

ZONE = MappingSpec(
    name="Zone",
    field_names=(
        "id",
        "name",
        "urlSlug",
        "description",
        "location",
        "expansionId",
        "patch",
        "numPlayers",
        "isDungeon",
        "isRaid",
        "advisedMinLevel",
        "advisedMaxLevel",
        "advisedHeroicMinLevel",
        "advisedHeroicMaxLevel",
        "availableModes",
        "lfgNormalMinGearLevel",
        "lfgHeroicMinGearLevel",
        "floors",
        "bosses",
    ),
)
