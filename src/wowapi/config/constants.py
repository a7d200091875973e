"""Static configuration tables for the API client."""

# Base URI template; ":protocol" and ":region" are substituted at construction
BASE_URI_TEMPLATE = ":protocol//:region.api.battle.net/"

# API prefixes appended to the base URI
WOW_PATH = "wow/"
ACCOUNT_PATH = "account/"

# OAuth host template; "{region}" is substituted per client
OAUTH_HOST_TEMPLATE = "https://{region}.battle.net"
OAUTH_AUTHORIZE_PATH = "/oauth/authorize"
OAUTH_TOKEN_PATH = "/oauth/token"  # noqa: S105

# Defaults applied when the caller does not supply an option
DEFAULT_PROTOCOL = "https"
DEFAULT_REGION = "us"
DEFAULT_LOCALE = "en_US"
DEFAULT_TIMEOUT_SECONDS = 10

ALLOWED_PROTOCOLS = ("http", "https")

# Region code -> locales the origin serves for that region
REGIONS: dict[str, tuple[str, ...]] = {
    "us": ("en_US", "es_MX", "pt_BR"),
    "eu": ("en_GB", "es_ES", "fr_FR", "ru_RU", "de_DE", "pt_PT", "it_IT"),
    "kr": ("ko_KR",),
    "tw": ("zh_TW",),
    "cn": ("zh_CN",),
}

DEFAULT_USER_AGENT = "wowapi-python/1.0"

DEFAULT_HEADERS: dict[str, str] = {
    "Accept-Charset": "UTF-8",
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": DEFAULT_USER_AGENT,
}

# Log component names
COMPONENT_CACHE = "cache"
COMPONENT_FETCH = "fetch"
COMPONENT_OAUTH = "oauth"
COMPONENT_SERVICE = "service"
