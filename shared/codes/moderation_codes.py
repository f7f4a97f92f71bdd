"""
Moderation provider codes and the WebPurify method table.
"""
from __future__ import annotations

from enum import IntEnum


class ModerationCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Client / provider errors (7xxxx)
    CONFIG_ERROR = 70000
    INVALID_ARGUMENT = 70001
    TRANSPORT_ERROR = 70002
    PARSE_ERROR = 70003
    API_ERROR = 70004


# Public operation -> WebPurify REST method name
WEBPURIFY_METHODS = {
    "check": "webpurify.live.check",
    "check_count": "webpurify.live.checkcount",
    "replace": "webpurify.live.replace",
    "return_expletives": "webpurify.live.return",
    "add_to_blacklist": "webpurify.live.addtoblacklist",
    "remove_from_blacklist": "webpurify.live.removefromblacklist",
    "get_blacklist": "webpurify.live.getblacklist",
    "add_to_whitelist": "webpurify.live.addtowhitelist",
    "remove_from_whitelist": "webpurify.live.removefromwhitelist",
    "get_whitelist": "webpurify.live.getwhitelist",
}
