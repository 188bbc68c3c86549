# src/toxtesting/telemetry/logger/processors.py

"""
Custom structlog processors for the tox testing server.
"""

import logging

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
    "run": "🧪",
    "config": "📄",
    "fail": "🚫",
    "time": "⏱️",
    "success": "🎉",
}

# Keys that only steer processors and must not reach the renderer.
_PROCESSOR_ONLY_KEYS = ("emoji_key",)


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji chosen by 'emoji_key' or the log level."""
    emoji_key = event_dict.get("emoji_key")
    if emoji_key in LOG_EMOJIS:
        emoji = LOG_EMOJIS[emoji_key]
    else:
        level_name = str(event_dict.get("level", method_name)).upper()
        emoji = LOG_EMOJIS.get(logging.getLevelName(level_name), "")

    event = event_dict.get("event")
    if emoji and isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key in _PROCESSOR_ONLY_KEYS:
        event_dict.pop(key, None)
    return event_dict


# 🔼⚙️
