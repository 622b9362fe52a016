"""Application settings read from the environment (and a .env file, if present)."""
import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TAKEN_USERNAMES = "admin,root"


def _split_list(raw: str) -> frozenset[str]:
    return frozenset(item.strip().lower() for item in raw.split(",") if item.strip())


@dataclass
class AppConfig:
    log_level: str = "INFO"
    taken_usernames: frozenset[str] = field(default_factory=frozenset)
    taken_emails: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "AppConfig":
        if load_env_file:
            load_dotenv()
        level = os.getenv("FORM_RULES_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Unknown log level %s, using INFO", level)
            level = "INFO"
        return cls(
            log_level=level,
            taken_usernames=_split_list(os.getenv("SIGNUP_TAKEN_USERNAMES", DEFAULT_TAKEN_USERNAMES)),
            taken_emails=_split_list(os.getenv("SIGNUP_TAKEN_EMAILS", "")),
        )
