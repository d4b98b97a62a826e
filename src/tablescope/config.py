"""Settings loaded from environment variables (and a .env file if present)"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass
class Settings:
    log_level: str = 'WARNING'
    default_view: str = 'GRAPH'
    delimiter: Optional[str] = None   # None -> decided by file extension


def load_settings() -> Settings:
    """Build Settings from TABLESCOPE_* environment variables."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=os.getenv('TABLESCOPE_LOG_LEVEL', 'WARNING').upper(),
        default_view=os.getenv('TABLESCOPE_DEFAULT_VIEW', 'GRAPH').upper(),
        delimiter=_decode_delimiter(os.getenv('TABLESCOPE_DELIMITER', '')),
    )


def _decode_delimiter(value: str) -> Optional[str]:
    """Allow '\\t' or 'tab' in .env files for a tab delimiter."""
    if not value:
        return None
    if value in ('\\t', 'tab', 'TAB'):
        return '\t'
    return value
