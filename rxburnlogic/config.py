from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from . import canon


@dataclass
class EngineConfig:
    # Timezone used when the caller supplies none, or one that cannot be resolved
    default_tz: str = canon.DEFAULT_TZ

    # Local (start, end) hours kept after classification, inclusive. None keeps all.
    burn_hours: Optional[Tuple[int, int]] = None

    # Local display strings
    display_format: str = "%a %m/%d %H%M"
    date_format: str = "%Y-%m-%d"


def default_config() -> EngineConfig:
    return EngineConfig()
