"""FastAPI configuration dependency.

Endpoints `Depends(get_config)` so tests can swap the lot settings with
`app.dependency_overrides` instead of touching the environment.
"""

from functools import lru_cache

from core.config import LotConfig


@lru_cache(maxsize=1)
def get_config() -> LotConfig:
    """Read the lot configuration once per process."""
    return LotConfig.from_env()
