import re

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DEPFILTER_")

    # Default for package target filters: also match nested packages
    # Default: False (exact package names only)
    match_subpackages: bool = False


settings = Settings()


# =============================================================================
# FIXED CONSTANTS (not configurable at runtime)
# =============================================================================

# Module names in the reserved platform namespaces
SYSTEM_MODULE_PATTERN = re.compile(r"java\..*|jdk\..*|javafx\..*")

# Pseudo-entry present in modular archives; never a class of interest
MODULE_DESCRIPTOR_ENTRY = "module-info.class"
