from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="DECKSCOPE_", env_file=".env")

    app_name: str = "DeckScope"

    # Number of distinct deck snapshots whose statistics are memoized
    statistics_cache_size: int = 128

    # Seed for the process-wide random source used by the sample hand simulator.
    # None means seeded from the OS.
    random_seed: int | None = None


settings = Settings()


# =============================================================================
# GAME RULES
# =============================================================================

# Cards drawn for every opening hand and every London mulligan
OPENING_HAND_SIZE = 7

# A 7-card hand can be mulliganed at most 6 times
MAX_MULLIGANS = 6

# Cards shown in the "what's on top" preview
NEXT_DRAWS_PREVIEW = 4

# Mana values at or above this land in the overflow bucket of the curve
CURVE_OVERFLOW_BIN = 10

# Format whose commander is kept out of the library
COMMANDER_FORMAT = "commander"
