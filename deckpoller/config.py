from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKPOLLER_")

    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./deckpoller.db"

    # Wizards of the Coast Magic Online result endpoints
    listing_url: str = (
        "https://www.wizards.com/handlers/XMLListService.ashx"
        "?dir=mtgo&type=XMLFileInfo&start={lookback}"
    )
    event_page_url: str = (
        "https://www.wizards.com/Magic/Digital/MagicOnlineTourn.aspx"
        "?x=mtg/digital/magiconline/tourn/{event_id}"
    )
    deck_list_url: str = (
        "https://www.wizards.com/magic/.dek"
        "?x=mtg/digital/magiconline/tourn/{event_id}&decknum={deck_number}"
    )

    # Days of listing history requested per run
    lookback_days: int = 1

    http_timeout: float = 30.0
    user_agent: str = "deckpoller/1.0"

    # When set, each persisted event is also written as <export_dir>/<format>/<event_id>.json
    export_dir: Path | None = None


settings = Settings()
