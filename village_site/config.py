from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from village_site.constants.pagination import FALLBACK_ITEMS_PER_PAGE


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Desa Sukasenang"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Pagination
    DEFAULT_ITEMS_PER_PAGE: int = FALLBACK_ITEMS_PER_PAGE  # When a listing size is <= 0
    NEWS_PER_PAGE: int = 8
    POPULATION_PER_PAGE: int = 8
    GALLERY_PER_PAGE: int = 8
    # Off keeps existing ?id=-1 links computing a negative offset as before
    CLAMP_NEGATIVE_PAGES: bool = False

    # Presentation
    TRUNCATE_LENGTH: int = 250
    DISPLAY_DATE_FORMAT: str = "%d %B %Y"

    @property
    def listing_page_sizes(self) -> Dict[str, int]:
        return {
            "news": self.NEWS_PER_PAGE,
            "population": self.POPULATION_PER_PAGE,
            "gallery": self.GALLERY_PER_PAGE,
        }

    def per_page_for(self, listing: str) -> int:
        try:
            return self.listing_page_sizes[listing]
        except KeyError:
            raise ValueError(f"Unknown listing: '{listing}'") from None

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )


settings = Settings()
