from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- App ---
    APP_TITLE: str = "Conflict Calendar"
    APP_VERSION: str = "1.0.0"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    # --- Schedule ---
    # pairwise scan is O(n^2), one student's course load is tens of courses
    MAX_COURSES: int = 200

    # visible day window of the weekly calendar
    CALENDAR_DAY_START_HOUR: int = 7
    CALENDAR_DAY_END_HOUR: int = 22

    EXPORT_SHEET_NAME: str = "Calendar"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True
    )

settings = Settings()
