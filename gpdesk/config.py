from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    gemini_api_key: str
    gemini_model: str
    gemini_base_url: str
    gemini_timeout_seconds: float
    reference_table_path: str
    primary_id_column: str
    secondary_id_column: str
    secondary_id_alias_column: str
    contact_column: str
    host: str
    port: int


def get_settings() -> Settings:
    return Settings(
        app_name=os.getenv("APP_NAME", "gpdesk"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        gemini_base_url=os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"),
        gemini_timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "30")),
        reference_table_path=os.getenv("REFERENCE_TABLE_PATH", "./data.xlsx"),
        primary_id_column=os.getenv("PRIMARY_ID_COLUMN", "GP ID"),
        secondary_id_column=os.getenv("SECONDARY_ID_COLUMN", "Seeker ID"),
        secondary_id_alias_column=os.getenv("SECONDARY_ID_ALIAS_COLUMN", "Robi ID"),
        contact_column=os.getenv("CONTACT_COLUMN", "1st Level POC (Umbrella ZM)"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
    )
