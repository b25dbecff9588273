from pydantic_settings import BaseSettings
import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseSettings):
    processing_delay: float = float(os.getenv("PROCESSING_DELAY", 1.0))
    auto_clear_buffer: bool = _flag("AUTO_CLEAR_BUFFER", "true")
    default_mode: str = os.getenv("DEFAULT_MODE", "Normal")
    default_input_mode: str = os.getenv("DEFAULT_INPUT_MODE", "manual")
    api_key: str | None = os.getenv("API_KEY")
    api_base: str = os.getenv("API_BASE", "http://127.0.0.1:8000")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    export_filename: str = os.getenv("EXPORT_FILENAME", "dragon-tiger-predictor-data.json")

settings = Settings()
