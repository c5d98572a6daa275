import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_PORT = 1234
DEFAULT_HOST = "0.0.0.0"
DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "movies.json"

ACCEPTED_ORIGINS = (
    "http://localhost:8080",
    "http://localhost:1234",
    "http://movies.com",
    "http://midu.dev",
)

def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default

def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(item.strip().rstrip("/") for item in raw.split(",") if item.strip())

@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    data_path: Path = DEFAULT_DATA_PATH
    allowed_origins: Tuple[str, ...] = ACCEPTED_ORIGINS

def load_settings() -> Settings:
    return Settings(
        port=_env_int("PORT", DEFAULT_PORT),
        host=os.getenv("HOST", DEFAULT_HOST),
        data_path=Path(os.getenv("MOVIES_DATA_PATH", str(DEFAULT_DATA_PATH))),
        allowed_origins=_env_list("ALLOWED_ORIGINS", ACCEPTED_ORIGINS),
    )
