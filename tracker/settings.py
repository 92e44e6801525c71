import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


API_PORT = 3001
UI_PORT = 3000


def _should_load_dotenv() -> bool:
    app_env = os.getenv("APP_ENV", "dev").strip().lower()
    return app_env in {"dev", "local"}


if _should_load_dotenv():
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    db_path: Path
    api_url: str = f"http://localhost:{API_PORT}/api"


def get_settings() -> Settings:
    raw_db_path = os.getenv("TRACKER_DB_PATH", "").strip()
    if raw_db_path:
        db_path = Path(raw_db_path)
        data_dir = db_path.parent
    else:
        data_dir = Path.cwd() / ".data"
        db_path = data_dir / "tracker.sqlite"

    api_url = os.getenv("TRACKER_API_URL", "").strip().rstrip("/")
    if not api_url:
        api_url = f"http://localhost:{API_PORT}/api"
    return Settings(data_dir=data_dir, db_path=db_path, api_url=api_url)
