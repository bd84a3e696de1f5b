from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Site
    site_url: str = "https://hotelsofathens.com"
    formspree_id: str = "xnjzokwn"

    # Paths
    data_dir: Path = Path("data")
    templates_dir: Path = Path("templates")
    static_dir: Path = Path("static")
    output_dir: Path = Path("dist")

    # API keys (live discovery only)
    serper_api_key: str = ""
    jina_api_key: str = ""

    # Fetch behavior
    fetch_retries: int = 3
    request_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    # Blank values (FORMSPREE_ID=) fall back to the defaults above
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_ignore_empty": True,
    }
