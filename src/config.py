from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Feed
    feed_url: str = "https://alerts.weather.gov/cap/us.php?x=0"
    # NWS rejects requests without an identifying User-Agent
    user_agent: str = "hail-watch/0.1 (alerts@example.com)"
    request_timeout_seconds: float = 15.0

    # Reference tables
    # Zones: https://www.weather.gov/gis/ZoneCounty
    zones_path: str = "data/zones.csv"
    zones_separator: str = "|"
    # Counties: https://www.weather.gov/source/nwr/SameCode.txt
    counties_path: str = "data/counties.csv"
    counties_separator: str = ","

    # Keywords scanned for in alert summaries
    hazard_keywords: list[str] = ["hail"]

    # App
    log_level: str = "INFO"


settings = Settings()
