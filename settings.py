from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_COOKIE = "__Secure-BUCKET=CH0; SID=PASTE_YOUR_COOKIE; HSID=PASTE; SSID=PASTE; APISID=PASTE; SAPISID=PASTE; NID=PASTE"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Maps Transit Scraper"
    debug: bool = False
    log_level: str = "INFO"

    # Session cookie copied from a logged-in browser. Paste the real values (MAPS_COOKIE=...) before fetching.
    maps_cookie: str = PLACEHOLDER_COOKIE
    maps_accept_language: str = "en-GB,en-US;q=0.9,en;q=0.8"
    place_preview_url: str = (
        "https://www.google.com/maps/preview/place?gl=in&q=B.T.M+Layout+Water+Tank"
        "&pb=!1m10!1s0x0%3A0xccc4fb6e2937b03!3m8!1m3!1d3873.6847592714207!2d77.60605743528066"
        "!3d12.915710952084408!3m2!1i342!2i765!4f13.1"
    )
    transit_lines_url: str = (
        "https://www.google.com/maps/rpc/transit/lines?gl=in"
        "&pb=!1m5!7e140!9s4HVsadHhFYXYseMPp6WpQQ%3A933925486775!17s4HVsadHhFYXYseMPp6WpQQ%3A933925486776"
        "!24m1!2e1!2m4!1s0x3bae6b6cce624449%3A0x6a0e2b4dbae58776!2s0x3bae6c6c917e3951%3A0xda5bf6ad89b2b656"
        "!4j1768724046!5sbABDwibLLBiDtFCnipbvtLN2-TQ%3D%3D!3m3!2m2!3e1!3e0"
    )
    place_preview_output: str = "response.json"
    transit_lines_output: str = "transit_lines.json"
    fetch_timeout_seconds: float = 30.0

    # Timezone literal embedded in every time array of the response, e.g. [1768735525, "Asia/Calcutta", "16:55", ...]
    transit_timezone: str = "Asia/Calcutta"
    # Empirical stop-sequence thresholds; revisit if the upstream response shape changes.
    sequence_min_length: int = 5
    sequence_min_timed: int = 5
    sequence_min_density: float = 0.6


def get_settings() -> Settings:
    return Settings()
