import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "zoppertrack-dev-secret"

    # ZopperTrack API
    API_BASE_URL = os.environ.get("ZOPPERTRACK_API_URL", "http://localhost:3000")
    API_ACCESS_TOKEN = os.environ.get("ZOPPERTRACK_ACCESS_TOKEN", "")
    API_TIMEOUT = float(os.environ.get("ZOPPERTRACK_API_TIMEOUT", "15"))

    # Window requested from the API when the view shows Today/Yesterday
    TODAY_FETCH_WINDOW = os.environ.get("TODAY_FETCH_WINDOW", "Last 7 Days")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def api_config() -> dict:
    return {
        "base_url": Config.API_BASE_URL,
        "access_token": Config.API_ACCESS_TOKEN,
        "timeout": Config.API_TIMEOUT,
    }
