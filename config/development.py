import os

from config.config import Config, api_config

SECRET_KEY = Config.SECRET_KEY

API_CONFIG = api_config()

TODAY_FETCH_WINDOW = Config.TODAY_FETCH_WINDOW

# Range shown when a request does not pass dateFilter
DEFAULT_DATE_FILTER = {"dateFilter": os.getenv("DEFAULT_DATE_FILTER", "Today")}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
