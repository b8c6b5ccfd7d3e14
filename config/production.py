import os

from config.config import Config, api_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = api_config()

TODAY_FETCH_WINDOW = Config.TODAY_FETCH_WINDOW

DEFAULT_DATE_FILTER = {"dateFilter": os.getenv("DEFAULT_DATE_FILTER", "Today")}

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
