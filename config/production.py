import os

from .config import Config, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

BASE_DAYS_PER_YEAR = Config.BASE_DAYS_PER_YEAR
ADMIN_EMAILS = Config.ADMIN_EMAILS

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
