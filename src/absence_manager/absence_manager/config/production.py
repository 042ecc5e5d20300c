import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_USERS = bool(int(os.getenv("SEED_DEMO_USERS", "0")))

SESSION_COOKIE_SECURE = True
