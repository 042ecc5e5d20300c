import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed the admin / teacher / head_d demo accounts into the fresh store
SEED_DEMO_USERS = bool(int(os.getenv("SEED_DEMO_USERS", "1")))
