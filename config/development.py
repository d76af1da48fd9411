import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "sequential" (1, 2, 3, ...) or "uuid"
ID_STRATEGY = os.getenv("ID_STRATEGY", "sequential")

# Load a handful of demo employees on startup
AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "1")))
