SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

ID_STRATEGY = "sequential"

AUTO_SEED_DEMO = False
