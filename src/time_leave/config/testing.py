import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

DEFAULT_GRACE_MINUTES = 0
DEFAULT_LEAVE_BALANCE = 12
BREAK_INCREMENT_MINUTES = 15

PUBLIC_HOLIDAYS = os.getenv("PUBLIC_HOLIDAYS", "")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
