import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

DEFAULT_GRACE_MINUTES = int(os.getenv("DEFAULT_GRACE_MINUTES", "0"))
DEFAULT_LEAVE_BALANCE = int(os.getenv("DEFAULT_LEAVE_BALANCE", "12"))
BREAK_INCREMENT_MINUTES = int(os.getenv("BREAK_INCREMENT_MINUTES", "15"))

PUBLIC_HOLIDAYS = os.getenv("PUBLIC_HOLIDAYS", "")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
