import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

DEFAULT_GRACE_MINUTES = int(os.getenv("DEFAULT_GRACE_MINUTES", "0"))
DEFAULT_LEAVE_BALANCE = int(os.getenv("DEFAULT_LEAVE_BALANCE", "12"))
BREAK_INCREMENT_MINUTES = int(os.getenv("BREAK_INCREMENT_MINUTES", "15"))

# Comma separated YYYY-MM-DD dates excluded from leave day counts
PUBLIC_HOLIDAYS = os.getenv("PUBLIC_HOLIDAYS", "")

# Load the sample roster, projects and requests on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
