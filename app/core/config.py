import os

# Database Configuration
# In-memory SQLite by default; set DATABASE_URL to a postgres:// URL for a persistent store
DB_URL = os.getenv("DATABASE_URL", "sqlite://:memory:")

# Application Metadata
PROJECT_NAME = "Tech Park Eats Order Service"
VERSION = "1.0.0"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Load the demo tech parks, restaurants, menus and accounts at startup
SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "1").lower() in ("1", "true", "yes")

# Checkout simulation
PAYMENT_FAILURE_RATE = float(os.getenv("PAYMENT_FAILURE_RATE", 0.01)) # Share of payments that fail
ORDER_NUMBER_ATTEMPTS = int(os.getenv("ORDER_NUMBER_ATTEMPTS", 5)) # Regenerations on an order number collision

# Tracking view simulation
TRACKING_TICK_SECONDS = int(os.getenv("TRACKING_TICK_SECONDS", 30)) # Displayed status advances once per tick
