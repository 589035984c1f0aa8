import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    SUPABASE_URL: str = os.getenv("SUPABASE_URL")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY")
    CLERK_SECRET_KEY: str = os.getenv("CLERK_SECRET_KEY")

    # Applied to every single backend call; no retries are made
    BACKEND_TIMEOUT_SECONDS: float = float(os.getenv("BACKEND_TIMEOUT_SECONDS", "10"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Wizard defaults for the cost step
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "EUR")
    DEFAULT_MIN_TRIP_MATES: int = 2
    DEFAULT_MAX_TRIP_MATES: int = 4


settings = Settings()
