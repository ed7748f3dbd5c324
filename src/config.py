"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # Database
    MONGO_HOST = os.getenv("MONGO_HOST", "localhost")
    MONGO_PORT = os.getenv("MONGO_PORT", "27017")
    MONGO_USER = os.getenv("MONGO_USER", "")
    MONGO_PASSWORD = os.getenv("MONGO_PASSWORD", "")
    MONGO_DB = os.getenv("MONGO_DB", "plp_bookstore")
    MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "books")

    @property
    def MONGO_URI(self):
        """Build MongoDB connection string (MONGO_URI env var wins)."""
        explicit = os.getenv("MONGO_URI")
        if explicit:
            return explicit
        if self.MONGO_USER:
            return f"mongodb://{self.MONGO_USER}:{self.MONGO_PASSWORD}@{self.MONGO_HOST}:{self.MONGO_PORT}/"
        return f"mongodb://{self.MONGO_HOST}:{self.MONGO_PORT}/"

    # Defaults
    DEFAULT_TIMEOUT_MS = int(os.getenv("DEFAULT_TIMEOUT_MS", "5000"))
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "5"))
