import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Database configuration
# SQLite file next to the app by default; any SQLAlchemy URL works
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./database.db")

# Application configuration
APP_ENV = os.getenv("APP_ENV", "development")
DEBUG = APP_ENV == "development"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

# API configuration
API_PREFIX = "/api"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:8000,https://vittoriojocson.github.io",
    ).split(",")
    if origin.strip()
]

# Listing defaults
CONTACT_LIST_LIMIT = int(os.getenv("CONTACT_LIST_LIMIT", "50"))
EMAIL_LOG_LIMIT = int(os.getenv("EMAIL_LOG_LIMIT", "100"))

# Mail relay configuration
MAIL_SERVER = os.getenv("MAIL_SERVER")
MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
MAIL_USERNAME = os.getenv("MAIL_USERNAME")
MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
MAIL_SENDER = os.getenv("MAIL_SENDER", "JiggerOnTheMix <noreply@jiggeronthemix.com>")
MAIL_USE_TLS = os.getenv("MAIL_USE_TLS", "true").lower() == "true"
MAIL_TIMEOUT = float(os.getenv("MAIL_TIMEOUT", "30"))

SITE_URL = os.getenv("SITE_URL", "https://vittoriojocson.github.io/WEB-SYS-project/")
