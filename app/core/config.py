import os

# Environment variables or default values
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

API_TITLE = "Retail Intelligence API"
API_DESCRIPTION = "Canned retail sales and inventory insights"
API_VERSION = "1.0.0"

# Part of the health response contract, not overridable
HEALTH_MESSAGE = "Retail Intelligence API is running 🚀"
REGION = "ap-south-1"
