"""Client configuration."""
import os

API_BASE_URL = os.getenv("AIRLINE_API_URL", "http://localhost:3000")

PAGE_TITLE = "Airline Operations"
PAGE_ICON = "✈️"
