"""Configuration management for the Tag Cloud Generator."""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:3001"
).split(",")

# Tokenizer Configuration
DEFAULT_SEPARATORS = " \t\n\r,\"*-.!?[];'`~:/()&=|{}@#$%^_+<>\\"
SEPARATORS = os.getenv("SEPARATORS", DEFAULT_SEPARATORS)

# Cloud Configuration
MIN_FONT = int(os.getenv("MIN_FONT", "11"))
MAX_FONT = int(os.getenv("MAX_FONT", "48"))
DEFAULT_TOP_N = int(os.getenv("DEFAULT_TOP_N", "100"))

# Rendering Configuration
STYLESHEET_URLS = [
    url for url in os.getenv(
        "STYLESHEET_URLS",
        "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
        "projects/tag-cloud-generator/data/tagcloud.css,tagcloud.css"
    ).split(",")
    if url
]

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
