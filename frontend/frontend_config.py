import os

# API base used by frontend. Can be overridden by setting API_URL env var.
API_BASE = os.getenv("API_URL", "http://localhost:8000")

GENERATE_SEO_PATH = "/api/generate-seo"

# Seconds to wait for the backend (covers the provider round trip)
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "120"))

MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", 10 * 1024 * 1024))  # 10 MB default

PREVIEW_ROWS = 10
DOWNLOAD_FILE_NAME = "updated.csv"
DOWNLOAD_MIME = "text/csv"

# Column names the flow relies on
EMAIL_COLUMN = "email"
SEO_COLUMN = "seo"

# User-facing messages
MSG_NO_FILE = "Please upload a CSV file first."
MSG_BAD_CSV = "The CSV file is empty or improperly formatted."
MSG_ENRICHMENT_FAILED = "Failed to generate SEO descriptions. Please try again."
