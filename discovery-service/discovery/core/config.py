import os

# ===============================
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# ===============================
# CATALOG CONFIG
# ===============================
# Pre-parsed content catalog: {"posts": [...], "projects": [...]}
CATALOG_PATH = os.getenv("CATALOG_PATH", os.path.join(BASE_DIR, "catalog.json"))

# ===============================
# DISCOVERY CONFIG
# ===============================
DEFAULT_SORT_MODE = os.getenv("DEFAULT_SORT_MODE", "date-desc")
WORDS_PER_MINUTE = int(os.getenv("WORDS_PER_MINUTE", 200))  # Reading-time estimate

# ===============================
# SERVICE CONFIG
# ===============================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]
