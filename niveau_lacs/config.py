# niveau_lacs/config.py
from __future__ import annotations

import os
from pathlib import Path


# -----------------------------
# Source page
# -----------------------------

PAGE_URL = os.getenv(
    "NIVEAU_LACS_PAGE_URL",
    "https://www.groupe-e.ch/fr/univers-groupe-e/niveau-lacs",
)

# Header dates are printed as day.month.year without leading zeros, e.g. 2.1.2024
HEADER_DATE_FORMAT = "%d.%m.%Y"

# Level cells look like "675.20 msm" (mètres sur mer)
MSM_PATTERN = r"(\d+\.\d+).*msm"

# Substituted when a level cell carries no msm reading
MISSING_LEVEL = 0.0


# -----------------------------
# HTTP / scraping
# -----------------------------

UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

HTTP_TIMEOUT = int(os.getenv("NIVEAU_LACS_TIMEOUT", "30"))


# -----------------------------
# Store
# -----------------------------

DATABASE_URL = os.getenv("NIVEAU_LACS_DATABASE_URL", "https://niveau-lacs.firebaseio.com/")

# Records live at <STORE_ROOT>/<lake name>
STORE_ROOT = "current"

# "firebase" | "csv"
DEFAULT_STORE = os.getenv("NIVEAU_LACS_STORE", "firebase")

DEFAULT_CSV_FILE = Path(os.getenv("NIVEAU_LACS_CSV", "lakes.csv"))


# -----------------------------
# CSV schema
# -----------------------------

CSV_COLUMNS = [
    "key",
    "name",
    "max_level",
    "date",
    "today",
    "yesterday",
]


# -----------------------------
# Logging
# -----------------------------

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_FILE = os.getenv("NIVEAU_LACS_LOG_FILE", "").strip()
