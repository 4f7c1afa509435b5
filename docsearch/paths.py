# docsearch/paths.py

import os

# --- Persisted index (JSON, doc id -> {term: count}) ---
INDEX_PATH = "index.json"

# --- HTTP serving layer ---
DEFAULT_ADDRESS = "127.0.0.1:6969"

# --- Static frontend shipped with the package ---
FRONTEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "frontend")

# --- Number of results shown by the CLI / web page ---
DEFAULT_TOPK = 10
