from __future__ import annotations

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load test/.env when present so local runs can tweak settings
load_dotenv(TEST_ROOT / ".env", override=False)

# Point the application at throwaway storage before anything imports the settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="swf-uploads-"))
os.environ.setdefault("LOGFIRE_ENABLED", "false")
