import os
import tempfile

# Point the service at a throwaway SQLite file before anything imports its settings
_DB_DIR = tempfile.mkdtemp(prefix="patient-service-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'patients.db')}"
os.environ.setdefault("LOG_LEVEL", "warning")
