import os
import tempfile

# Must run before db.py is imported anywhere: point the app at a throwaway SQLite file.
_DB_DIR = tempfile.mkdtemp(prefix="vector-tutor-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ["TUTOR_DEBUG_ZERO_BYPASS"] = "0"

from db import init_db  # noqa: E402

init_db()
