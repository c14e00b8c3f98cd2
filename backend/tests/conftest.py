import os
import sys
from pathlib import Path


# Keep tests deterministic and local-only.
os.environ["BOOKSHELF_SKIP_DOTENV"] = "1"
os.environ["BOOKSHELF_STORAGE_BACKEND"] = "memory"
os.environ["BOOKSHELF_S3_BUCKET"] = "books-uploaded"
os.environ.pop("BOOKSHELF_S3_REGION", None)
os.environ.pop("BOOKSHELF_PUBLIC_BASE_URL", None)
os.environ["BOOKSHELF_LIST_MAX_KEYS"] = "0"

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
