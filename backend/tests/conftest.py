import sys
from pathlib import Path

# Tests import settings/services/domain/scripts as top-level modules from backend/
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
