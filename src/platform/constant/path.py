import os
from pathlib import Path


# Repository root
BASE_DIR = Path(__file__).resolve().parents[3]

# File sink directory, redirected by the test suite through TEST_LOG_DIR
LOG_DIR = Path(os.environ.get('TEST_LOG_DIR') or BASE_DIR / 'logs')
