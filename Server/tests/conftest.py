import os
import sys
import tempfile

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

# Keep test logs out of the working directory
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordgame-test-logs'))
