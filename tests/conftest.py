import sys
from pathlib import Path

# Make the shared helpers importable as a plain module
sys.path.insert(0, str(Path(__file__).resolve().parent))
