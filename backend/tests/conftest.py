# Put backend/ first on sys.path so `import priority`, `import lifecycle` etc. resolve
# whether pytest runs from the repo root or from backend/.
import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent
_str_backend = str(_backend)
if sys.path[0:1] != [_str_backend]:
    sys.path.insert(0, _str_backend)
