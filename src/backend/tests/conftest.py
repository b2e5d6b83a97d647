import os
import sys


# Put `src/backend` on sys.path so `import common...`, `import api...` and `import stores...` resolve
# no matter where pytest is launched from.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)
