"""
Development runner: starts safecalc straight from a source checkout.

All arguments are forwarded to ``safecalc.main``:

    $ python run.py                 # open the calculator window
    $ python run.py --eval "7/2"    # print 3.5 and exit
    $ python run.py --debug --log-file calc.log
"""
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

if sys.platform == "win32":
    # Own taskbar entry instead of grouping under python.exe
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID("safecalc.desktop")

from safecalc.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
