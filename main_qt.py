# main_qt.py
import sys
from paint_qt.window import main

if __name__ == "__main__":
    sys.exit(main())
