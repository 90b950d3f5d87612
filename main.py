# main.py
import sys

from courier.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
