"""
Run with: python -m electrophoresis
"""
import sys

from electrophoresis.main import main

if __name__ == "__main__":
    sys.exit(main())
