"""
Run with: python -m volcanoviz
"""
import sys

from volcanoviz.main import main

if __name__ == "__main__":
    sys.exit(main())
