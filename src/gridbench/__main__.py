"""Run with: python -m gridbench"""
import sys

from gridbench.app.main import main

if __name__ == "__main__":
    sys.exit(main())
