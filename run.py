"""
Entry Point Script (Bootstrap)
==============================
Starting point of the application during development.

Why is this file needed?
------------------------
It lives outside the 'src' package and puts 'src' on sys.path, so
'from gridbench...' resolves without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from gridbench.app.main import main

if __name__ == "__main__":
    sys.exit(main())
