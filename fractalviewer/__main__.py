"""
Allow running the package directly: python -m fractalviewer
"""
import sys

from .cli import main

sys.exit(main())
