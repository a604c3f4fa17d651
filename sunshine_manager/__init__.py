"""
Sunshine Manager

A FastAPI server for editing Sunshine's app list and launching streaming companions.
"""

from .main import main

__version__ = "0.1.0"


if __name__ == "__main__":
    main()
