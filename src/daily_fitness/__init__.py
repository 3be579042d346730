"""Daily Fitness Tracker - personal fitness tracking REST backend."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("daily-fitness-tracker")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
