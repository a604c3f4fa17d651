import os
from pathlib import Path
from typing import Final

# Configuration constants
SUNSHINE_APPS_JSON: Final[str] = os.getenv(
    "SUNSHINE_APPS_JSON", r"C:\Program Files\Sunshine\config\apps.json"
)
SUNSHINE_IMAGE_DIR: Final[str] = os.getenv(
    "SUNSHINE_IMAGE_DIR", r"C:\Program Files\Sunshine\images"
)
SUNSHINE_EXE: Final[str] = os.getenv(
    "SUNSHINE_EXE", r'"C:\Program Files\Sunshine\sunshine.exe"'
)
MOONLIGHT_EXE: Final[str] = os.getenv(
    "MOONLIGHT_EXE", r'"C:\Program Files\Moonlight Game Streaming\Moonlight.exe"'
)
STEAM_LAUNCH_CMD: Final[str] = os.getenv("STEAM_LAUNCH_CMD", "start steam://open/main")
SUNSHINE_STOP_CMD: Final[str] = os.getenv(
    "SUNSHINE_STOP_CMD", "taskkill /IM sunshine.exe /F"
)
SUNSHINE_RESTART_DELAY: Final[float] = float(os.getenv("SUNSHINE_RESTART_DELAY", "8"))
STATIC_DIR: Final[str] = os.getenv(
    "STATIC_DIR", str(Path(__file__).resolve().parent / "public")
)
HOST: Final[str] = os.getenv("HOST", "0.0.0.0")
PORT: Final[int] = int(os.getenv("PORT", "8080"))
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

# Validate configuration
if SUNSHINE_RESTART_DELAY < 0:
    raise ValueError(
        f"SUNSHINE_RESTART_DELAY ({SUNSHINE_RESTART_DELAY}) must not be negative"
    )

if PORT < 1 or PORT > 65535:
    raise ValueError("PORT must be between 1 and 65535")
