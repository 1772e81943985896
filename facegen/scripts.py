from __future__ import annotations

import subprocess
import sys
from typing import List

from .config import settings


def _uvicorn_cmd(*extra: str) -> List[str]:
    return [
        sys.executable,
        "-m",
        "uvicorn",
        "facegen.main:app",
        "--host",
        settings.HOST,
        "--port",
        str(settings.PORT),
        "--log-level",
        settings.LOG_LEVEL.lower(),
        *extra,
    ]


def serve() -> None:
    raise SystemExit(subprocess.call(_uvicorn_cmd()))


def dev() -> None:
    raise SystemExit(subprocess.call(_uvicorn_cmd("--reload")))
