"""Lanzador local de la CLI sin `pip install -e .`.

Uso: `python main.py me` desde la raíz del repo. Añade `src/` al path e
invoca la misma app Typer que el script `spotify-tools`.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
