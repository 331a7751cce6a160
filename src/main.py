"""Atajo para `python -m main` con `src/` como directorio de trabajo."""

from cli.main import run

if __name__ == "__main__":
    run()
