"""Module entrypoint for `python -m manifesttui`."""

try:
    from .cli import run
except ImportError:
    # Executed as a plain script outside package context.
    from manifesttui.cli import run


if __name__ == "__main__":
    raise SystemExit(run())
