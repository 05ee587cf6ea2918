"""Module entry point for `python -m recce_cloud_action`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
