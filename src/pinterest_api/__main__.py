"""Allows `python -m pinterest_api ...`."""

from __future__ import annotations

from pinterest_api.cli.main import run

if __name__ == "__main__":
    run()
