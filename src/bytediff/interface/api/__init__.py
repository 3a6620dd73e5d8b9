"""HTTP interface (Flask)."""

from bytediff.interface.api.app import create_app

__all__ = ["create_app"]
