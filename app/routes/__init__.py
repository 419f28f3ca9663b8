from __future__ import annotations

from flask import Blueprint

bp = Blueprint("simulation", __name__)

# Route modules register themselves on import
from . import api  # noqa: E402,F401

__all__ = ["bp"]
