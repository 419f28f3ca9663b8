"""Flask app factory exposing step/inspect routes over the engine."""

from typing import Any, Dict

from flask import Flask

from app.routes import bp
from app.routes.api import init_state
from core.config import SimulationConfig


def create_app(config: Dict[str, Any] | None = None) -> Flask:
    """Create the Flask application and initialize engine state."""
    init_state(SimulationConfig.from_dict(config))
    flask_app = Flask(__name__)
    flask_app.register_blueprint(bp)
    return flask_app


if __name__ == "__main__":
    app = create_app()
    app.run(host="127.0.0.1", port=5000)
