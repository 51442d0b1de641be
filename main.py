"""
main.py — DSA Step Visualizer Flask App
========================================
JSON control surface over one in-memory Workspace (one visualizer per
family).  Rendering is left to the client; every response carries the
published StepEvents and a data snapshot to draw from.

Routes:
  GET  /api/algorithms[?family=]    – registry cards
  GET  /api/<family>/state          – data snapshot + run summary
  POST /api/<family>/run            – start a run {algorithm, speed?, params?}
  POST /api/<family>/step           – advance to the next step boundary
  POST /api/<family>/finish         – run to completion without delays
  POST /api/<family>/cancel         – cancel the active run
  POST /api/<family>/reset          – back to idle
  POST /api/<family>/op             – structure operation {op, ...}
  POST /api/<family>/speed          – {speed: 1–100 | "slow" | "medium" | …}
  POST /api/<family>/compare        – headless side-by-side {left, right, params?}

Errors:
  400 invalid input · 404 unknown family / algorithm / operation ·
  409 run already in progress (start or mutation rejected)

State management:
  A single Workspace lives in app.extensions; there is no persistence and
  no per-user state.  Generators cannot be serialised, so nothing goes
  into the Flask session.
"""

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request

from algorithms import get_algorithm, list_algorithms
from config import DefaultConfig
from engine import (
    InvalidInput, RunRejected, UnknownOperation, Workspace,
    compare_algorithms, resolve_speed,
)


logger = logging.getLogger(__name__)

EXTENSION_KEY = "dsaviz"


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[Any] = None) -> Flask:
    """
    `overrides` is a mapping or a config class (e.g. config.TestingConfig);
    DSAVIZ_* environment variables are applied last.
    """
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    if isinstance(overrides, Mapping):
        app.config.from_mapping(overrides)
    elif overrides is not None:
        app.config.from_object(overrides)
    app.config.from_prefixed_env("DSAVIZ")

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.extensions[EXTENSION_KEY] = Workspace.from_config(app.config)
    _register_errors(app)
    _register_routes(app)
    logger.info("workspace ready: %s", ", ".join(workspace(app).families()))
    return app


def workspace(app: Flask) -> Workspace:
    return app.extensions[EXTENSION_KEY]


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
def _register_errors(app: Flask) -> None:
    @app.errorhandler(InvalidInput)
    def invalid_input(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(UnknownOperation)
    def unknown(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(RunRejected)
    def rejected(e):
        logger.warning("rejected: %s", e)
        return jsonify({"error": str(e)}), 409


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    def payload() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def view(family: str, **extra) -> dict:
        viz = workspace(app).get(family)
        body = {"family": family, "data": viz.snapshot(), "run": viz.stepper.summary().to_dict()}
        body.update(extra)
        return body

    @app.route("/")
    def index():
        return jsonify({"name": "dsaviz", "families": workspace(app).families()})

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        family = request.args.get("family")
        if family and family not in workspace(app).families():
            raise UnknownOperation(f"Unknown family: {family}")
        return jsonify({"algorithms": [a.card() for a in list_algorithms(family)]})

    # ------------------------------------------------------------------
    # Per-family state & runs
    # ------------------------------------------------------------------
    @app.route("/api/<family>/state")
    def api_state(family):
        return jsonify(workspace(app).get(family).state())

    @app.route("/api/<family>/run", methods=["POST"])
    def api_run(family):
        viz  = workspace(app).get(family)
        data = payload()
        key  = str(data.get("algorithm") or "")
        speed = _speed(data.get("speed")) if "speed" in data else None
        params = data.get("params") if isinstance(data.get("params"), dict) else {}

        viz.run(key, params, speed)
        info = get_algorithm(key)
        return jsonify(view(family, algorithm=info.card()))

    @app.route("/api/<family>/step", methods=["POST"])
    def api_step(family):
        events = workspace(app).get(family).step()
        return jsonify(view(family, events=[e.to_dict() for e in events]))

    @app.route("/api/<family>/finish", methods=["POST"])
    def api_finish(family):
        viz = workspace(app).get(family)
        seen = len(viz.stepper.events)
        viz.finish()
        events = viz.stepper.events[seen:]
        return jsonify(view(family, events=[e.to_dict() for e in events]))

    @app.route("/api/<family>/cancel", methods=["POST"])
    def api_cancel(family):
        workspace(app).get(family).cancel()
        return jsonify(view(family))

    @app.route("/api/<family>/reset", methods=["POST"])
    def api_reset(family):
        workspace(app).get(family).reset()
        return jsonify(view(family))

    # ------------------------------------------------------------------
    # Structure operations
    # ------------------------------------------------------------------
    @app.route("/api/<family>/op", methods=["POST"])
    def api_op(family):
        viz  = workspace(app).get(family)
        data = payload()
        op   = str(data.pop("op", "") or "")
        result = viz.apply(op, data)
        return jsonify(view(family, result=result.to_dict()))

    # ------------------------------------------------------------------
    # Config changes
    # ------------------------------------------------------------------
    @app.route("/api/<family>/speed", methods=["POST"])
    def api_speed(family):
        viz = workspace(app).get(family)
        speed = viz.set_speed(_speed(payload().get("speed")))
        return jsonify({"speed": speed, "delay_ms": viz.stepper.delay_ms})

    # ------------------------------------------------------------------
    # Comparison mode
    # ------------------------------------------------------------------
    @app.route("/api/<family>/compare", methods=["POST"])
    def api_compare(family):
        viz  = workspace(app).get(family)
        data = payload()
        left, right = str(data.get("left") or ""), str(data.get("right") or "")
        for key in (left, right):
            info = get_algorithm(key)
            if info is None or info.family != family:
                raise UnknownOperation(f"Unknown {family} algorithm: {key}")
        params = data.get("params") if isinstance(data.get("params"), dict) else {}
        result = compare_algorithms(left, right, viz.data, params)
        return jsonify(result.to_dict())


def _speed(raw) -> int:
    try:
        return resolve_speed(raw)
    except ValueError:
        raise InvalidInput(f"'{raw}' is not a valid speed") from None


if __name__ == "__main__":
    create_app().run(debug=True, port=5000)
