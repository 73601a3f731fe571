"""
main.py — Pathfinding Core HTTP Host
=====================================
Thin Flask JSON layer over the grid / algorithms / maze / competition
packages.  Rendering, input handling and sound stay with the client; the
server only builds boards, runs searches and reports results.

Routes:
  GET  /api/algorithms   – algorithm + maze registries
  POST /api/maze         – build a board with a generated maze
  POST /api/run          – run one algorithm on a board
  POST /api/compare      – race two algorithms on copies of one board

Board bodies (every key optional):
  {
    "config":  {"rows": 20, "cols": 30, "startRow": 10, …},
    "walls":   [[r, c], …],
    "maze":    "kruskal",
    "seed":    7,
    "density": 0.3,          # random maze only
    "timeout": 5.0           # seconds, run / compare only
  }

Every request is handled in isolation: each one builds its own Grid(s)
and drives the coroutines with asyncio.run, so no state is shared between
requests.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from flask import Flask, request, jsonify

from grid import Grid, ValidationError, create_grid
from engine import CancelToken, RunCancelled
from algorithms import list_algorithms, run
from maze import list_maze_generators, generate
from competition import Contender, race, copy_maze

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(ValidationError)
def handle_validation_error(exc: ValidationError):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(RunCancelled)
def handle_run_cancelled(exc: RunCancelled):
    logger.info("request aborted: %s", exc.reason)
    return jsonify({"error": str(exc), "reason": exc.reason}), 408


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def read_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def read_token(body: Dict[str, Any]) -> Optional[CancelToken]:
    timeout = body.get("timeout")
    if timeout is None:
        return None
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValidationError(f"timeout must be a positive number of seconds, got {timeout!r}")
    return CancelToken(timeout=timeout)


async def build_board(body: Dict[str, Any]) -> Grid:
    """Grid from config, then explicit walls, then an optional maze on top."""
    grid = create_grid(body.get("config"))
    walls = body.get("walls")
    if walls is not None:
        if not isinstance(walls, list):
            raise ValidationError("walls must be a list of [row, col] pairs")
        grid.set_walls(walls)

    maze_key = body.get("maze")
    if maze_key:
        options = {}
        if "density" in body:
            options["density"] = body["density"]
        await generate(maze_key, grid, seed=body.get("seed"), **options)
    return grid


def require_str(body: Dict[str, Any], key: str) -> str:
    value = body.get(key)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"'{key}' is required")
    return value


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        "algorithms": [a.to_dict() for a in list_algorithms()],
        "mazes":      [m.to_dict() for m in list_maze_generators()],
    })


@app.route("/api/maze", methods=["POST"])
def api_maze():
    body = read_body()
    require_str(body, "maze")
    grid = asyncio.run(build_board(body))
    return jsonify(grid.to_dict())


@app.route("/api/run", methods=["POST"])
def api_run():
    body      = read_body()
    algorithm = require_str(body, "algorithm")
    token     = read_token(body)

    async def _run():
        grid = await build_board(body)
        return grid, await run(algorithm, grid, token=token)

    grid, result = asyncio.run(_run())
    payload = result.to_dict()
    payload["grid"] = grid.to_dict()
    return jsonify(payload)


@app.route("/api/compare", methods=["POST"])
def api_compare():
    body  = read_body()
    left  = require_str(body, "left")
    right = require_str(body, "right")
    token = read_token(body)

    async def _compare():
        left_grid  = await build_board(body)
        right_grid = copy_maze(left_grid, create_grid(left_grid.config))
        result = await race(Contender(left_grid, left), Contender(right_grid, right), token=token)
        return left_grid, result

    grid, result = asyncio.run(_compare())
    payload = result.to_dict()
    payload["grid"] = grid.to_dict()
    return jsonify(payload)


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Pathfinding Core API")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000/api/algorithms")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
