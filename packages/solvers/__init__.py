from __future__ import annotations
from typing import Dict, List
from .base import BaseSolver, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import minimax  # noqa: F401


def create_solver(solver_id: str, *, seed: int | None = None) -> BaseSolver:
    """
    Instantiate a registered solver by id, optionally seeding its rng.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {get_solver_ids()}") from e
    solver = cls()
    if seed is not None:
        solver.rng.seed(seed)
    return solver


def get_solver_ids() -> List[str]:
    return sorted(REGISTRY.keys())


def describe_solvers() -> Dict[str, str]:
    """id -> 'Name vX.Y.Z', for CLI help and run manifests."""
    return {sid: f"{REGISTRY[sid].name} v{REGISTRY[sid].version}" for sid in get_solver_ids()}
