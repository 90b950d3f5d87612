# runtime/registries.py
from collections.abc import Callable

from courier.app.protocols import Router, StreetQuery, TourOptimizer
from courier.config.models import (
    AnnealingOptimizerModel,
    AStarRouterModel,
    IdentityOptimizerModel,
    OptimizerUnion,
    RouterUnion,
)
from courier.domain.mechanics.mechanics_optimizers import (
    AnnealingTourOptimizer,
    IdentityTourOptimizer,
    StagnationLimits,
)
from courier.domain.mechanics.mechanics_routers import AStarRouter

OptimizerFactory = Callable[[OptimizerUnion], TourOptimizer]
RouterFactory = Callable[[RouterUnion, dict], Router]

_optimizer_registry: dict[str, OptimizerFactory] = {}
_router_registry: dict[str, RouterFactory] = {}


# ------------------- Tour optimizers ---------------------------


def register_optimizer(kind: str):
    def deco(fn: OptimizerFactory):
        _optimizer_registry[kind] = fn
        return fn

    return deco


def make_optimizer(cfg: OptimizerUnion) -> TourOptimizer:
    try:
        factory = _optimizer_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown optimizer kind {cfg.kind!r}") from None
    return factory(cfg)


@register_optimizer("annealing")
def _make_annealing(cfg: AnnealingOptimizerModel):
    s = cfg.stagnation
    return AnnealingTourOptimizer(
        initial_temperature=cfg.initial_temperature,
        cooling_factor=cfg.cooling_factor,
        restarts=cfg.restarts,
        limits=StagnationLimits(
            small_max=s.small_max,
            small=s.small,
            medium_max=s.medium_max,
            medium=s.medium,
            large=s.large,
        ),
    )


@register_optimizer("identity")
def _make_identity(cfg: IdentityOptimizerModel):
    return IdentityTourOptimizer()


# ------------------- Routers ---------------------------


def register_router(kind: str):
    def deco(fn: RouterFactory):
        _router_registry[kind] = fn
        return fn

    return deco


def make_router(cfg: RouterUnion, *, graph: StreetQuery) -> Router:
    try:
        factory = _router_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown router kind {cfg.kind!r}") from None
    return factory(cfg, {"graph": graph})


@register_router("astar")
def _make_astar(cfg: AStarRouterModel, deps):
    return AStarRouter(deps["graph"])
