# courier/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from courier.app.protocols import Router, StreetQuery, TourOptimizer
from courier.config.models import PlannerModel
from courier.io.plan_logging import PlanLogging
from courier.planning.hooks import NoopHooks, PlannerHooks
from courier.planning.planner import DeliveryPlanner
from courier.runtime.registries import make_optimizer, make_router
from courier.runtime.rng import PlanSeeds


@dataclass
class App:
    config: PlannerModel
    graph: StreetQuery
    seeds: PlanSeeds
    router: Router
    optimizer: TourOptimizer
    hooks: PlannerHooks
    planner: DeliveryPlanner


def build(cfg: PlannerModel | Mapping, graph: StreetQuery, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, PlannerModel) else PlannerModel.model_validate(cfg)

    # 1) Seeds & hooks
    seeds = PlanSeeds(model.seed, scenario=model.name)
    hooks = (
        PlanLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Mechanics
    router = make_router(model.router, graph=graph)
    optimizer = make_optimizer(model.optimizer)

    # 3) Planner (inject deps explicitly)
    planner = DeliveryPlanner(
        router,
        optimizer,
        seeds,
        colinear_tolerance_deg=model.compiler.colinear_tolerance_deg,
        hooks=hooks,
    )
    return App(model, graph, seeds, router, optimizer, hooks, planner)
