from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # per-leg records


# ----------------- TOUR OPTIMIZERS ---------------------


class StagnationModel(BaseModel):
    """Non-improving moves tolerated per annealing run, by tour size."""

    model_config = ConfigDict(extra="forbid")
    small_max: int = Field(default=10, ge=1)
    small: int = Field(default=50, ge=1)
    medium_max: int = Field(default=100, ge=1)
    medium: int = Field(default=1000, ge=1)
    large: int = Field(default=2000, ge=1)

    @model_validator(mode="after")
    def _check_thresholds(self):
        if self.medium_max <= self.small_max:
            raise ValueError(
                f"medium_max ({self.medium_max}) must exceed small_max ({self.small_max})"
            )
        return self


class AnnealingOptimizerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["annealing"] = "annealing"
    initial_temperature: float = Field(default=0.9, gt=0.0, le=1.0)
    cooling_factor: float = Field(default=0.99, gt=0.0, le=1.0)
    restarts: int = Field(default=100, ge=0)
    stagnation: StagnationModel = Field(default_factory=StagnationModel)


class IdentityOptimizerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["identity"] = "identity"


OptimizerUnion = Annotated[
    AnnealingOptimizerModel | IdentityOptimizerModel,
    Field(discriminator="kind"),
]

# ----------------- ROUTERS ---------------------


class AStarRouterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"


RouterUnion = Annotated[AStarRouterModel, Field(discriminator="kind")]

# ----------------- COMMANDS ---------------------


class CompilerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # street changes bending less than this are announced without a Turn
    colinear_tolerance_deg: float = Field(default=1.0, ge=1.0, lt=90.0)


# ------------------------------------------------------------------


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    seed: int = 0
    log: LogModel = LogModel()
    optimizer: OptimizerUnion = Field(default_factory=AnnealingOptimizerModel)
    router: RouterUnion = Field(default_factory=AStarRouterModel)
    compiler: CompilerModel = CompilerModel()
