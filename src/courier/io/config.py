# src/courier/io/config.py
import os
from pathlib import Path

from courier.config.models import PlannerModel


def load_config(path: str | os.PathLike | None = None, **overrides) -> PlannerModel:
    """Read a JSON planner config (defaults when `path` is None); keyword overrides win."""
    data = Path(path).read_text(encoding="utf-8") if path else "{}"
    model = PlannerModel.model_validate_json(data)
    if overrides:
        model = PlannerModel.model_validate({**model.model_dump(), **overrides})
    return model
