# io/plan_logging.py
import json
import logging
import sys

from courier.planning.hooks import NoopHooks


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def default_json_logger(name="courier", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class PlanLogging(NoopHooks):
    """
    Shapes planner hook calls into one structured log record each.
    Per-leg records are DEBUG and only emitted with debug=True.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or default_json_logger(level="DEBUG" if debug else level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def plan_start(self, *, depot, stops):
        self._emit("INFO", "plan_start", depot=depot, stops=stops)

    def tour_optimized(self, *, crow_before_mi, crow_after_mi, order):
        self._emit(
            "INFO",
            "tour_optimized",
            crow_before_mi=round(crow_before_mi, 4),
            crow_after_mi=round(crow_after_mi, 4),
            order=order,
        )

    def leg_routed(self, *, leg, start, end, segments, distance_mi):
        if self.debug:
            self._emit(
                "DEBUG",
                "leg_routed",
                leg=leg,
                start=start,
                end=end,
                segments=segments,
                distance_mi=round(distance_mi, 4),
            )

    def plan_end(self, *, commands, distance_mi, wall_ms):
        self._emit(
            "INFO", "plan_end", commands=commands, distance_mi=round(distance_mi, 4), wall_ms=wall_ms
        )

    def error(self, *, kind, reason, **kw):
        self._emit("ERROR", "plan_error", kind=kind, error=reason, **kw)
