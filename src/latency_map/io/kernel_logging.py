# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from latency_map.engine.hooks import NoopHooks
from latency_map.io.recorder import Recorder


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def default_json_logger(name="latency_map", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    One place to shape and emit structured logs for both kernel dispatch and
    analysis (business) events.
    """

    # business events logged above INFO
    LEVELS = {
        "OptimizeIgnored": "WARNING",
    }

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    @staticmethod
    def _shape_event(ev) -> dict:
        return asdict(ev) if is_dataclass(ev) else {}

    # --------------------------------------------------------

    # kernel lifecycle

    def run_start(self, *, qsize: int):
        if self.debug:
            self._emit("DEBUG", "run_start", qsize=qsize)

    def run_end(self, *, processed: int, **extra):
        if self.debug:
            self._emit("DEBUG", "run_end", processed=processed, **extra)

    def post(self, ev, *, qsize: int):
        if self.debug:
            self._emit("DEBUG", "post", event=type(ev).__name__, qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        if self.debug:
            self._emit(
                "DEBUG",
                type(ev).__name__,
                **self._shape_event(ev),
                seq=seq,
                qsize=qsize,
                handlers=handlers,
            )

    def dispatch_end(self, ev, *, out_events: int, ms: float):
        if self.debug:
            self._emit(
                "DEBUG", "dispatch_done", event=type(ev).__name__, out_events=out_events, ms=ms
            )

    def error(self, ev, *, exc: BaseException, **extra):
        self._emit(
            "ERROR",
            "kernel_error",
            event=type(ev).__name__,
            error=str(exc),
            error_type=type(exc).__name__,
            **self._shape_event(ev),
            **extra,
        )

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        fields = self._shape_event(ev)
        fields.pop("run_id", None)
        name = fields.pop("name", type(ev).__name__)
        self._emit(self.LEVELS.get(name, "INFO"), name, **fields)
        if self.recorder:
            self.recorder.emit(ev)
