"""Telemetry for the transform engine, built directly on telelog.

Surface used by the rest of the package:

``TelemetrySettings.from_env()`` -- snapshot of the ``LAZY_TRANSFORM_*`` variables
``configure(...)`` -- adopt a telelog config, a named preset, or the env defaults
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- context manager combining profiling and component tracking
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LAZY_TRANSFORM_"
PRESETS = ("development", "production", "performance")

_TRUTHY = {"1", "true", "yes", "on"}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_ACTIVE_SETTINGS: Optional["TelemetrySettings"] = None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Environment-derived knobs for logging and step tracing."""

    logger_name: str = "lazy_transform"
    level: str = "WARNING"
    log_file: str = ""
    console: bool = True
    colored: bool = True
    json_format: bool = False
    buffered: bool = False
    buffer_size: int = 2048
    trace_steps: bool = False

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        raw_size = get("LOG_BUFFER_SIZE") or "2048"
        try:
            buffer_size = int(raw_size)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}LOG_BUFFER_SIZE must be an integer, got '{raw_size}'"
            ) from exc

        return cls(
            logger_name=get("LOGGER") or "lazy_transform",
            level=(get("LOG_LEVEL") or "WARNING").upper(),
            log_file=get("LOG_FILE") or "",
            console=not _flag(get("DISABLE_CONSOLE"), False),
            colored=not _flag(get("NO_COLOR"), False),
            json_format=_flag(get("LOG_JSON"), False),
            buffered=_flag(get("LOG_BUFFERED"), False),
            buffer_size=buffer_size,
            trace_steps=_flag(get("TRACE_STEPS"), False),
        )


def _with_profiling(config: Any) -> Any:
    config.with_profiling(True)
    return config


def _build_preset_config(preset: str, settings: TelemetrySettings) -> Any:
    key = preset.lower()
    if key == "performance_analysis":
        key = "performance"
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "lazy_transform.log")
        config.with_buffering(True)
    else:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_buffering(True)
        config.with_json_format(True)
        config.with_file_output(
            settings.log_file or "lazy_transform-performance.log"
        )

    return _with_profiling(config)


def _build_default_config(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)

    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)

    if settings.json_format:
        config.with_json_format(True)

    if settings.log_file:
        config.with_file_output(settings.log_file)

    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)

    return _with_profiling(config)


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``tl.Config`` instance to adopt.
    preset:
        ``"development"``, ``"production"`` or ``"performance"``. Mutually
        exclusive with ``config``.
    settings:
        Settings to build from; read from the environment when omitted.
    """

    global _ACTIVE_CONFIG, _ACTIVE_SETTINGS
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    resolved = settings or TelemetrySettings.from_env()
    if preset:
        config = _build_preset_config(preset, resolved)
    elif config is None:
        config = _build_default_config(resolved)
    else:
        config = _with_profiling(config)

    _ACTIVE_SETTINGS = resolved
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def current_settings() -> TelemetrySettings:
    if _ACTIVE_SETTINGS is None:
        configure()
    return cast(TelemetrySettings, _ACTIVE_SETTINGS)


def trace_steps_enabled() -> bool:
    return current_settings().trace_steps


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` configured for this package."""

    if _ACTIVE_CONFIG is None:
        configure()
    logger_name = name or current_settings().logger_name
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(
    logger: Any, level: Any, *, expect_data: bool = False
) -> Tuple[Any, bool]:
    name = str(level).lower()
    if expect_data:
        with_attr = getattr(logger, f"{name}_with", None)
        if with_attr is not None:
            return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    log = get_logger()
    payload = {"event": name, **(data or {})}
    method, accepts_data = _resolve_level_method(log, level, expect_data=True)
    message = f"event::{name}"
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


@dataclass
class SpanHandle:
    """Yielded by ``span``; lets the block attach metadata or flag failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})

        method, accepts = _resolve_level_method(self.logger, level, expect_data=True)
        if accepts:
            method(message, _format_pairs(payload))
        else:
            method(f"{message} {payload}")

    def finish(self) -> None:
        self._emit("debug", "span::finish")

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", {"reason": reason})


@contextmanager
def span(name: str, *, component: Optional[str | bool] = None) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a component.

    ``component=True`` reuses ``name`` as the component id; a string is used
    as-is. Metadata belongs to the yielded handle only and is never pushed as
    logger context, so nested spans cannot clobber each other. An exception
    escaping the block is reported through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger()
    component_name = name if component is True else component or None

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))

        handle = SpanHandle(logger=log, span_name=name, component_name=component_name)
        try:
            yield handle
        except Exception as exc:
            handle.fail(f"{type(exc).__name__}: {exc}")
            raise
        handle.finish()


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "current_settings",
    "get_logger",
    "record_event",
    "span",
    "trace_steps_enabled",
]
