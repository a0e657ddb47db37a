"""Centralized runtime configuration for grid item controllers."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from gridkit.api.logging import LoggingConfig
from gridkit.ui_runtime.style import RenderMode


@dataclass(frozen=True, slots=True)
class RuntimeRenderConfig:
    mode: RenderMode
    transform_scale: float


@dataclass(frozen=True, slots=True)
class RuntimeGestureConfig:
    bounded_drag: bool
    trace_enabled: bool


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    render: RuntimeRenderConfig
    gesture: RuntimeGestureConfig
    logging: LoggingConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar("gridkit_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_render_mode(raw: str) -> RenderMode:
    value = str(raw).strip().lower().replace("-", "_")
    if value in {"transform", "transforms", "css_transforms"}:
        return RenderMode.TRANSFORM
    if value in {"top_left", "topleft", "absolute"}:
        return RenderMode.TOP_LEFT
    if value in {"percentage", "percent", "percentages", "static"}:
        return RenderMode.PERCENTAGE
    return RenderMode.TRANSFORM


def _normalize_log_format(raw: str, fallback: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return fallback
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with gridkit-prefixed override."""
    value = _raw("GRIDKIT_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    log_file = _text("GRIDKIT_LOG_FILE", "", env=env)
    return RuntimeConfig(
        render=RuntimeRenderConfig(
            mode=_normalize_render_mode(_text("GRIDKIT_RENDER_MODE", "transform", env=env)),
            transform_scale=_float("GRIDKIT_TRANSFORM_SCALE", 1.0, minimum=0.01, env=env),
        ),
        gesture=RuntimeGestureConfig(
            bounded_drag=_flag("GRIDKIT_BOUNDED_DRAG", False, env=env),
            trace_enabled=_flag("GRIDKIT_GESTURE_TRACE_ENABLED", False, env=env),
        ),
        logging=LoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_normalize_log_format(_text("GRIDKIT_LOG_FORMAT", "text", env=env), "text"),
            file_path=log_file or None,
            file_format=_normalize_log_format(_text("GRIDKIT_LOG_FILE_FORMAT", "json", env=env), "json"),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def reset_runtime_config() -> None:
    """Drop the cached config so the next read reloads from the environment."""
    _RUNTIME_CONFIG.set(None)


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "RuntimeConfig",
    "RuntimeGestureConfig",
    "RuntimeRenderConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "reset_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
