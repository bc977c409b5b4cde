"""Sandboxed jinja2 rendering for marketing copy placeholders."""

from __future__ import annotations

from typing import Any

from jinja2 import StrictUndefined, Undefined, meta
from jinja2.sandbox import ImmutableSandboxedEnvironment

_ALLOWED_FILTERS = {
    "default",
    "lower",
    "upper",
    "title",
    "capitalize",
    "trim",
    "replace",
}

_ALLOWED_TESTS = {
    "defined",
    "undefined",
    "none",
}


class _CopySandbox(ImmutableSandboxedEnvironment):
    def is_safe_attribute(self, obj, attr, value) -> bool:
        return False

    def is_safe_callable(self, obj) -> bool:
        return False


def _build_env(strict: bool) -> _CopySandbox:
    env = _CopySandbox(autoescape=False, undefined=StrictUndefined if strict else Undefined)
    env.globals = {}
    env.filters = {key: val for key, val in env.filters.items() if key in _ALLOWED_FILTERS}
    env.tests = {key: val for key, val in env.tests.items() if key in _ALLOWED_TESTS}
    return env


_ENVS = {True: _build_env(True), False: _build_env(False)}


def _sanitize_context(context: dict[str, Any] | None) -> dict[str, str]:
    out: dict[str, str] = {}
    for key, value in (context or {}).items():
        if value is None:
            continue
        out[str(key)] = value if isinstance(value, str) else str(value)
    return out


def has_placeholders(text: Any) -> bool:
    return isinstance(text, str) and ("{{" in text or "{%" in text)


def collect_undeclared_vars(text: str | None) -> set[str]:
    if not text:
        return set()
    parsed = _ENVS[False].parse(text)
    return set(meta.find_undeclared_variables(parsed))


def render_template(text: str | None, context: dict[str, Any] | None, strict: bool = False) -> str:
    """Render ``text`` with ``context``.

    Non-strict rendering turns unknown names into empty strings, which is what
    preset copy wants: a missing business name should fall back through the
    ``default`` filter rather than fail a page render.
    """
    if not has_placeholders(text):
        return text or ""
    tmpl = _ENVS[strict].from_string(text)
    return tmpl.render(_sanitize_context(context))
