from __future__ import annotations

import dataclasses
import enum
import logging
import sys
import typing as t
from dataclasses import fields, is_dataclass
from types import UnionType

from pydantic import BaseModel

_LOG = logging.getLogger(__name__)


class ConfigCoerceError(TypeError):
    """Config value does not match its type hint; carries the field path."""
    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


_T = t.TypeVar("_T")


def build_typed(cls: type[_T], data: t.Any) -> _T:
    """
    Build a typed object (dataclass or pydantic BaseModel) from raw data,
    recursively coercing nested structures according to type hints.
    """
    try:
        return t.cast(_T, _coerce_to_class(cls, data, path=()))
    except ConfigCoerceError:
        raise
    except Exception as e:
        raise ConfigCoerceError(f"failed to build {getattr(cls, '__name__', str(cls))}: {e}") from e


def _type_hints(cls: type) -> dict[str, t.Any]:
    # string annotations (from __future__ import annotations) need the module globals
    mod = sys.modules.get(cls.__module__)
    gns = dict(vars(mod)) if mod is not None else {}
    return t.get_type_hints(cls, globalns=gns)


def _coerce_to_class(cls: type, data: t.Any, path: tuple[str, ...]):
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        if not isinstance(data, dict):
            raise ConfigCoerceError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)
        try:
            return cls.model_validate(data)
        except Exception as e:
            raise ConfigCoerceError(str(e), path)

    if is_dataclass(cls):
        if not isinstance(data, dict):
            raise ConfigCoerceError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)
        # strict: no unknown keys
        allowed = {f.name for f in fields(cls)}
        extras = set(data.keys()) - allowed
        if extras:
            raise ConfigCoerceError(f"unexpected keys: {sorted(extras)!r}", path)

        hints = _type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            f_path = (*path, f.name)
            if f.name in data:
                kwargs[f.name] = coerce(data[f.name], hints.get(f.name, f.type), f_path)
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise ConfigCoerceError("required field missing", f_path)
        _LOG.debug("built %s at %s", cls.__name__, ".".join(path) or "$")
        return cls(**kwargs)

    if isinstance(data, cls):
        return data
    try:
        return cls(data)
    except Exception:
        raise ConfigCoerceError(f"cannot coerce {type(data).__name__} → {getattr(cls, '__name__', str(cls))}", path)


def coerce(value: t.Any, hint: t.Any, path: tuple[str, ...]) -> t.Any:
    """Recursive normalization according to a type hint."""
    origin = t.get_origin(hint)
    args = t.get_args(hint)

    if hint is t.Any or hint is None:
        return value

    # Optional[T] / Union[...]
    if origin in (t.Union, UnionType):
        if value is None and type(None) in args:
            return None
        errors: list[str] = []
        for option in args:
            if option is type(None):
                continue
            try:
                return coerce(value, option, path)
            except ConfigCoerceError as e:
                errors.append(str(e))
        raise ConfigCoerceError(" | ".join(errors) or "union alternatives exhausted", path)

    if origin is t.Literal:
        if value not in args:
            raise ConfigCoerceError(f"expected one of {args!r}, got {value!r}", path)
        return value

    # Primitives; YAML already yields proper types, so no soft casts.
    # bool is an int subclass and must not pass as a number.
    if hint in (str, int, float, bool):
        if isinstance(value, bool) and hint is not bool:
            raise ConfigCoerceError(f"expected {hint.__name__}, got bool", path)
        if hint is float and isinstance(value, int):
            return float(value)
        if not isinstance(value, hint):
            raise ConfigCoerceError(f"expected {hint.__name__}, got {type(value).__name__}", path)
        return value

    if isinstance(hint, type) and issubclass(hint, enum.Enum):
        if isinstance(value, hint):
            return value
        try:
            return hint[value]
        except KeyError:
            try:
                return hint(value)
            except ValueError:
                raise ConfigCoerceError(f"expected {hint.__name__} (by name or value), got {value!r}", path)

    if origin is dict:
        k_t, v_t = args or (t.Any, t.Any)
        if not isinstance(value, dict):
            raise ConfigCoerceError(f"expected dict, got {type(value).__name__}", path)
        out = {}
        for k, v in value.items():
            kk = coerce(k, k_t, (*path, "<key>"))
            out[kk] = coerce(v, v_t, (*path, str(kk)))
        return out

    if origin is list:
        (elem_t,) = args or (t.Any,)
        if not isinstance(value, list):
            raise ConfigCoerceError(f"expected list, got {type(value).__name__}", path)
        return [coerce(v, elem_t, (*path, str(i))) for i, v in enumerate(value)]

    if origin is tuple:
        if not isinstance(value, (list, tuple)):
            raise ConfigCoerceError(f"expected tuple/list, got {type(value).__name__}", path)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(coerce(v, args[0], (*path, str(i))) for i, v in enumerate(value))
        if args:
            if len(args) != len(value):
                raise ConfigCoerceError(f"expected tuple of len={len(args)}, got {len(value)}", path)
            return tuple(coerce(v, at, (*path, str(i))) for i, (v, at) in enumerate(zip(value, args)))
        return tuple(value)

    if isinstance(hint, type):
        return _coerce_to_class(hint, value, path)

    return value


__all__ = ["build_typed", "coerce", "ConfigCoerceError"]
