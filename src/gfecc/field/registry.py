from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type
import importlib
import logging
import pkgutil
import threading

from gfecc.field.element import FieldElement

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Field selector.

    module: field module name ("prime" or "binary")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "binary"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available field modules under gfecc.field.modules.
    """
    pkg = importlib.import_module("gfecc.field.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def field_type(cfg: Config) -> Type[FieldElement]:
    """
    Return the element class for cfg, building its log/exp tables on first use.

    Configs are resolved first (prime order 11 with no generator is the same
    field as order 11 with generator 2), and each resolved field gets exactly
    one class for the life of the process. Elements built through the registry
    therefore compare and combine across call sites and threads.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return _get_or_build(cfg.module, mod, module_cfg)


def prime_field(order: int, primitive_element: Optional[int] = None) -> Type[FieldElement]:
    mod = _import_field_module("prime")
    return field_type(Config(module="prime", module_cfg=mod.Config(order=order, primitive_element=primitive_element)))


def binary_field(polynomial: str = "100011101") -> Type[FieldElement]:
    mod = _import_field_module("binary")
    return field_type(Config(module="binary", module_cfg=mod.Config(polynomial=polynomial)))


# ----------------------------
# Internal
# ----------------------------

# One element class per resolved field; entries are never evicted.
_FIELDS: Dict[Tuple[str, Any], Type[FieldElement]] = {}
_FIELDS_LOCK = threading.Lock()


def _import_field_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"gfecc.field.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_field_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"field module '{cfg.module}' missing Config")
    for fn in ("resolve", "build"):
        if not callable(getattr(mod, fn, None)):
            raise AttributeError(f"field module '{cfg.module}' missing {fn}")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, mod.resolve(cfg=module_cfg)


def _get_or_build(module_name: str, mod, module_cfg: Any) -> Type[FieldElement]:
    """
    module_cfg must be the module's resolved Config (hashable, canonical).
    Builds at most once per key, also under concurrent first use.
    Failed builds raise and leave nothing behind.
    """
    key = (module_name, module_cfg)
    gf = _FIELDS.get(key)
    if gf is not None:
        return gf

    with _FIELDS_LOCK:
        gf = _FIELDS.get(key)
        if gf is None:
            gf = mod.build(cfg=module_cfg)
            _FIELDS[key] = gf
            log.debug("registered field type %s for %r", gf.__name__, module_cfg)
    return gf
