"""MCP tools for Loco data access.

- products: Product listing and product translation removal
- glossary: Glossary entry creation and update

Every public function defined in these modules is registered as an MCP tool
by ``loco_mcp.utils.register_tools``.
"""

from importlib import import_module
from types import ModuleType
from typing import Dict

_MODULE_PATHS = {
    "products": "loco_mcp.tools.products",
    "glossary": "loco_mcp.tools.glossary",
}

AVAILABLE_MODULES = list(_MODULE_PATHS.keys())
__all__ = AVAILABLE_MODULES.copy()

_LOADED_MODULES: Dict[str, ModuleType] = {}


def __getattr__(name: str) -> ModuleType:
    if name not in _MODULE_PATHS:
        raise AttributeError(f"module 'loco_mcp.tools' has no attribute '{name}'")
    if name not in _LOADED_MODULES:
        _LOADED_MODULES[name] = import_module(_MODULE_PATHS[name])
    return _LOADED_MODULES[name]


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + AVAILABLE_MODULES)
