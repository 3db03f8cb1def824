"""Feature modules.

A module is a sub-package of ``app.modules``; if its ``__init__``
defines ``router`` it is mounted under the versioned API.
"""

import pkgutil
from importlib import import_module

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every module package and collect the routers they expose.

    Packages are visited in name order. Import errors propagate: a
    module that fails to load is a deployment error, not something to
    serve around.
    """
    routers: list[APIRouter] = []

    for info in sorted(pkgutil.iter_modules(__path__), key=lambda m: m.name):
        if not info.ispkg or info.name.startswith("_"):
            continue
        module = import_module(f"{__name__}.{info.name}")
        router = getattr(module, "router", None)
        if router is None:
            logger.debug("module_without_routes", module=info.name)
            continue
        routers.append(router)
        logger.debug("module_loaded", module=info.name, prefix=router.prefix)

    return routers
