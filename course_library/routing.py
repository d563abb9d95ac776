import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from course_library.logging import logger

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collects and registers all HTTP routers for the application.

    Every module in `api/http` exposes a `router`; modules are included in
    alphabetical order, which is also the order their routes are matched.
    `author_collections` therefore claims `/authors/(...)` before `authors`
    sees it as a single author ID.
    """
    # Initialize main router
    main_router: APIRouter = APIRouter()

    # Get project dir
    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    # Get API routers
    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        # Get api module
        api = import_module(f".{module}", package=f"{app_name}.api.http")

        # Add api router to main router
        main_router.include_router(api.router)

        # Only log on first registration
        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
