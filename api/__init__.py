"""
FastAPI application factory for the Folio preview server.

Serves the showcase/manifest JSON API and the static site.
"""

import os
import sys

# Ensure the project root is in Python path for local imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles


def create_app(config=None) -> FastAPI:
    """FastAPI application factory.

    Args:
        config: Gallery config dict; loaded from gallery_config.json (or
            FOLIO_CONFIG) when omitted
    """
    from api.config import load_api_config
    from config import resolve_config_path

    app = FastAPI(
        title="Folio Preview API",
        description="Portfolio manifests and home showcase",
        version="1.0.0",
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )
    app.state.gallery_config = config if config is not None else load_api_config()

    # CORS middleware (dev: allow a local static server)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8080",
            "http://localhost:5000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    from api.routers.showcase import router as showcase_router
    from api.routers.manifests import router as manifests_router

    app.include_router(showcase_router)
    app.include_router(manifests_router)

    # Static site last so /api routes take precedence
    site_root = resolve_config_path(app.state.gallery_config, 'site_root')
    if os.path.isdir(site_root):
        app.mount("/", StaticFiles(directory=site_root, html=True), name="site")

    return app
