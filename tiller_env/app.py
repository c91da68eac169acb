"""FastAPI application for inspecting data source output.

This module provides a thin read-only HTTP layer over the data source.
Value resolution is delegated to the services layer.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from tiller_env.services.data_source import DataSource
from tiller_env.services.environment_override import EnvironmentOverrideSource
from tiller_env.utils.constant import LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")

# --- Service layer setup ---
_data_source: DataSource = EnvironmentOverrideSource()

app = FastAPI()


def is_template_name_safe(template_name: str) -> bool:
    """Check that a template name cannot escape the template directory.

    Args:
        template_name: The template name from the request path.

    Returns:
        True if the name is non-empty and has no path separators or parent references.
    """
    if not template_name:
        return False
    return ".." not in template_name and "/" not in template_name and "\\" not in template_name


@app.get("/ping")
def ping() -> dict[str, str]:
    """Report that the API is up."""
    return {"ping": "Tiller API v2 OK"}


@app.get("/v2/globals")
def get_globals() -> dict[str, Any]:
    """Return the global values supplied by the data source.

    Returns:
        A dictionary of global template values.
    """
    values = dict(_data_source.global_values())
    logging.info("Serving %d global value(s)", len(values))
    return values


@app.get("/v2/template/{template_name}", response_model=None)
def get_template(template_name: str) -> dict[str, Any] | JSONResponse:
    """Return the per-template values and target values for a template.

    Args:
        template_name: The name of the template.

    Returns:
        A dictionary with ``values`` and ``target_values``, or a JSONResponse with an error.
    """
    if not is_template_name_safe(template_name):
        logging.warning("Template request blocked for unsafe name: %s", template_name)
        return JSONResponse({"error": "Invalid template name"}, status_code=400)

    logging.info("Serving values for template %s", template_name)
    return {
        "values": dict(_data_source.values(template_name)),
        "target_values": dict(_data_source.target_values(template_name)),
    }
