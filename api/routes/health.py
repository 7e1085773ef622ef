"""
Health check route to verify the service is up and report the catalog size.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict

from fastapi import APIRouter

from config import HEALTH_PATH
from engine.events.registry import get_registry
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Health"])


@router.get(HEALTH_PATH)
@handle_exceptions
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "events": len(get_registry()),
    }
