"""
Tortoise ORM configuration
"""
from typing import Any, Dict, Optional

from ..config import get_settings

MODELS_MODULE = "userhub.infra.tortoise_client.models"


def get_tortoise_config(db_url: Optional[str] = None) -> Dict[str, Any]:
    """Build the Tortoise config from settings, or from an explicit database URL"""
    return {
        "connections": {
            "default": db_url or get_settings().database_url
        },
        "apps": {
            "models": {
                "models": [MODELS_MODULE],
                "default_connection": "default",
            },
        },
    }
