import os
import sys

import pytest
from tortoise import Tortoise

# Add path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

# Settings are cached on first use, so the test environment is fixed before any import
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("REGISTER_RATE_LIMIT", "1000/minute")
os.environ.setdefault("ENVIRONMENT", "test")

from userhub.port.dto.user_dto import CreateUserDTO  # noqa: E402


@pytest.fixture
def registration_dto():
    """Scenario input: a fresh user with no optional fields"""
    return CreateUserDTO(
        uuid="u1",
        name="Alice",
        email="a@x.com",
        password="p",
        tag_name="alice",
        number_of_publications=0,
        publications=[],
    )


@pytest.fixture
async def db():
    """In-memory database with the user schema"""
    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["userhub.infra.tortoise_client.models"]}
    )
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()
