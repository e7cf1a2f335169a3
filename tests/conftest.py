import os
import pytest

TEST_TOKEN = "test-token-for-paramhub"

# paramhub.config reads these at import time
os.environ["PARAMHUB_TOKEN"] = TEST_TOKEN
os.environ["LOG_FILE"] = ""


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def client():
    """Flask test client for the real app."""
    from paramhub.app import app

    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def all_definitions():
    """Every definition reachable from the registries and provider tables, once each."""
    from paramhub import param_settings as ps

    seen = {}
    tables = [
        ps.BASE_DEFINITIONS,
        ps.LIBRECHAT,
        ps.OPENAI_PARAMS,
        ps.ANTHROPIC_PARAMS,
        ps.BEDROCK_PARAMS,
        ps.MISTRAL_PARAMS,
        ps.COHERE_PARAMS,
        ps.META_PARAMS,
        ps.GOOGLE_PARAMS,
    ]
    for table in tables:
        for definition in table.values():
            seen[id(definition)] = definition
    for configuration in ps.PARAM_SETTINGS.values():
        for definition in configuration:
            seen[id(definition)] = definition
    for columns in ps.PRESET_SETTINGS.values():
        for definition in columns.col1 + columns.col2:
            seen[id(definition)] = definition
    return list(seen.values())
