from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.spells.caster import SpellCaster, get_spell_caster
from app.spells.llm_client import LLMClient
from app.spells.recorder import get_spell_recorder
from app.subscriptions.store import SubscriberStore, get_subscriber_store


def build_completion_response(content):
    """Mock object mapping the OpenAI chat completion response structure."""
    mock_message = MagicMock()
    mock_message.content = content

    mock_choice = MagicMock()
    mock_choice.message = mock_message

    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


@pytest.fixture
def completion_response():
    return build_completion_response


@pytest.fixture
def mock_completions():
    mock_completions = MagicMock()
    mock_completions.create = AsyncMock(
        return_value=build_completion_response("By candle and by stone, your will is known.")
    )
    return mock_completions


@pytest.fixture
def mock_openai(mock_completions):
    mock_chat = MagicMock()
    mock_chat.completions = mock_completions

    mock_client_instance = AsyncMock()
    mock_client_instance.chat = mock_chat

    with patch("app.spells.llm_client.AsyncOpenAI", return_value=mock_client_instance) as mock_cls:
        yield mock_cls


@pytest.fixture
def spell_caster(mock_openai):
    return SpellCaster(llm=LLMClient(model_name="test-model", api_key="dummy_key"), default_length="long")


@pytest.fixture
def spell_recorder():
    return MagicMock()


@pytest.fixture
def subscriber_store(tmp_path):
    return SubscriberStore(tmp_path / "emails.json")


@pytest.fixture
def client(spell_caster, spell_recorder, subscriber_store):
    app.dependency_overrides[get_spell_caster] = lambda: spell_caster
    app.dependency_overrides[get_spell_recorder] = lambda: spell_recorder
    app.dependency_overrides[get_subscriber_store] = lambda: subscriber_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
