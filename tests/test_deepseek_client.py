"""
Unit tests for the DeepSeek client wrapper (openai SDK mocked).
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.core.config import Settings
from app.services.deepseek_client import DeepSeekClient


def completion(text):
    return MagicMock(choices=[MagicMock(message=MagicMock(content=text))])


def test_from_settings():
    settings = Settings(deepseek_api_key="k" * 30, deepseek_model="deepseek-chat", llm_timeout_seconds=12)

    client = DeepSeekClient.from_settings(settings)

    assert client.api_key == "k" * 30
    assert client.model == "deepseek-chat"


def test_openai_client_is_single_attempt_with_timeout():
    client = DeepSeekClient(api_key="k" * 30, base_url="https://api.deepseek.com/v1", timeout=12)

    with patch("app.services.deepseek_client.AsyncOpenAI") as mock_openai:
        client.client
        client.client

    mock_openai.assert_called_once_with(
        api_key="k" * 30,
        base_url="https://api.deepseek.com/v1",
        timeout=12,
        max_retries=0
    )


def test_generate_content_returns_first_choice():
    client = DeepSeekClient(api_key="k" * 30, base_url="http://test")
    create = AsyncMock(return_value=completion('{"summary": "ok"}'))
    client._client = MagicMock()
    client._client.chat.completions.create = create

    text = asyncio.run(client.generate_content("prompt text"))

    assert text == '{"summary": "ok"}'
    messages = create.call_args.kwargs["messages"]
    assert messages[-1] == {"role": "user", "content": "prompt text"}
    assert create.call_args.kwargs["model"] == "deepseek-chat"


def test_generate_content_propagates_errors():
    client = DeepSeekClient(api_key="k" * 30, base_url="http://test")
    client._client = MagicMock()
    client._client.chat.completions.create = AsyncMock(side_effect=TimeoutError("slow"))

    with pytest.raises(TimeoutError):
        asyncio.run(client.generate_content("prompt"))


def test_connection_check_swallows_errors():
    client = DeepSeekClient(api_key="k" * 30, base_url="http://test")
    client._client = MagicMock()
    client._client.chat.completions.create = AsyncMock(side_effect=RuntimeError("down"))

    assert asyncio.run(client.test_connection()) is False
