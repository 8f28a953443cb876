import pytest
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

TEST_ENV = {
    "PERPLEXITY_API_KEY": "pplx-test-key",
    "GEMINI_API_KEY": "test_gemini_key",
    "LOG_LEVEL": "DEBUG",
}
# Settings are read when config is first imported, which happens at collection time.
for _key, _value in TEST_ENV.items():
    os.environ.setdefault(_key, _value)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Point the shared settings object at test credentials."""
    from config import settings
    monkeypatch.setattr(settings, "PERPLEXITY_API_KEY", TEST_ENV["PERPLEXITY_API_KEY"])
    monkeypatch.setattr(settings, "GEMINI_API_KEY", TEST_ENV["GEMINI_API_KEY"])
    return TEST_ENV


@pytest.fixture
def no_retry_sleep(monkeypatch):
    """Make retry backoff instant."""
    sleep = AsyncMock()
    monkeypatch.setattr("utils.retry.asyncio.sleep", sleep)
    return sleep


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient usable as an async context manager."""
    mock_client = MagicMock()
    mock_response = MagicMock()
    mock_response.status_code = 200
    mock_response.raise_for_status = MagicMock()
    mock_client.post = AsyncMock(return_value=mock_response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def structured_response_text():
    """Response text in the labeled layout the verification prompts ask for."""
    return (
        "[VERDICT] - TRUE\n"
        "[EXPLANATION] - **Water** boils at 100 degrees Celsius at sea level [1]. "
        "At higher altitudes the boiling point drops [2].\n"
        "[SOURCES]\n"
        "1. USGS Water Science - https://www.usgs.gov/water-boiling\n"
        "2. BBC Science - https://www.bbc.co.uk/science/altitude\n"
    )


@pytest.fixture
def sample_perplexity_response(structured_response_text):
    """Sample chat-completion body from the verification model."""
    return {
        "id": "chatcmpl-test",
        "model": "llama-3.1-sonar-small-128k-online",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": structured_response_text},
            }
        ],
        "citations": [
            "https://www.usgs.gov/water-boiling",
            "https://www.bbc.co.uk/science/altitude",
        ],
    }


@pytest.fixture
def sample_gemini_response():
    """Sample Gemini generateContent body carrying preprocessing JSON."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [
                        {
                            "text": '{"claims": ["The Eiffel Tower is 330 metres tall", "It was completed in 1889"], '
                                    '"summary": "An article about the Eiffel Tower.", '
                                    '"mainTopics": ["Eiffel Tower", "Paris"]}'
                        }
                    ]
                }
            }
        ]
    }
