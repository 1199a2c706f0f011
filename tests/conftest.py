"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from code_convert.l1_entities.chat_message import ChatPayload
from code_convert.l1_entities.config import AppConfig, ConversionConfig
from code_convert.l4_frameworks_and_drivers.infra_config import build_app_config


def completion_body(content: str | None = 'converted') -> str:
    """Raw JSON body of a successful chat-completion reply."""
    return json.dumps({
        'id': 'chatcmpl-1',
        'object': 'chat.completion',
        'model': 'openai/gpt-4.1',
        'choices': [{'index': 0, 'message': {'role': 'assistant', 'content': content}, 'finish_reason': 'stop'}],
        'usage': {'prompt_tokens': 10, 'completion_tokens': 5, 'total_tokens': 15},
    })


def error_body(message: str, code: str = 'unauthorized') -> str:
    return json.dumps({'error': {'code': code, 'message': message}})


# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake LLM client for L2 use case tests."""

    def __init__(self, response: str | None = None):
        self._response = response if response is not None else completion_body()
        self.calls: list[tuple[ChatPayload, str]] = []

    def complete_raw(self, payload: ChatPayload, credential: str) -> str:
        self.calls.append((payload, credential))
        return self._response

    def set_response(self, response: str) -> None:
        self._response = response


class FakeInstructionsLoader:
    """Fake sidecar loader; None means the document is missing."""

    def __init__(self, document: str | None = None):
        self._document = document
        self.load_calls = 0

    def load(self) -> str | None:
        self.load_calls += 1
        return self._document


class FakePersistence:
    """In-memory persistence gateway for L2 tests."""

    def __init__(self, files: dict[Path, str] | None = None, response_path: Path | None = None):
        self.files: dict[Path, str] = dict(files or {})
        self.response_path = response_path or Path('/fake/response.json')
        self.read_calls: list[Path] = []
        self.output_calls: list[tuple[Path, str]] = []
        self.response_calls: list[str] = []
        self.fail_output = False
        self.fail_response = False

    def read_source(self, path: Path) -> str:
        self.read_calls.append(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def save_output(self, path: Path, content: str) -> Path:
        if self.fail_output:
            raise PermissionError(f'read-only: {path}')
        self.output_calls.append((path, content))
        self.files[path] = content
        return path

    def save_raw_response(self, raw: str) -> Path:
        if self.fail_response:
            raise OSError('disk full')
        self.response_calls.append(raw)
        return self.response_path

    def file_size(self, path: Path) -> int:
        return len(self.files[path].encode('utf-8'))


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def conversion_config(default_config: AppConfig) -> ConversionConfig:
    return default_config.conversion


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
conversion:
  model: "openai/gpt-4o-mini"
  target_language: "Flow"
  target_extension: "flow.js"
github:
  base_url: "https://example.test/inference"
  token_env: "MODELS_TOKEN"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def fake_instructions() -> FakeInstructionsLoader:
    return FakeInstructionsLoader()
