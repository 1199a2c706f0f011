"""Infrastructure provider configs -- lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import BaseModel, Field

from code_convert.l1_entities.config import AppConfig
from code_convert.l3_interface_adapters.gateways.github_models_llm_client import (
    GITHUB_API_VERSION,
    GITHUB_MODELS_BASE_URL,
)
from code_convert.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'conversion': {
        'model': 'openai/gpt-4.1',
        'source_language': 'JavaScript',
        'target_language': 'TypeScript',
        'target_extension': '.ts',
        'instructions_file': 'copilot-instructions.md',
        'response_file': 'response.json',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class GitHubModelsProviderConfig(BaseModel):
    base_url: str = GITHUB_MODELS_BASE_URL
    api_version: str = GITHUB_API_VERSION
    token_env: str = 'GITHUB_TOKEN'


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    github: GitHubModelsProviderConfig = Field(default_factory=GitHubModelsProviderConfig)
