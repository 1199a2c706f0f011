"""Gateway: GitHub Models chat-completion client -- implements LLMClient port.

Speaks the OpenAI-compatible protocol through the openai SDK, with the
GitHub REST headers the inference endpoint expects.
"""

from __future__ import annotations

import logging

import httpx
import openai

from code_convert.l1_entities.chat_message import ChatPayload
from code_convert.l1_entities.errors import RemoteAPIError

log = logging.getLogger('cc.llm')

GITHUB_MODELS_BASE_URL = 'https://models.github.ai/inference'
GITHUB_API_VERSION = '2022-11-28'


class GitHubModelsLLMClient:
    """Wraps openai.OpenAI to implement the LLMClient protocol.

    Non-2xx replies are not raised: their body is handed back like any other
    so the caller can persist and decode it.
    """

    def __init__(
        self,
        base_url: str = GITHUB_MODELS_BASE_URL,
        api_version: str = GITHUB_API_VERSION,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url
        self._api_version = api_version
        self._http_client = http_client

    def _client(self, credential: str) -> openai.OpenAI:
        return openai.OpenAI(
            api_key=credential,
            base_url=self._base_url,
            max_retries=0,
            default_headers={
                'Accept': 'application/vnd.github+json',
                'X-GitHub-Api-Version': self._api_version,
            },
            http_client=self._http_client,
        )

    def complete_raw(self, payload: ChatPayload, credential: str) -> str:
        client = self._client(credential)
        try:
            raw = client.chat.completions.with_raw_response.create(
                model=payload.model,
                messages=[m.model_dump() for m in payload.messages],  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
            )
            log.info('API returned HTTP %d', raw.status_code)
            return raw.http_response.text
        except openai.APIStatusError as e:
            log.warning('API returned HTTP %d', e.status_code)
            return e.response.text
        except openai.APIConnectionError as e:
            raise RemoteAPIError(f'Cannot connect to {self._base_url}: {e}') from e
        finally:
            if self._http_client is None:
                client.close()
