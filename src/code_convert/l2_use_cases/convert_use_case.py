"""Use case: convert one source file through the LLM client."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from pydantic import ValidationError

from code_convert.l1_entities.completion import ChatCompletion
from code_convert.l1_entities.config import ConversionConfig
from code_convert.l1_entities.conversion import ConversionRequest, ConversionResult
from code_convert.l1_entities.errors import (
    EmptyResponseError,
    InputNotFoundError,
    InputReadError,
    MissingCredentialError,
    OutputPathConflictError,
    OutputWriteError,
    RemoteAPIError,
)
from code_convert.l2_use_cases.ports.instructions_loader import InstructionsLoader
from code_convert.l2_use_cases.ports.llm_client import LLMClient
from code_convert.l2_use_cases.ports.persistence import PersistenceGateway
from code_convert.l2_use_cases.utils.code_extraction import preview_lines, strip_code_fences
from code_convert.l2_use_cases.utils.prompt_builder import build_payload, default_instructions, resolve_instructions

log = logging.getLogger('cc.convert')


def resolve_credential(explicit: str | None, env: Mapping[str, str], env_var: str) -> str:
    """Explicit token first, then the environment. Empty values count as missing."""
    token = explicit or env.get(env_var, '')
    if not token:
        raise MissingCredentialError(
            f'A bearer token is required. Set the {env_var} environment variable or pass --token.'
        )
    return token


def decode_response(raw: str) -> str:
    """Parse a raw chat-completion body and return the first choice's content."""
    try:
        completion = ChatCompletion.model_validate_json(raw)
    except ValidationError as e:
        raise EmptyResponseError(f'Malformed response from API: {e.errors()[0]["msg"]}') from e
    if completion.error is not None:
        raise RemoteAPIError(completion.error.message)
    content = completion.first_content()
    if not content.strip():
        raise EmptyResponseError('No content in response')
    return content


class ConvertFileUseCase:
    """Runs the whole pipeline: load, prompt, call, decode, write, summarize."""

    def __init__(
        self,
        llm_client: LLMClient,
        persistence: PersistenceGateway,
        instructions_loader: InstructionsLoader,
        config: ConversionConfig,
        *,
        token_env: str = 'GITHUB_TOKEN',
        environ: Mapping[str, str] | None = None,
        on_progress: Callable[[str], None] | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self._llm = llm_client
        self._persistence = persistence
        self._instructions = instructions_loader
        self._config = config
        self._token_env = token_env
        self._environ = environ
        self._on_progress = on_progress or (lambda _msg: None)
        self._on_warning = on_warning or (lambda _msg: None)

    def execute(self, request: ConversionRequest) -> ConversionResult:
        """Convert ``request.input_path`` into ``request.output_path``. Raises ConversionError subclasses."""
        if os.path.abspath(request.output_path) == os.path.abspath(request.input_path):
            raise OutputPathConflictError(request.output_path)
        environ = os.environ if self._environ is None else self._environ
        token = resolve_credential(request.credential, environ, self._token_env)

        self._on_progress(f'Reading {request.input_path}...')
        source = self._read_source(request.input_path)

        self._on_progress(f'Reading instructions from {self._config.instructions_file}...')
        instructions, used_default = self._load_instructions()

        self._on_progress('Preparing request payload...')
        payload = build_payload(self._config.model, instructions, source)
        log.info(
            'Request: model=%s, system=%d chars, user=%d chars',
            payload.model,
            len(instructions),
            len(source),
        )

        self._on_progress('Calling the chat-completion API for model inference...')
        raw = self._llm.complete_raw(payload, token)
        log.debug('Raw response (%d chars): %s', len(raw), raw[:500])

        response_path = self._save_raw_response(raw)
        content = strip_code_fences(decode_response(raw))

        try:
            self._persistence.save_output(request.output_path, content)
        except OSError as e:
            raise OutputWriteError(f'Cannot write {request.output_path}: {e}') from e
        self._on_progress(f'{self._config.target_language} conversion saved to {request.output_path}')

        return ConversionResult(
            input_path=request.input_path,
            output_path=request.output_path,
            response_path=response_path,
            input_size=self._persistence.file_size(request.input_path),
            output_size=self._persistence.file_size(request.output_path),
            preview=preview_lines(content),
            used_default_instructions=used_default,
        )

    def _read_source(self, path: Path) -> str:
        try:
            return self._persistence.read_source(path)
        except FileNotFoundError as e:
            raise InputNotFoundError(f'Input file not found: {path}') from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f'Cannot read {path}: {e}') from e

    def _load_instructions(self) -> tuple[str, bool]:
        document = self._instructions.load()
        if document is None:
            self._on_warning(
                f'Could not read {self._config.instructions_file}. Using default instructions.',
            )
            return default_instructions(self._config.source_language, self._config.target_language), True
        return resolve_instructions(document, self._config.target_language), False

    def _save_raw_response(self, raw: str) -> Path | None:
        try:
            path = self._persistence.save_raw_response(raw)
        except OSError as e:
            log.warning('Could not save raw response: %s', e)
            self._on_warning(f'Could not save raw response ({e}).')
            return None
        self._on_progress(f'Response saved to {path}')
        return path
