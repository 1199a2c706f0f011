"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from code_convert.l1_entities.config import AppConfig
from code_convert.l2_use_cases.convert_use_case import ConvertFileUseCase
from code_convert.l2_use_cases.ports.instructions_loader import InstructionsLoader
from code_convert.l2_use_cases.ports.llm_client import LLMClient
from code_convert.l2_use_cases.ports.persistence import PersistenceGateway
from code_convert.l3_interface_adapters.gateways.file_persistence import FilePersistenceGateway
from code_convert.l3_interface_adapters.gateways.github_models_llm_client import GitHubModelsLLMClient
from code_convert.l3_interface_adapters.gateways.sidecar_instructions_loader import SidecarInstructionsLoader
from code_convert.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        work_dir: Path,
        infra: InfraConfig | None = None,
        on_progress: Callable[[str], None] | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config
        self.work_dir = work_dir

        _infra = infra or InfraConfig()
        conversion = config.conversion
        self.persistence: PersistenceGateway = FilePersistenceGateway(work_dir / conversion.response_file)
        self.instructions_loader: InstructionsLoader = SidecarInstructionsLoader(
            work_dir / conversion.instructions_file,
        )
        self.llm_client: LLMClient = GitHubModelsLLMClient(
            base_url=_infra.github.base_url,
            api_version=_infra.github.api_version,
        )

        self.use_case = ConvertFileUseCase(
            llm_client=self.llm_client,
            persistence=self.persistence,
            instructions_loader=self.instructions_loader,
            config=conversion,
            token_env=_infra.github.token_env,
            on_progress=on_progress,
            on_warning=on_warning,
        )
