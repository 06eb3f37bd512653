"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from drops_chat.l1_entities.config import AppConfig
from drops_chat.l2_use_cases.ports.ai_gateway import AIGateway
from drops_chat.l2_use_cases.ports.config_loader import ConfigLoader
from drops_chat.l2_use_cases.ports.message_store import MessageStore
from drops_chat.l3_interface_adapters.controllers.chat_controller import ChatController
from drops_chat.l3_interface_adapters.gateways.memory_message_store import InMemoryMessageStore
from drops_chat.l3_interface_adapters.gateways.openai_ai_gateway import OpenAIGateway
from drops_chat.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from drops_chat.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Pass store/gateway to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        *,
        store: MessageStore | None = None,
        gateway: AIGateway | None = None,
    ) -> None:
        self.config = config
        self.infra = infra or InfraConfig()

        self.store: MessageStore = store or InMemoryMessageStore()
        self.gateway: AIGateway = gateway or OpenAIGateway(
            config.assistant,
            config.transcription,
            api_key=self.infra.openai.api_key,
            base_url=self.infra.openai.base_url,
        )

        self.controller = ChatController(config=config, store=self.store, gateway=self.gateway)

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
