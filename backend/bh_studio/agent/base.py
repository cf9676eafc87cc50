from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from bh_studio.agent.llm_client import GatewayClient
from bh_studio.core.config import settings

InType = TypeVar("InType", bound=BaseModel | str)
OutType = TypeVar("OutType", bound=BaseModel)


class BaseAgent(ABC, Generic[InType, OutType]):
    """Abstract base class for every gateway-backed tool."""

    # Name of the settings field holding this tool's model.
    model_setting: ClassVar[str] = "MODEL_TEXT"

    def __init__(self, model_name: str | None = None):
        model_to_use = model_name or getattr(settings, self.model_setting)
        self.llm = GatewayClient(model_name=model_to_use)

    @abstractmethod
    async def run(self, input_data: InType) -> OutType:
        """Run the tool on the given request and produce the response artifact."""
        pass
