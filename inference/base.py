from abc import ABC, abstractmethod
from .types import ModelRequest, ModelResponse


class ModelBackend(ABC):
    """
    Abstract provider boundary.
    Gateway code must depend ONLY on this interface.

    Implementations never raise: every failure is reported as a
    non-success ModelResponse.
    """

    name: str = "backend"

    @abstractmethod
    async def invoke(self, request: ModelRequest) -> ModelResponse:
        """Send one prompt to the provider and return its raw text."""
        raise NotImplementedError
