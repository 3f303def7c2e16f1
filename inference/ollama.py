import logging

import httpx

from .base import ModelBackend
from .types import ModelRequest, ModelResponse

logger = logging.getLogger(__name__)


class OllamaModelBackend(ModelBackend):
    """
    Ollama backend for local model inference.

    Uses /api/generate with the literal prompt and stream disabled, so one
    request yields one complete answer in the "response" field.
    """

    name = "ollama"

    def __init__(self, model_name: str, base_url: str = "http://localhost:11434"):
        """
        Initialize Ollama backend.

        Args:
            model_name: Name of the model (e.g. "llama3.1", "phi3:mini")
            base_url:   Base URL of the Ollama service
        """
        self.model_name = model_name
        self.base_url = base_url.rstrip("/")

    async def invoke(self, request: ModelRequest) -> ModelResponse:
        """
        Generate a completion using Ollama /api/generate.

        A single attempt is made; timeouts and connection failures are
        returned as error responses instead of being retried.

        Args:
            request: ModelRequest with prompt, sampling knobs and timeout

        Returns:
            ModelResponse with the generated text on success
        """
        model = request.model or self.model_name
        base_metadata = {
            "backend": self.name,
            "model": model,
            "trace_id": request.trace_id,
        }

        options = {
            "temperature": request.temperature,
            "num_predict": request.max_tokens,
        }
        if request.top_p is not None:
            options["top_p"] = request.top_p

        payload = {
            "model": model,
            "prompt": request.prompt,
            "stream": False,
            "options": options,
        }

        try:
            async with httpx.AsyncClient(timeout=request.timeout_s) as client:
                resp = await client.post(f"{self.base_url}/api/generate", json=payload)
                resp.raise_for_status()

        except httpx.TimeoutException:
            logger.warning(f"Ollama request timed out after {request.timeout_s}s")
            return ModelResponse(
                status="recoverable_error",
                error_type="timeout",
                metadata=base_metadata,
            )

        except httpx.HTTPStatusError as e:
            logger.warning(f"Ollama returned HTTP {e.response.status_code}")
            return ModelResponse(
                status="fatal_error",
                error_type="http_error",
                metadata={**base_metadata, "status_code": e.response.status_code},
            )

        except Exception as e:
            logger.warning(f"Ollama unavailable: {type(e).__name__}: {e}")
            return ModelResponse(
                status="fatal_error",
                error_type="backend_unavailable",
                metadata={**base_metadata, "error": str(e)},
            )

        try:
            data = resp.json()
        except ValueError:
            data = None

        output = data.get("response") if isinstance(data, dict) else None
        if not isinstance(output, str) or not output.strip():
            return ModelResponse(
                status="fatal_error",
                error_type="invalid_envelope",
                metadata=base_metadata,
            )

        return ModelResponse(
            status="success",
            output=output.strip(),
            metadata=base_metadata,
        )
