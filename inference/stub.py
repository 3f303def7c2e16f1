from .base import ModelBackend
from .types import ModelRequest, ModelResponse


class StaticTemplateBackend(ModelBackend):
    """
    Provider of last resort.

    Performs no I/O and produces no text. The gateway treats the
    "skipped" status as a signal to serve the deterministic fallback
    for the task, so this backend is also the default for CI/tests.
    """

    name = "template"

    async def invoke(self, request: ModelRequest) -> ModelResponse:
        return ModelResponse(
            status="skipped",
            error_type="static_template",
            metadata={"backend": self.name, "trace_id": request.trace_id},
        )
