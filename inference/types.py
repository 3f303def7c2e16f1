from dataclasses import dataclass
from typing import Optional, Dict, Any, Literal

ModelStatus = Literal["success", "recoverable_error", "fatal_error", "skipped"]


@dataclass
class ModelRequest:
    task: str                  # e.g. "resume", "connection_message"
    prompt: str
    model: str = ""
    temperature: float = 0.7
    max_tokens: int = 1200
    top_p: Optional[float] = None
    timeout_s: Optional[float] = 60.0
    trace_id: Optional[str] = None


@dataclass
class ModelResponse:
    status: ModelStatus
    output: Optional[str] = None
    error_type: Optional[str] = None   # timeout | http_error | invalid_envelope | backend_unavailable | static_template
    metadata: Optional[Dict[str, Any]] = None
