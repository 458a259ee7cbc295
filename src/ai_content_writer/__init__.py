"""AI content writer: model-aware, resilient CMS content generation."""
from __future__ import annotations

__version__ = "0.1.0"

# Types
from ai_content_writer.types import (
    ChatCompletion,
    Choice,
    ConnectionResult,
    ContentFormat,
    FinishReason,
    GenerationContext,
    GenerationResult,
    Message,
    ReasoningEffort,
    ResolvedParameters,
    Role,
    TokenParameter,
    Usage,
)

# Errors
from ai_content_writer.errors import (
    ContentWriterError,
    ModelNotFoundError,
    ConfigurationError,
    InvalidParameterError,
    TransportError,
    AuthenticationError,
    AccessDeniedError,
    InvalidRequestError,
    ContextLengthError,
    RateLimitError,
    ServerError,
    RequestTimeoutError,
    NetworkError,
)

# Configuration
from ai_content_writer.config import Settings
from ai_content_writer.fields import FieldKind, InsertionMethod, format_for, insertion_method

# Catalog
from ai_content_writer.catalog import DEFAULT_MODELS_DIR, ModelCatalog, ModelDescriptor

# Core
from ai_content_writer.resolver import ParameterResolver
from ai_content_writer.prompts import DEFAULT_SYSTEM_PROMPT, PromptComposer
from ai_content_writer.formatter import ContentFormatter
from ai_content_writer.compat import Rejection, classify_rejection
from ai_content_writer.client import ChatClient, StubChatClient
from ai_content_writer.pipeline import GenerationPipeline

# Providers
from ai_content_writer.providers.openai import OpenAIChatClient

__all__ = [
    "__version__",
    # Types
    "ChatCompletion",
    "Choice",
    "ConnectionResult",
    "ContentFormat",
    "FinishReason",
    "GenerationContext",
    "GenerationResult",
    "Message",
    "ReasoningEffort",
    "ResolvedParameters",
    "Role",
    "TokenParameter",
    "Usage",
    # Errors
    "ContentWriterError",
    "ModelNotFoundError",
    "ConfigurationError",
    "InvalidParameterError",
    "TransportError",
    "AuthenticationError",
    "AccessDeniedError",
    "InvalidRequestError",
    "ContextLengthError",
    "RateLimitError",
    "ServerError",
    "RequestTimeoutError",
    "NetworkError",
    # Configuration
    "Settings",
    "FieldKind",
    "InsertionMethod",
    "format_for",
    "insertion_method",
    # Catalog
    "DEFAULT_MODELS_DIR",
    "ModelCatalog",
    "ModelDescriptor",
    # Core
    "ParameterResolver",
    "DEFAULT_SYSTEM_PROMPT",
    "PromptComposer",
    "ContentFormatter",
    "Rejection",
    "classify_rejection",
    "ChatClient",
    "StubChatClient",
    "GenerationPipeline",
    # Providers
    "OpenAIChatClient",
]
