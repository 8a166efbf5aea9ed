"""Runtime settings for the tool orchestrator."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_ENV_PREFIX = "TOOL_ORCHESTRATOR_"


class OrchestratorSettings(BaseModel):
    """
    Tunables shared by the executor, the call extractor and the stream merger.

    Attributes:
        tool_error_message: Generic message surfaced to the caller when a tool fails.
            Internal error detail is only logged.
        parse_error_message: Message of the status update emitted for a malformed tool-call block.
        merge_buffer_size: Maximum number of unread events buffered by the stream merger.
        log_level: Level applied by ``setup_logging`` when the application opts in.
    """

    tool_error_message: str = Field(default="Error occurred")
    parse_error_message: str = Field(default="Error while parsing tool calls, please retry")
    merge_buffer_size: int = Field(default=32, ge=1)
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX, env_file: Optional[str | Path] = None) -> "OrchestratorSettings":
        """Build settings from environment variables.

        A ``.env`` file is loaded first (without overriding variables that are already set),
        then every field is looked up as ``<prefix><FIELD_NAME>``.

        Args:
            prefix: Prefix of the environment variables.
            env_file: Optional explicit path to a ``.env`` file.

        Returns:
            The validated settings.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()

        values: Dict[str, Any] = {}
        for field_name in cls.model_fields:
            raw = os.getenv(f"{prefix}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw

        logger.debug("Loaded orchestrator settings from environment: %s", sorted(values))
        return cls.model_validate(values)
