"""Base class for the repository tools.

Every tool has a name, a description, a pydantic argument model and an async
handler returning exactly one content block. The handler is a closed
boundary: failures come back as {"error": ...} payloads, never as raised
exceptions, so a calling agent can branch on content alone.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ValidationError

from ..logging_config import get_logger
from ..models import ContentBlock, RepositoryFile
from .errors import ArgumentValidationError, RepositoryToolError
from .options import ToolOptions
from .results import error_result, text_result

logger = get_logger(__name__)

_MISSING_ERRORS = {"missing", "string_too_short"}


def _json_type(prop: dict) -> str:
    if "type" in prop:
        return prop["type"]
    for option in prop.get("anyOf", []):
        if option.get("type") not in (None, "null"):
            return option["type"]
    return "string"


class RepositoryTool(ABC):
    """A named tool over an immutable file snapshot."""

    name: ClassVar[str]
    args_schema: ClassVar[type[BaseModel]]
    # Field name -> message when the argument is absent or empty
    required_messages: ClassVar[dict[str, str]] = {}

    def __init__(self, files: tuple[RepositoryFile, ...], options: ToolOptions):
        self._files = files
        self._options = options

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description shown to the model."""

    @property
    def parameters(self) -> dict[str, dict[str, Any]]:
        """Parameter name -> {type, description, required}."""
        schema = self.args_schema.model_json_schema()
        required = set(schema.get("required", []))
        return {
            name: {
                "type": _json_type(prop),
                "description": prop.get("description", ""),
                "required": name in required,
            }
            for name, prop in schema.get("properties", {}).items()
        }

    def to_dict(self) -> dict:
        """Tool definition without the handler, e.g. for a tool-calling API."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }

    @abstractmethod
    async def run(self, params: BaseModel) -> str:
        """Execute the tool with validated arguments and return the text.

        Raises:
            RepositoryToolError: reported to the caller as an error payload
        """

    def _validation_message(self, exc: ValidationError) -> str:
        messages = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error.get("loc") else None
            if field and error.get("type") in _MISSING_ERRORS:
                messages.append(self.required_messages.get(field, f"{field} is required"))
            elif field:
                messages.append(f"Invalid {field}: {error.get('msg')}")
            else:
                messages.append(str(error.get("msg")))
        return "; ".join(messages)

    def parse_args(self, args: Mapping[str, Any] | None) -> BaseModel:
        try:
            return self.args_schema.model_validate(dict(args or {}))
        except ValidationError as e:
            raise ArgumentValidationError(self._validation_message(e)) from e

    async def handler(self, args: Mapping[str, Any] | None = None) -> list[ContentBlock]:
        """Run the tool; always returns a single text block."""
        try:
            params = self.parse_args(args)
            text = await self.run(params)
        except RepositoryToolError as e:
            logger.debug("%s rejected call: %s", self.name, e.message)
            return error_result(e.message)
        except Exception as e:
            logger.exception("%s failed", self.name)
            return error_result(f"{self.name} failed: {e}")
        return text_result(text)

    def as_langchain_tool(self) -> StructuredTool:
        """Adapt this tool for LangChain agents (async only).

        Argument errors caught by LangChain's own schema validation are
        rendered as the same {"error": ...} payload.
        """

        async def _invoke(**kwargs: Any) -> str:
            blocks = await self.handler(kwargs)
            return blocks[0].text

        def _on_validation_error(exc: ValidationError) -> str:
            return error_result(self._validation_message(exc))[0].text

        return StructuredTool.from_function(
            coroutine=_invoke,
            name=self.name,
            description=self.description,
            args_schema=self.args_schema,
            handle_validation_error=_on_validation_error,
        )
