"""
Tool metadata and input-schema generation.

Tools are declared by the caller and only described to the model here; the
adapter never runs them. A tool's name is what the model calls it by, so it is
also what streamed tool calls are checked against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import ToolValidationError

JsonSchema = Dict[str, Any]

_SUPPORTED_TYPES = (str, int, float, bool, list, dict)


def _python_type_to_json(param_type: type) -> str:
    """Map a Python type to a JSON schema type string."""
    type_map = {
        str: "string",
        int: "integer",
        float: "number",
        bool: "boolean",
        list: "array",
        dict: "object",
    }
    return type_map.get(param_type, "string")


@dataclass
class ToolParameter:
    """
    Schema definition for a single tool parameter.

    Attributes:
        name: Parameter name as the model should send it.
        param_type: Python type (str, int, float, bool, list, dict).
        description: Human-readable description shown to the model.
        required: Whether this parameter must be provided (default: True).
        enum: Optional list of allowed string values for enumerated parameters.

    Example:
        >>> param = ToolParameter(
        ...     name="path",
        ...     param_type=str,
        ...     description="File path relative to the root directory",
        ... )
    """

    name: str
    param_type: type
    description: str
    required: bool = True
    enum: Optional[List[str]] = None

    def to_schema(self) -> JsonSchema:
        """Convert the parameter definition to a JSON Schema property."""
        schema: JsonSchema = {
            "type": _python_type_to_json(self.param_type),
            "description": self.description,
        }
        if self.enum:
            schema["enum"] = self.enum
        return schema


class Tool:
    """
    A named capability the model may ask to invoke.

    The input shape comes either from a list of ToolParameter objects or from
    an explicit JSON schema. An explicit schema is forwarded as-is.

    Attributes:
        name: Unique identifier for the tool within a request.
        description: What the tool does, shown to the model.
        parameters: ToolParameter definitions (may be empty).
        schema: Optional explicit JSON schema for the tool input.
    """

    def __init__(
        self,
        name: str,
        description: str,
        parameters: Sequence[ToolParameter] = (),
        *,
        schema: Optional[JsonSchema] = None,
    ):
        self.name = name
        self.description = description
        self.parameters = list(parameters)
        self.schema = schema

        self._validate_tool_definition()

    def _validate_tool_definition(self) -> None:
        """
        Validate the tool definition at construction time to catch errors early.

        Raises:
            ToolValidationError: If the tool definition is invalid
        """
        if not self.name or not self.name.strip():
            raise ToolValidationError(
                tool_name="<unnamed>",
                param_name="name",
                issue="Tool name cannot be empty",
                suggestion="Provide a descriptive name for the tool",
            )

        if not self.description or not self.description.strip():
            raise ToolValidationError(
                tool_name=self.name,
                param_name="description",
                issue="Tool description cannot be empty",
                suggestion="Provide a clear description explaining what the tool does",
            )

        if self.schema is not None and self.parameters:
            raise ToolValidationError(
                tool_name=self.name,
                param_name="schema",
                issue="Both an explicit schema and parameters were given",
                suggestion="Pass either parameters or schema, not both",
            )

        param_names = [p.name for p in self.parameters]
        duplicates = [name for name in param_names if param_names.count(name) > 1]
        if duplicates:
            raise ToolValidationError(
                tool_name=self.name,
                param_name=", ".join(sorted(set(duplicates))),
                issue="Duplicate parameter name(s)",
                suggestion="Each parameter must have a unique name",
            )

        for param in self.parameters:
            if param.param_type not in _SUPPORTED_TYPES:
                type_list = ", ".join(t.__name__ for t in _SUPPORTED_TYPES)
                raise ToolValidationError(
                    tool_name=self.name,
                    param_name=param.name,
                    issue=f"Unsupported parameter type: {param.param_type}",
                    suggestion=f"Use one of: {type_list}",
                )

    def input_schema(self) -> JsonSchema:
        """Return the JSON schema describing this tool's input object."""
        if self.schema is not None:
            return self.schema

        return {
            "type": "object",
            "properties": {param.name: param.to_schema() for param in self.parameters},
            "required": [param.name for param in self.parameters if param.required],
        }

    def __repr__(self) -> str:
        return f"Tool(name={self.name!r})"


__all__ = ["Tool", "ToolParameter", "JsonSchema"]
