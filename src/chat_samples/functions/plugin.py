"""Native functions, prompt functions and plugins.

A plugin is a named group of functions that the chat service advertises to
the model as tools. Native functions are plain Python callables marked with
``@kernel_function``; their JSON schema is derived from the signature and
type hints, with parameter descriptions given through ``Annotated``:

    class MathPlugin:
        @kernel_function(description="Check if a number is prime")
        def is_prime(self, number: Annotated[int, "The number to check"]) -> bool:
            ...

Prompt functions wrap a template; each placeholder becomes a required
string parameter.
"""

import inspect
import typing
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, get_args, get_origin

from pydantic import BaseModel, Field, TypeAdapter, create_model

from chat_samples.prompts.loader import PromptConfig
from chat_samples.prompts.template import PromptTemplate
from chat_samples.providers.base import Message, ToolDefinition

if TYPE_CHECKING:
    from chat_samples.chat.service import ChatService

TOOL_NAME_SEPARATOR = "-"


@dataclass(frozen=True)
class FunctionMetadata:
    name: str
    description: str


def kernel_function(
    func: Callable[..., Any] | None = None,
    *,
    name: str | None = None,
    description: str = "",
) -> Any:
    """Mark a function or method as callable by the model.

    Usable bare (``@kernel_function``) or with arguments.
    """

    def decorate(f: Callable[..., Any]) -> Callable[..., Any]:
        f.__kernel_function__ = FunctionMetadata(  # type: ignore[attr-defined]
            name=name or f.__name__,
            description=description or inspect.getdoc(f) or "",
        )
        return f

    if func is not None:
        return decorate(func)
    return decorate


def split_description(annotation: Any) -> tuple[Any, str | None]:
    """Separate an ``Annotated`` string description from the type."""
    if get_origin(annotation) is not Annotated:
        return annotation, None
    inner, *extras = get_args(annotation)
    description = next((extra for extra in extras if isinstance(extra, str)), None)
    others = [extra for extra in extras if not isinstance(extra, str)]
    return (Annotated[(inner, *others)] if others else inner), description


def strip_titles(schema: Any) -> Any:
    """Drop the ``title`` entries pydantic adds to every schema node."""
    if isinstance(schema, list):
        return [strip_titles(item) for item in schema]
    if not isinstance(schema, dict):
        return schema
    stripped: dict[str, Any] = {}
    for key, value in schema.items():
        if key == "title":
            continue
        if key == "properties" and isinstance(value, dict):
            stripped[key] = {name: strip_titles(sub) for name, sub in value.items()}
        else:
            stripped[key] = strip_titles(value)
    return stripped


def json_schema_for(annotation: Any) -> dict[str, Any]:
    """Map a Python type hint to a JSON schema fragment."""
    annotation, description = split_description(annotation)
    schema: dict[str, Any] = strip_titles(TypeAdapter(annotation).json_schema())
    if description:
        schema["description"] = description
    return schema


def arguments_model(func: Callable[..., Any], name: str) -> type[BaseModel]:
    """Build a pydantic model of a callable's parameters.

    Parameters without a type hint are strings; ``Annotated`` strings become
    field descriptions.
    """
    hints = typing.get_type_hints(func, include_extras=True)
    fields: dict[str, Any] = {}
    for param in inspect.signature(func).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        annotation, description = split_description(hints.get(param.name, str))
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[param.name] = (annotation, Field(default, description=description))
    return create_model(f"{name}_arguments", **fields)


class KernelFunction(ABC):
    """A function the chat service can invoke on the model's behalf."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.plugin_name: str | None = None

    @property
    def tool_name(self) -> str:
        if self.plugin_name:
            return f"{self.plugin_name}{TOOL_NAME_SEPARATOR}{self.name}"
        return self.name

    @abstractmethod
    def parameters_schema(self) -> dict[str, Any]:
        """JSON schema of the function's arguments."""
        ...

    @abstractmethod
    def invoke(self, arguments: Mapping[str, Any], service: "ChatService") -> Any:
        """Run the function with the given arguments."""
        ...

    def to_tool_definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.tool_name,
            description=self.description,
            parameters=self.parameters_schema(),
        )


class NativeFunction(KernelFunction):
    """A Python callable exposed as a tool."""

    def __init__(self, func: Callable[..., Any], name: str | None = None, description: str | None = None) -> None:
        metadata: FunctionMetadata | None = getattr(func, "__kernel_function__", None)
        super().__init__(
            name=name or (metadata.name if metadata else func.__name__),
            description=description if description is not None else (metadata.description if metadata else ""),
        )
        self.func = func
        self.arguments_model = arguments_model(func, self.name)

    def parameters_schema(self) -> dict[str, Any]:
        schema = strip_titles(self.arguments_model.model_json_schema())
        parameters = {
            "type": "object",
            "properties": schema.get("properties", {}),
            "required": schema.get("required", []),
        }
        if "$defs" in schema:
            parameters["$defs"] = schema["$defs"]
        return parameters

    def invoke(self, arguments: Mapping[str, Any], service: "ChatService") -> Any:
        """Validate and coerce the arguments, then call the function.

        Raises:
            pydantic.ValidationError: If an argument is missing or has the wrong type.
        """
        validated = self.arguments_model.model_validate(dict(arguments))
        return self.func(**{name: getattr(validated, name) for name in type(validated).model_fields})


class PromptFunction(KernelFunction):
    """A prompt template exposed as a function.

    Invoking it renders the template and sends the result as a single user
    message.
    """

    def __init__(
        self,
        template: str | PromptTemplate,
        name: str,
        description: str = "",
        defaults: Mapping[str, str] | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> None:
        super().__init__(name=name, description=description)
        self.template = template if isinstance(template, PromptTemplate) else PromptTemplate(template)
        self.defaults = dict(defaults or {})
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, config: PromptConfig, name: str | None = None) -> "PromptFunction":
        """Build a prompt function from a declarative prompt document."""
        return cls(
            config.prompt_template,
            name=name or config.name or "prompt",
            description=config.description,
            defaults=config.default_arguments(),
            temperature=config.settings.temperature,
            max_tokens=config.settings.max_tokens,
        )

    def parameters_schema(self) -> dict[str, Any]:
        variables = self.template.variables()
        return {
            "type": "object",
            "properties": {name: {"type": "string"} for name in variables},
            "required": [name for name in variables if name not in self.defaults],
        }

    def render(self, arguments: Mapping[str, Any] | None = None) -> str:
        bound = {**self.defaults, **{key: str(value) for key, value in (arguments or {}).items()}}
        return self.template.render(bound)

    def invoke(self, arguments: Mapping[str, Any], service: "ChatService") -> str:
        response = service.provider.complete(
            [Message.user(self.render(arguments))],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return response.content or ""


class Plugin:
    """A named group of functions."""

    def __init__(self, name: str, functions: Iterable[KernelFunction] = ()) -> None:
        self.name = name
        self.functions: dict[str, KernelFunction] = {}
        for function in functions:
            self.add(function)

    def add(self, function: KernelFunction) -> None:
        function.plugin_name = self.name
        self.functions[function.name] = function

    def __iter__(self) -> typing.Iterator[KernelFunction]:
        return iter(self.functions.values())

    def __len__(self) -> int:
        return len(self.functions)

    @classmethod
    def from_object(cls, obj: object, name: str | None = None) -> "Plugin":
        """Collect the ``@kernel_function`` methods of an object."""
        plugin = cls(name or type(obj).__name__)
        for attr in sorted(dir(type(obj))):
            member = getattr(type(obj), attr, None)
            if callable(member) and hasattr(member, "__kernel_function__"):
                plugin.add(NativeFunction(getattr(obj, attr)))
        return plugin

    @classmethod
    def from_functions(cls, name: str, functions: Iterable[KernelFunction | Callable[..., Any]]) -> "Plugin":
        """Group functions; plain callables are wrapped as native functions."""
        return cls(
            name,
            [f if isinstance(f, KernelFunction) else NativeFunction(f) for f in functions],
        )
