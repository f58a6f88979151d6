"""Chat completion service with automatic tool invocation.

The service owns a provider and a set of plugins. ``get_response`` sends a
history to the model; when the model asks for tools, the service runs them,
feeds the results back and asks again until it gets a plain answer.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from chat_samples.chat.history import ChatHistory
from chat_samples.core.errors import ToolInvocationError
from chat_samples.core.logging import get_logger
from chat_samples.functions.plugin import KernelFunction, Plugin, PromptFunction
from chat_samples.providers.base import BaseChatProvider, Message, Role, ToolCall, ToolDefinition

logger = get_logger(__name__)

DEFAULT_MAX_TOOL_ROUNDS = 8


class ChatService:
    """Sends conversations to a provider and runs the tools it requests."""

    def __init__(
        self,
        provider: BaseChatProvider,
        plugins: Iterable[Plugin] = (),
        max_tool_rounds: int = DEFAULT_MAX_TOOL_ROUNDS,
    ) -> None:
        self.provider = provider
        self.max_tool_rounds = max_tool_rounds
        self._functions: dict[str, KernelFunction] = {}
        for plugin in plugins:
            self.add_plugin(plugin)

    def add_plugin(self, plugin: Plugin) -> None:
        for function in plugin:
            self._functions[function.tool_name] = function

    @property
    def tools(self) -> list[ToolDefinition]:
        return [function.to_tool_definition() for function in self._functions.values()]

    def find_function(self, tool_name: str) -> KernelFunction | None:
        return self._functions.get(tool_name)

    def execute_tool(self, tool_call: ToolCall) -> str:
        """Run one requested tool and return its result as a string.

        Failures are reported back to the model as a JSON error object.
        """
        function = self.find_function(tool_call.name)
        if function is None:
            return json.dumps({"error": f"Unknown tool: {tool_call.name}"})

        try:
            arguments = json.loads(tool_call.arguments) if tool_call.arguments else {}
        except json.JSONDecodeError as e:
            return json.dumps({"error": f"Invalid arguments: {e}"})
        if not isinstance(arguments, dict):
            return json.dumps({"error": "Arguments must be a JSON object"})

        logger.info("executing_tool", tool=tool_call.name, arguments=arguments)
        try:
            result = function.invoke(arguments, self)
        except Exception as e:
            logger.warning("tool_failed", tool=tool_call.name, error=str(e))
            return json.dumps({"error": str(e)})

        if isinstance(result, str):
            return result
        return json.dumps(result, default=str)

    def get_response(
        self,
        history: ChatHistory,
        auto_invoke_tools: bool = True,
        json_mode: bool = False,
        **kwargs: Any,
    ) -> str:
        """Get the assistant's reply to a conversation.

        Tool exchanges are kept in a working copy; ``history`` is not
        modified, so the caller decides whether to record the reply.

        Args:
            history: The conversation so far.
            auto_invoke_tools: Offer registered tools and run what is requested.
            json_mode: Ask for a JSON object response.
            **kwargs: Extra completion parameters (temperature, max_tokens...).

        Returns:
            The assistant's final text, or "" if the model returned none.

        Raises:
            ToolInvocationError: If the model keeps calling tools past the
                round limit.
        """
        messages = list(history.messages)
        tools = self.tools if auto_invoke_tools and self._functions else None

        response = self.provider.complete(messages, tools=tools, json_mode=json_mode, **kwargs)
        rounds = 0
        while response.tool_calls:
            rounds += 1
            if rounds > self.max_tool_rounds:
                raise ToolInvocationError(
                    f"Model requested tools more than {self.max_tool_rounds} times",
                    {"last_tools": [tc.name for tc in response.tool_calls]},
                )
            logger.info("tool_calls_received", count=len(response.tool_calls), round=rounds)

            messages.append(
                Message(
                    role=Role.ASSISTANT,
                    content=response.content or "",
                    tool_calls=[tc.to_openai_format() for tc in response.tool_calls],
                )
            )
            for tool_call in response.tool_calls:
                messages.append(Message.tool(content=self.execute_tool(tool_call), tool_call_id=tool_call.id))

            response = self.provider.complete(messages, tools=tools, json_mode=json_mode, **kwargs)

        return response.content or ""

    def invoke(self, function: KernelFunction, arguments: Mapping[str, Any] | None = None) -> str:
        """Invoke a function directly and return its result as text."""
        result = function.invoke(arguments or {}, self)
        if isinstance(result, str):
            return result
        return json.dumps(result, default=str)

    def invoke_prompt(self, template: str, arguments: Mapping[str, Any] | None = None) -> str:
        """Render an inline template and return the completion."""
        return self.invoke(PromptFunction(template, name="inline"), arguments)
