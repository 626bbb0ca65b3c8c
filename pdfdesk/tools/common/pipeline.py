"""Plugin registry and orchestration helpers for pdfdesk tools."""

from __future__ import annotations

from typing import Dict, Iterable

from .interfaces import BaseTool, ConversionContext


class ToolRegistry:
    """Registry storing available pdfdesk tools under their names and aliases."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, name: str, tool_class: type[BaseTool], aliases: Iterable[str] = ()) -> None:
        if name in self._tools or name in self._aliases:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class
        for alias in aliases:
            if alias in self._tools or alias in self._aliases:
                raise ValueError(f"Tool alias '{alias}' is already registered")
            self._aliases[alias] = name

    def resolve(self, name: str) -> str:
        """Return the canonical tool name for *name* or one of its aliases."""

        canonical = self._aliases.get(name, name)
        if canonical not in self._tools:
            raise KeyError(f"Tool '{name}' is not registered")
        return canonical

    def create(self, name: str, context: ConversionContext) -> BaseTool:
        tool_class = self._tools[self.resolve(name)]
        return tool_class(context)

    def names(self) -> Iterable[str]:
        return sorted(self._tools.keys())

    def get(self, name: str) -> type[BaseTool] | None:
        return self._tools.get(self._aliases.get(name, name))


registry = ToolRegistry()


def register_tool(name: str, *, aliases: Iterable[str] = ()):
    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls, aliases)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool", "ConversionContext", "BaseTool"]
