"""
Tool Registry — name → (schema, executor), built once, read-only afterwards.

  register(name, executor, input_schema=..., description=...)   — startup only
  freeze()                                                      — no more writes
  dispatch(name, args)                                          — validate, default-fill, execute

Both front ends receive the same frozen instance; neither keeps its own copy of
the schemas, so defaults and required fields cannot drift between them.
"""

import copy
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, List, Mapping, Optional

from .errors import ExecutionError, NotFoundError, ShopifyMCPError
from .logger import get_logger
from .schema import validate_arguments

log = get_logger("registry")

Executor = Callable[[Dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolEntry:
    """One registered tool. Immutable."""

    name: str
    executor: Executor
    input_schema: Mapping[str, Any]
    description: str = ""

    def summary(self) -> str:
        """One-line description, generated when the tool declares none."""
        if self.description.strip():
            return self.description.strip().splitlines()[0]
        return f"Shopify {self.name} tool"


class ToolRegistry:
    """Registry of tool entries keyed by tool name."""

    def __init__(self):
        self._entries: Dict[str, ToolEntry] = {}
        self._frozen = False

    # ── registration ─────────────────────────────────────────────

    def register(
        self,
        name: str,
        executor: Executor,
        *,
        input_schema: Optional[Mapping[str, Any]] = None,
        description: str = "",
    ) -> ToolEntry:
        if self._frozen:
            raise RuntimeError(f"Registry is frozen; cannot register '{name}'")
        if name in self._entries:
            raise ValueError(f"Tool '{name}' is already registered")

        if not input_schema:
            input_schema = {"type": "object", "properties": {}}

        entry = ToolEntry(
            name=name,
            executor=executor,
            input_schema=copy.deepcopy(dict(input_schema)),
            description=description,
        )
        self._entries[name] = entry
        return entry

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        log.info(f"Registry frozen with {len(self._entries)} tools: {self.names()}")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── lookup ───────────────────────────────────────────────────

    def get(self, name: object) -> Optional[ToolEntry]:
        # Names arrive straight from request bodies and may not be hashable
        if not isinstance(name, str):
            return None
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def entries(self) -> List[ToolEntry]:
        return list(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ToolEntry]:
        return iter(self.entries())

    # ── dispatch ─────────────────────────────────────────────────

    async def dispatch(self, name: Any, args: Any = None) -> Any:
        """
        Validate ``args`` against the tool's schema and run its executor.

        Raises NotFoundError for unknown names, ValidationError for rejected
        arguments, and ExecutionError wrapping any executor failure.
        """
        entry = self.get(name)
        if entry is None:
            raise NotFoundError(f"Tool '{name}' not found")

        arguments = validate_arguments(entry.input_schema, args)

        try:
            return await entry.executor(arguments)
        except ShopifyMCPError:
            raise
        except Exception as exc:
            log.error(f"Tool {name} failed: {exc}", exc_info=True)
            raise ExecutionError(str(exc) or "Tool execution failed", cause=exc) from exc


def build_registry(client, tools: Optional[Iterable] = None) -> ToolRegistry:
    """
    Initialize every Tool Unit with the shared GraphQL client, register it,
    and return the frozen registry.
    """
    if tools is None:
        from .tools import default_tools
        tools = default_tools()

    registry = ToolRegistry()
    for tool in tools:
        tool.initialize(client)
        registry.register(
            tool.name,
            tool.execute,
            input_schema=tool.input_schema,
            description=tool.description,
        )
    return registry.freeze()
