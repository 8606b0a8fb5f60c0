"""Template-facing operations over the output targets of a generation pass."""
from __future__ import annotations

from . import filters
from .filters import Content
from .keys import TargetKey
from .registry import TargetRegistry
from .reporting import ERROR, Reporter

SERVICE_REGISTRY_PREFIX = "META-INF/services/"


def _render(body: Content | None, caller: filters.Renderer | None) -> str:
    if body is None:
        body = caller
    if body is None:
        raise ValueError("A body or caller is required.")
    if callable(body):
        return str(body())
    return str(body)


class Output:
    """Operations templates invoke to write source files and service files.

    Every operation returns an empty string so it can be called from a
    template without adding to the surrounding text. Jinja2 ``{% call %}``
    blocks pass their body as ``caller``.
    """

    def __init__(self, registry: TargetRegistry) -> None:
        self.registry = registry

    @property
    def reporter(self) -> Reporter:
        return self.registry.reporter

    def source(
        self,
        namespace: str,
        simple_name: str,
        body: Content | None = None,
        *,
        caller: filters.Renderer | None = None,
    ) -> str:
        source_file = self.registry.source_file(str(namespace), str(simple_name))
        # The body always renders: nested service contributions count even on collision.
        text = _render(body, caller)
        if source_file.committed:
            self.reporter.report(
                ERROR,
                "Generated source file name collision. "
                f"{source_file.key} was already generated in this pass",
            )
            return ""
        source_file.append(text)
        source_file.complete()
        return ""

    def service(
        self,
        interface_name: str,
        body: Content | None = None,
        *,
        caller: filters.Renderer | None = None,
    ) -> str:
        key = TargetKey("", SERVICE_REGISTRY_PREFIX + str(interface_name))
        service_file = self.registry.service_file(key.namespace, key.relative_name)
        service_file.append(_render(body, caller))
        return ""

    def error(self, message: object) -> str:
        self.reporter.report(ERROR, str(message).strip())
        return ""

    def system(self, message: object) -> str:
        print(str(message).strip())
        return ""

    def trim(self, param: Content | None = None, *, caller: filters.Renderer | None = None) -> str:
        return filters.trim(param if param is not None else caller)

    def collapsible(self, param: Content | None = None, *, caller: filters.Renderer | None = None) -> str:
        return filters.collapsible(param if param is not None else caller)

    def lines_shortable(
        self,
        param: Content | None = None,
        indent: int | str = 0,
        *,
        caller: filters.Renderer | None = None,
    ) -> str:
        return filters.lines_shortable(param if param is not None else caller, indent)
