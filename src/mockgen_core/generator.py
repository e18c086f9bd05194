"""
Mock synthesizer.

Renders TypeData into Go source for a mock struct: one function field per
interface method, the embedded interfaces, and forwarding methods that
panic when their field was never set.

License: MIT
"""

from typing import List

import structlog

from .models import Method, TypeData

logger = structlog.get_logger(__name__)

MOCK_TYPE_PREFIX = "Mock"
FUNC_FIELD_SUFFIX = "Func"
DEFAULT_GENERATOR_NAME = "go-mockgen-tool"

# Receiver names tried in order until one does not clash with a parameter
RECEIVER_CANDIDATES = ("o", "mock")


def mock_type_name(interface_name: str) -> str:
    return f"{MOCK_TYPE_PREFIX}{interface_name}"


def func_field_name(method_name: str) -> str:
    return f"{method_name}{FUNC_FIELD_SUFFIX}"


class MockWriter:
    """
    Renders the Go source of a mock for one interface.

    Attributes:
        interface_name: Name of the mocked interface.
        type_data: Extracted interface data.
        generator_name: Tool name for the generated-code header.

    Example:
        >>> writer = MockWriter("Vehicle", type_data)
        >>> print(writer.render())
    """

    def __init__(
        self,
        interface_name: str,
        type_data: TypeData,
        generator_name: str = DEFAULT_GENERATOR_NAME,
    ) -> None:
        self.interface_name = interface_name
        self.type_data = type_data
        self.generator_name = generator_name
        self.mock_name = mock_type_name(interface_name)

    def render(self) -> str:
        """Return the complete Go source of the mock file."""
        text = (
            self.render_header()
            + self.render_imports()
            + self.render_struct()
            + self.render_methods()
        )
        logger.debug(
            "mock_rendered",
            mock=self.mock_name,
            methods_count=len(self.type_data.methods),
            embeds_count=len(self.type_data.embeds),
            size_bytes=len(text),
        )
        return text

    def render_header(self) -> str:
        return (
            f"// Code generated by {self.generator_name}. DO NOT EDIT.\n\n"
            f"package {self.type_data.package_name}\n\n"
        )

    def render_imports(self) -> str:
        if not self.type_data.imports:
            return ""

        lines = ["import ("]
        for entry in self.type_data.imports:
            if entry.alias:
                lines.append(f'\t{entry.alias} "{entry.path}"')
            else:
                lines.append(f'\t"{entry.path}"')
        lines.append(")")
        return "\n".join(lines) + "\n\n"

    def render_struct(self) -> str:
        methods = self.type_data.methods
        width = max((len(func_field_name(method.name)) for method in methods), default=0)

        lines = [f"type {self.mock_name} struct {{"]
        for method in methods:
            field = func_field_name(method.name)
            lines.append(f"\t{field:<{width}} func{self._signature(method)}")
        for embed in self.type_data.embeds:
            lines.append(f"\t{embed.reference}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def render_methods(self) -> str:
        return "".join(self.render_method(method) for method in self.type_data.methods)

    def render_method(self, method: Method) -> str:
        """Render the forwarding method for one interface method."""
        receiver = self._receiver_name(method)
        field = func_field_name(method.name)

        arguments = []
        for name, param in zip(method.parameter_names(), method.parameters):
            arguments.append(f"{name}..." if param.is_variadic else name)

        call = f"{receiver}.{field}({', '.join(arguments)})"
        if method.returns:
            call = f"return {call}"

        return (
            f"\nfunc ({receiver} *{self.mock_name}) {method.name}{self._signature(method)} {{\n"
            f"\tif {receiver}.{field} == nil {{\n"
            f'\t\tpanic("{self.mock_name}.{field} not defined")\n'
            f"\t}}\n"
            f"\t{call}\n"
            f"}}\n"
        )

    def _signature(self, method: Method) -> str:
        """Parameter list and results, e.g. ``(a int, param1 string) (int, error)``."""
        parameters = ", ".join(
            f"{name} {param.full_type_name}"
            for name, param in zip(method.parameter_names(), method.parameters)
        )
        return f"({parameters}){self._results(method)}"

    def _results(self, method: Method) -> str:
        types: List[str] = [ret.full_type_name for ret in method.returns]
        if not types:
            return ""
        if len(types) == 1:
            return f" {types[0]}"
        return f" ({', '.join(types)})"

    def _receiver_name(self, method: Method) -> str:
        taken = set(method.parameter_names())
        for candidate in RECEIVER_CANDIDATES:
            if candidate not in taken:
                return candidate
        index = 0
        while f"mock{index}" in taken:
            index += 1
        return f"mock{index}"


def write_mock_type(
    interface_name: str, type_data: TypeData, generator_name: str = DEFAULT_GENERATOR_NAME
) -> str:
    """
    Render the mock source for an interface.

    Args:
        interface_name: Name of the mocked interface.
        type_data: Output of extraction.
        generator_name: Tool name for the generated-code header.

    Returns:
        Go source text of the mock file.
    """
    return MockWriter(interface_name, type_data, generator_name).render()


__all__ = [
    "MOCK_TYPE_PREFIX",
    "FUNC_FIELD_SUFFIX",
    "DEFAULT_GENERATOR_NAME",
    "MockWriter",
    "mock_type_name",
    "func_field_name",
    "write_mock_type",
]
