"""Pydantic models for interface extraction results.

TypeData is the only value passed from extraction to mock synthesis.
All models are frozen and hold tuples, so a value is final once built.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

UNNAMED_PARAMETER_PREFIX = "param"


class TypeRef(BaseModel):
    """One resolved parameter or result type.

    ``qualifier`` is the package prefix for types from another package
    (``io`` for ``io.Reader``); ``base_name`` is the rest of the type text.
    Inline function types and composite types keep their full text in
    ``base_name`` and have no qualifier.
    """

    model_config = ConfigDict(frozen=True)

    base_name: str = Field(..., min_length=1, description="Type name without qualifier")
    qualifier: Optional[str] = Field(
        default=None, description="Package qualifier (e.g. 'io'), None for local types"
    )
    declared_name: Optional[str] = Field(
        default=None, description="Declared parameter/result name, None when unnamed"
    )

    @property
    def full_type_name(self) -> str:
        if self.qualifier:
            return f"{self.qualifier}.{self.base_name}"
        return self.base_name

    @property
    def is_variadic(self) -> bool:
        return self.base_name.startswith("...")


class Method(BaseModel):
    """An interface method with ordered parameters and results."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Method name")
    parameters: Tuple[TypeRef, ...] = Field(default=(), description="Parameters in call order")
    returns: Tuple[TypeRef, ...] = Field(default=(), description="Results in return order")

    def parameter_names(self) -> List[str]:
        """Names used to declare and forward parameters.

        Unnamed and blank (``_``) parameters are given positional names
        (``param0``, ``param1``, ...) so they can be forwarded. A positional
        name already declared by another parameter gets a numeric suffix
        (``param0_1``).
        """
        declared = {
            param.declared_name
            for param in self.parameters
            if param.declared_name and param.declared_name != "_"
        }

        names = []
        for index, param in enumerate(self.parameters):
            name = param.declared_name
            if not name or name == "_":
                name = f"{UNNAMED_PARAMETER_PREFIX}{index}"
                suffix = 1
                while name in declared:
                    name = f"{UNNAMED_PARAMETER_PREFIX}{index}_{suffix}"
                    suffix += 1
            names.append(name)
        return names


class EmbeddedRef(BaseModel):
    """An interface embedded in the mocked interface, forwarded verbatim."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Embedded interface name")
    qualifier: Optional[str] = Field(
        default=None, description="Package qualifier, None for same-package interfaces"
    )

    @property
    def reference(self) -> str:
        if self.qualifier:
            return f"{self.qualifier}.{self.name}"
        return self.name


class ImportEntry(BaseModel):
    """A single import spec of the source file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Import path without quotes")
    alias: Optional[str] = Field(default=None, description="Explicit package name, if any")

    @property
    def short_name(self) -> str:
        """Name the package is referenced by: the alias, else the last path segment."""
        if self.alias:
            return self.alias
        return self.path.rsplit("/", 1)[-1]


class TypeData(BaseModel):
    """Everything needed to render a mock for one interface."""

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(..., min_length=1, description="Package of the source file")
    imports: Tuple[ImportEntry, ...] = Field(
        default=(), description="Imports referenced by the collected types, in file order"
    )
    methods: Tuple[Method, ...] = Field(default=(), description="Methods in declaration order")
    embeds: Tuple[EmbeddedRef, ...] = Field(
        default=(), description="Embedded interfaces in declaration order"
    )


__all__ = [
    "TypeRef",
    "Method",
    "EmbeddedRef",
    "ImportEntry",
    "TypeData",
]
