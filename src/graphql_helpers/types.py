"""
Typing helpers for GraphQL modules

A GraphQL module bundles a schema fragment, a resolver tree and a context
builder. Resolver trees are nested mappings: the top level is keyed by type
name, the second level by field name (or by a special key such as
``__resolve_type``). Anything that is not a mapping is an opaque leaf.
"""

from typing import Any, Callable, Mapping, Optional, TypedDict, Union


# A resolver function, a scalar implementation, an enum value, ...
ResolverLeaf = Any

ResolverTree = Mapping[str, Union['ResolverTree', ResolverLeaf]]

ContextBuilder = Callable[[Any], Optional[Mapping[str, Any]]]


class FieldSpec(TypedDict, total=False):
    """Field level resolver spec, used instead of a bare function"""
    resolve: Callable[..., Any]
    subscribe: Callable[..., Any]


class ModuleDescriptor(TypedDict, total=False):
    """One GraphQL module. Every key is optional."""
    schema: str
    resolvers: ResolverTree
    context: ContextBuilder
