"""
GraphQL Resource Compiler
Combines GraphQL modules into type definitions, resolvers and a context getter
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Dict, List, Tuple

from .config.logger import get_logger
from .merge import arrify, deep_merge_right, juxt, merge_all, pluck, reject_none
from .types import ContextBuilder

logger = get_logger(__name__)


@dataclass(frozen=True)
class GraphqlResources:
    """
    Compiled GraphQL modules

    Attributes:
        type_defs: Schema fragments, in module order, to be passed to
            ``make_executable_schema``
        resolvers: Deep merged resolver tree; a module giving a non-mapping
            value replaces everything merged before it
        context_builders: Every module ``context`` function, in module order
    """
    type_defs: List[str]
    resolvers: Any
    context_builders: Tuple[ContextBuilder, ...] = field(default=())

    def get_context(self, context_arg: Any = None) -> Dict[str, Any]:
        """
        Build the request context from every module

        Each context builder is called with ``context_arg`` (the request, in
        a web handler) and the returned mappings are shallow merged, later
        modules winning on duplicate keys. Exceptions from a builder are not
        caught.

        Args:
            context_arg: Value handed to every module ``context`` function

        Returns:
            A new dict, to be used as the resolvers' context value
        """
        return merge_all(juxt(self.context_builders)(context_arg))


def compile_resources(modules) -> GraphqlResources:
    """
    Combine GraphQL modules into a single set of resources

    Each module may define a ``schema`` fragment, a ``resolvers`` tree and a
    ``context`` function; all three are optional. Modules are read as
    mappings, or through attributes for any other object.

    Example:
        modules = [
            {
                'schema': 'type Query { health: String }',
                'resolvers': {'Query': {'health': lambda obj, info: 'ok'}},
            },
            {
                'schema': 'extend type Query { health2: String }',
                'resolvers': {
                    'Query': {'health2': lambda obj, info: info.context['new_health']}
                },
                'context': lambda request: {'new_health': 'A-O-K'},
            },
        ]
        resources = compile_resources(modules)
        schema = make_executable_schema(
            resources.type_defs, ResolverMap(resources.resolvers)
        )

    Args:
        modules: A module, or a list of modules

    Returns:
        GraphqlResources
    """
    modules = arrify(modules)

    type_defs = reject_none(pluck('schema', modules))
    resolvers = reduce(deep_merge_right, reject_none(pluck('resolvers', modules)), {})
    context_builders = tuple(reject_none(pluck('context', modules)))

    logger.debug(
        f"Compiled {len(modules)} GraphQL modules: {len(type_defs)} type definitions, "
        f"{len(context_builders)} context builders"
    )

    return GraphqlResources(
        type_defs=type_defs,
        resolvers=resolvers,
        context_builders=context_builders
    )


compile_graphql_resources = compile_resources
