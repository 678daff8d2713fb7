"""
graphql-helpers
Compose modular GraphQL schemas, resolvers and context builders, and run
them in-process for testing
"""

from .binding import ResolverMap
from .config import configure_package_logger
from .compiler import GraphqlResources, compile_graphql_resources, compile_resources
from .executor import ExecutionOptions, Executor, create_executor
from .merge import deep_merge_right, merge_all
from .types import ContextBuilder, FieldSpec, ModuleDescriptor, ResolverTree

configure_package_logger()

__version__ = '0.2.0'

__all__ = [
    'ResolverMap',
    'configure_package_logger',
    'GraphqlResources',
    'compile_graphql_resources',
    'compile_resources',
    'ExecutionOptions',
    'Executor',
    'create_executor',
    'deep_merge_right',
    'merge_all',
    'ContextBuilder',
    'FieldSpec',
    'ModuleDescriptor',
    'ResolverTree'
]
