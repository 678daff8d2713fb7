"""
GraphQL Executor
Runs queries and subscriptions against GraphQL modules without a server.
Useful for testing modules separately from each other.
"""

from dataclasses import dataclass, fields
from inspect import isawaitable
from typing import Any, Callable, Dict, Mapping, Optional

from ariadne import make_executable_schema
from graphql import (
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    assert_valid_schema,
    execute,
    execute_sync,
    parse,
    subscribe,
)

from .binding import ResolverMap
from .compiler import GraphqlResources, compile_resources
from .config.logger import LoggerMixin

# camelCase option names accepted for parity with JavaScript GraphQL tooling
OPTION_ALIASES = {
    'contextArg': 'context_arg',
    'contextValue': 'context_value',
    'rootValue': 'root_value',
    'operationName': 'operation_name',
    'variableValues': 'variable_values'
}


@dataclass(frozen=True)
class ExecutionOptions:
    """
    Options for a single run or subscribe call

    Attributes:
        context_arg: Argument passed into every module's ``context`` function
        context_value: Additional context the resolvers need but no module
            provides. Module context wins on duplicate keys.
        root_value: Root value for top level query, mutation and
            subscription resolvers
        operation_name: Name of the operation to run in the query
        variable_values: Variables for the query
    """
    context_arg: Any = None
    context_value: Optional[Mapping[str, Any]] = None
    root_value: Any = None
    operation_name: Optional[str] = None
    variable_values: Optional[Dict[str, Any]] = None

    @classmethod
    def from_value(cls, options=None, **overrides) -> 'ExecutionOptions':
        """
        Normalize options given as None, a mapping or an ExecutionOptions

        Keyword overrides take precedence over ``options``. Unknown option
        names raise TypeError.
        """
        if options is None:
            values = {}
        elif isinstance(options, cls):
            values = {option.name: getattr(options, option.name) for option in fields(cls)}
        elif isinstance(options, Mapping):
            values = {OPTION_ALIASES.get(key, key): value for key, value in options.items()}
        else:
            raise TypeError(
                "Execution options must be a mapping or ExecutionOptions, got %s"
                % type(options).__name__
            )

        values.update({OPTION_ALIASES.get(key, key): value for key, value in overrides.items()})

        unknown = set(values) - {option.name for option in fields(cls)}
        if unknown:
            raise TypeError("Unknown execution options: %s" % ', '.join(sorted(unknown)))

        return cls(**values)


class Executor(LoggerMixin):
    """
    In-process GraphQL executor for a set of modules

    The schema is built once, at construction, and shared by every call.
    """

    def __init__(self, modules):
        """
        Compile modules and build the executable schema

        Args:
            modules: A module, or a list of modules; see ``compile_resources``

        Raises:
            GraphQLError: invalid type definitions
            TypeError: schema fails validation, e.g. no Query type
            ValueError: resolvers for types or fields missing from the schema
        """
        self._resources = compile_resources(modules)
        self._schema = make_executable_schema(
            self._resources.type_defs,
            ResolverMap(self._resources.resolvers)
        )
        assert_valid_schema(self._schema)
        self.log_debug(f"Built executable schema from {len(self._resources.type_defs)} type definitions")

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    @property
    def resources(self) -> GraphqlResources:
        return self._resources

    def get_options(self, query: str, options=None, **overrides) -> Dict[str, Any]:
        """
        Resolve the keyword arguments for graphql-core's execute and subscribe

        Args:
            query: GraphQL document text
            options: ExecutionOptions or a mapping of option names
            **overrides: Individual options, taking precedence over ``options``

        Returns:
            Dict with schema, document, root_value, context_value,
            operation_name and variable_values

        Raises:
            GraphQLSyntaxError: malformed query text
        """
        resolved = ExecutionOptions.from_value(options, **overrides)

        try:
            document = parse(query)
        except GraphQLError as e:
            self.log_debug(f"Failed to parse query: {e.message}")
            raise

        context_value = dict(resolved.context_value or {})
        context_value.update(self._resources.get_context(resolved.context_arg))

        return {
            'schema': self._schema,
            'document': document,
            'root_value': resolved.root_value,
            'context_value': context_value,
            'operation_name': resolved.operation_name,
            'variable_values': resolved.variable_values
        }

    async def run(self, query: str, options=None, **overrides) -> ExecutionResult:
        """
        Execute a query or mutation

        Resolver errors are reported in ``ExecutionResult.errors``, they are
        not raised.

        Args:
            query: The GraphQL query to run
            options: ExecutionOptions or a mapping of option names
            **overrides: Individual options, taking precedence over ``options``

        Returns:
            ExecutionResult
        """
        result = execute(**self.get_options(query, options, **overrides))
        if isawaitable(result):
            result = await result
        return result

    def run_sync(self, query: str, options=None, **overrides) -> ExecutionResult:
        """Execute a query synchronously, fails if a resolver is async"""
        return execute_sync(**self.get_options(query, options, **overrides))

    async def subscribe(
        self,
        query: str,
        options=None,
        callback: Optional[Callable[[ExecutionResult], Any]] = None,
        **overrides
    ) -> None:
        """
        Subscribe and feed every event to ``callback`` until the stream ends

        When graphql-core reports an error instead of a stream (e.g. a
        missing subscription field), ``callback`` receives that single
        result. Coroutine callbacks are awaited before the next event is
        pulled. The stream is closed when iteration stops, including when
        ``callback`` raises.

        Args:
            query: The GraphQL subscription to run
            options: ExecutionOptions or a mapping of option names
            callback: Called with each ExecutionResult, in arrival order
            **overrides: Individual options, taking precedence over ``options``
        """
        stream = subscribe(**self.get_options(query, options, **overrides))
        if isawaitable(stream):
            stream = await stream

        if isinstance(stream, ExecutionResult):
            await _notify(callback, stream)
            return

        try:
            async for result in stream:
                await _notify(callback, result)
        finally:
            aclose = getattr(stream, 'aclose', None)
            if aclose is not None:
                await aclose()


async def _notify(callback, result: ExecutionResult) -> None:
    if callback is None:
        return
    outcome = callback(result)
    if isawaitable(outcome):
        await outcome


def create_executor(modules) -> Executor:
    """
    Create an executor for GraphQL modules

    Example:
        executor = create_executor({
            'schema': 'type Query { hello: String }',
            'resolvers': {'Query': {'hello': lambda obj, info: 'Hello World'}},
        })
        result = await executor.run('query { hello }')

    Args:
        modules: A module, or a list of modules

    Returns:
        Executor
    """
    return Executor(modules)
