"""
Resolver Binding
Turns a merged resolver tree into ariadne bindables and applies them to a schema
"""

from typing import Any, List, Mapping

from ariadne import EnumType, InterfaceType, ObjectType, ScalarType, SubscriptionType, UnionType
from ariadne.types import SchemaBindable
from graphql import (
    GraphQLEnumType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
)

from .config.logger import LoggerMixin
from .types import ResolverTree

RESOLVE_TYPE_KEY = '__resolve_type'
FIELD_SPEC_KEYS = ('resolve', 'subscribe')

# resolver tree key -> ariadne ScalarType keyword
SCALAR_FUNCTIONS = {
    'serialize': 'serializer',
    'parse_value': 'value_parser',
    'parse_literal': 'literal_parser'
}


class ResolverMap(SchemaBindable, LoggerMixin):
    """
    Bindable resolver tree

    Top level keys are type names. Each entry becomes the matching ariadne
    bindable for the kind of type the schema declares:

    - object types: ``field -> function`` or
      ``field -> {'resolve': ..., 'subscribe': ...}`` (ObjectType, or
      SubscriptionType for the ``Subscription`` type)
    - interface types: fields as above plus ``__resolve_type`` (InterfaceType)
    - union types: ``{'__resolve_type': function}`` (UnionType)
    - enum types: ``{'VALUE_NAME': python_value}`` (EnumType)
    - scalar types: ``{'serialize': ..., 'parse_value': ..., 'parse_literal': ...}``
      (ScalarType)

    Any ariadne bindable given as a type's value is used as-is.
    """

    def __init__(self, resolvers: ResolverTree):
        self.resolvers = resolvers

    def bind_to_schema(self, schema: GraphQLSchema) -> None:
        for bindable in self.get_bindables(schema):
            bindable.bind_to_schema(schema)

    def get_bindables(self, schema: GraphQLSchema) -> List[SchemaBindable]:
        """
        Build one ariadne bindable per type in the resolver tree

        Raises:
            ValueError: unknown types, fields, enum values or scalar
                functions, and values of the wrong shape
        """
        if not isinstance(self.resolvers, Mapping):
            raise ValueError(
                "Resolvers must be a mapping of type names, got %r" % (self.resolvers,)
            )

        bindables = []

        for type_name, type_resolvers in self.resolvers.items():
            graphql_type = schema.type_map.get(type_name)
            if graphql_type is None:
                raise ValueError("Type %s is not defined in the schema" % type_name)

            if isinstance(type_resolvers, SchemaBindable):
                bindables.append(type_resolvers)
            elif not isinstance(type_resolvers, Mapping):
                raise ValueError(
                    "Resolvers for type %s must be a mapping, got %r" % (type_name, type_resolvers)
                )
            elif isinstance(graphql_type, GraphQLScalarType):
                bindables.append(self.scalar_type(graphql_type, type_resolvers))
            elif isinstance(graphql_type, (GraphQLObjectType, GraphQLInterfaceType)):
                bindables.append(self.object_type(graphql_type, type_resolvers))
            elif isinstance(graphql_type, GraphQLUnionType):
                bindables.append(self.union_type(graphql_type, type_resolvers))
            elif isinstance(graphql_type, GraphQLEnumType):
                bindables.append(self.enum_type(graphql_type, type_resolvers))
            else:
                raise ValueError(
                    "Resolvers can't be bound to %s type %s"
                    % (type(graphql_type).__name__, type_name)
                )

            self.log_debug(f"Prepared resolvers for type {type_name}")

        return bindables

    def object_type(self, graphql_type: GraphQLNamedType, field_resolvers: Mapping[str, Any]) -> ObjectType:
        if isinstance(graphql_type, GraphQLInterfaceType):
            bindable = InterfaceType(graphql_type.name, field_resolvers.get(RESOLVE_TYPE_KEY))
        elif graphql_type.name == 'Subscription':
            bindable = SubscriptionType()
        else:
            bindable = ObjectType(graphql_type.name)

        for field_name, resolver in field_resolvers.items():
            if field_name == RESOLVE_TYPE_KEY and isinstance(bindable, InterfaceType):
                continue
            if field_name not in graphql_type.fields:
                raise ValueError(
                    "Field %s is not defined on type %s" % (field_name, graphql_type.name)
                )

            if isinstance(resolver, Mapping):
                unknown = set(resolver) - set(FIELD_SPEC_KEYS)
                if unknown:
                    raise ValueError(
                        "Unknown field spec keys for %s.%s: %s"
                        % (graphql_type.name, field_name, ', '.join(sorted(unknown)))
                    )
                if 'subscribe' in resolver:
                    if not isinstance(bindable, SubscriptionType):
                        raise ValueError(
                            "Subscription sources can only be bound to the Subscription type, "
                            "got %s.%s" % (graphql_type.name, field_name)
                        )
                    bindable.set_source(field_name, resolver['subscribe'])
                if 'resolve' in resolver:
                    bindable.set_field(field_name, resolver['resolve'])
            elif callable(resolver):
                bindable.set_field(field_name, resolver)
            else:
                raise ValueError(
                    "Resolver for %s.%s must be callable or a field spec"
                    % (graphql_type.name, field_name)
                )

        return bindable

    def union_type(self, graphql_type: GraphQLUnionType, resolvers: Mapping[str, Any]) -> UnionType:
        unknown = set(resolvers) - {RESOLVE_TYPE_KEY}
        if unknown:
            raise ValueError(
                "Union %s only accepts %s, got %s"
                % (graphql_type.name, RESOLVE_TYPE_KEY, ', '.join(sorted(unknown)))
            )
        return UnionType(graphql_type.name, resolvers.get(RESOLVE_TYPE_KEY))

    def enum_type(self, graphql_type: GraphQLEnumType, values: Mapping[str, Any]) -> EnumType:
        for name in values:
            if name not in graphql_type.values:
                raise ValueError("Value %s is not defined on enum %s" % (name, graphql_type.name))
        return EnumType(graphql_type.name, dict(values))

    def scalar_type(self, graphql_type: GraphQLScalarType, functions: Mapping[str, Any]) -> ScalarType:
        unknown = set(functions) - set(SCALAR_FUNCTIONS)
        if unknown:
            raise ValueError(
                "Unknown scalar functions for %s: %s"
                % (graphql_type.name, ', '.join(sorted(unknown)))
            )
        return ScalarType(
            graphql_type.name,
            **{SCALAR_FUNCTIONS[name]: function for name, function in functions.items()}
        )
