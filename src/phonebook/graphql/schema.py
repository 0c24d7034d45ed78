"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..directory.client import DirectoryClient
from ..logging import get_logger
from ..people.store import PersonStore
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Resolves every type reference and runs an introspection query so that a
    broken schema fails the server at boot rather than on the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def build_context(
    store: PersonStore,
    directory: DirectoryClient,
    request: Request | None = None,
) -> dict[str, Any]:
    """Build the context handed to every resolver."""
    return {
        "request": request,
        "store": store,
        "directory": directory,
    }


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The record store and directory client are read from ``app.state`` on each
    request, so the router itself holds no people data.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        state = request.app.state
        return build_context(state.store, state.directory, request)

    return GraphQLRouter(
        schema,
        path=GRAPHQL_PATH,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
