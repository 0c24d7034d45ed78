"""
Translation of people error kinds into GraphQL errors
"""

from graphql import GraphQLError
from pydantic import ValidationError

from ..people.results import PersonError

BAD_USER_INPUT = "BAD_USER_INPUT"
UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"


def person_error(error: PersonError) -> GraphQLError:
    """Build a user-facing error that echoes the offending name."""
    return GraphQLError(
        error.message,
        extensions={"code": BAD_USER_INPUT, "invalidArgs": error.name},
    )


def invalid_input_error(exc: ValidationError) -> GraphQLError:
    """Build a user-facing error listing the arguments that failed validation."""
    invalid_args = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
    return GraphQLError(
        f"Invalid input: {', '.join(invalid_args)}",
        extensions={"code": BAD_USER_INPUT, "invalidArgs": invalid_args},
    )


def upstream_error() -> GraphQLError:
    """Build a server-side error for an unreachable person directory.

    The cause is logged by the resolver and not exposed to clients.
    """
    return GraphQLError(
        "Person directory is unavailable",
        extensions={"code": UPSTREAM_UNAVAILABLE},
    )
