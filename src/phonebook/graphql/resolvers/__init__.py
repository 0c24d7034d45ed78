"""Resolver package for the GraphQL schema.

Resolvers operate on the record store and directory client found in the
GraphQL context. Failures the caller can correct are returned as error
kinds from ``phonebook.people.results``; the root types turn them into
GraphQL errors.
"""

# Intentionally empty; functions are defined in sibling modules.
