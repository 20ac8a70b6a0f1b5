"""
Map domain errors onto GraphQL errors with a machine-readable code
"""
from graphql import GraphQLError

from app.api.errors import status_for
from app.domain.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    WishlistItemNotFoundError,
)


def to_graphql_error(exc: DomainError) -> GraphQLError:
    if isinstance(exc, NotFoundError):
        code = "NOT_FOUND"
    elif isinstance(exc, ConflictError):
        code = "CONFLICT"
    else:
        code = "BAD_REQUEST"

    extensions = {"code": code, "status": status_for(exc)}
    if isinstance(exc, WishlistItemNotFoundError):
        extensions["missingItemIds"] = exc.item_ids
    return GraphQLError(str(exc), original_error=exc, extensions=extensions)
