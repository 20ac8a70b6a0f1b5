"""
GraphQL Schema
Combines wishlist queries and mutations; field names are exposed in camelCase
"""
import strawberry
from strawberry.schema.config import StrawberryConfig
from app.graphql.queries import Query
from app.graphql.mutations import Mutation


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=True),
)
