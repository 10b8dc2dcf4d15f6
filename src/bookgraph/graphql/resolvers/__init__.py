"""Resolver package for GraphQL schema.

One module per entity. Each holds the root query resolvers, the field
resolvers for relation fields, and the mutation resolvers for that entity.
"""
