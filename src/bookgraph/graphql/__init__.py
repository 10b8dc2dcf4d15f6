"""GraphQL layer: schema, types and resolvers."""
