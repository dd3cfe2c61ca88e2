"""GraphQL syntax tree, literal values, query errors, directive protocols and sample resolvers."""

__version__ = "0.1.0"