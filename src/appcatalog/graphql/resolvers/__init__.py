"""Resolver package for GraphQL schema.

Each module maps the query and relational fields of one type onto a single
service-layer call and converts the returned records into GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
