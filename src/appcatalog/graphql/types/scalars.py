"""
Custom GraphQL scalars
"""

from typing import NewType

import strawberry

# Epoch-millisecond timestamps and uptimes overflow GraphQL's 32-bit Int.
BigInt = strawberry.scalar(
    NewType("BigInt", int),
    serialize=int,
    parse_value=int,
    description="64-bit signed integer, serialized as a JSON number.",
)
