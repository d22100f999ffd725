"""Strongly typed identifiers for blog entities.

Identifiers are generated by the database (integer sequences). Using NewType
prevents mixing up ids of different entities.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
TagId = NewType("TagId", int)
ReviewId = NewType("ReviewId", int)
