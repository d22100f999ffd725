"""Threaded comment reconstruction.

Comments are stored flat with a parent reference. The tree is rebuilt in
one pass over a parent -> children index.

Rendering is capped at ``max_depth`` levels (top level is depth 0). A
comment that would sit deeper is shown at the last level, right after
its nearest ancestor on that level, in reply order. Its
``parent_comment_id`` is left untouched.

Comments whose parent is not in the input (for example because the parent
was deleted) are left out of the tree together with their replies.
"""

from collections import defaultdict
from typing import Iterable, Optional

from blog.domain.model.aggregate import CommentNode
from blog.domain.model.comment import Comment
from blog.domain.value import CommentId

MAX_COMMENT_DEPTH = 3


def _index_children(
    comments: Iterable[Comment],
) -> dict[Optional[CommentId], list[Comment]]:
    children: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        children[comment.parent_comment_id].append(comment)
    for siblings in children.values():
        siblings.sort(key=lambda c: (c.created_at, c.id))
    return children


def build_comment_tree(
    comments: Iterable[Comment], max_depth: int = MAX_COMMENT_DEPTH
) -> list[CommentNode]:
    """Build the rendered comment forest of a post.

    Args:
        comments: Live comments of a single post, in any order
        max_depth: Number of levels to render (at least 1)

    Returns:
        Top-level nodes ordered by creation time

    Raises:
        ValueError: If max_depth is lower than 1
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")

    children = _index_children(comments)
    last_level = max_depth - 1

    def flatten(root: Comment) -> list[CommentNode]:
        # Pre-order walk of root's subtree, every node on the last level
        nodes = []
        stack = [root]
        while stack:
            current = stack.pop()
            nodes.append(CommentNode(comment=current, depth=last_level))
            stack.extend(reversed(children.get(current.id, [])))
        return nodes

    def build(comment: Comment, depth: int) -> list[CommentNode]:
        if depth == last_level:
            return flatten(comment)
        replies = []
        for child in children.get(comment.id, []):
            replies.extend(build(child, depth + 1))
        return [CommentNode(comment=comment, depth=depth, children=replies)]

    forest = []
    for top_level in children.get(None, []):
        forest.extend(build(top_level, 0))
    return forest


def count_nodes(forest: Iterable[CommentNode]) -> int:
    """Count the comments rendered in a forest."""
    total = 0
    stack = list(forest)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.children)
    return total
