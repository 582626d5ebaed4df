"""MCP tool handlers for community comments."""

from typing import Any, Dict, Optional

from backend.client import BackendClient, open_client
from schemas.activity import (
    Comment,
    CommentIdRequest,
    CommentThread,
    CreateCommentRequest,
    GetCommunityCommentsRequest,
    UpdateCommentRequest,
)
from schemas.common import CreatedResource, Envelope, Page, validate_request, validate_response
from utils.text_format import COMMENT_LIMIT, format_datetime, join_blocks, pluralize, truncate

ANONYMOUS = "Anonymous"


def render_comment_entry(index: int, comment: Comment) -> str:
    replies = f" ({pluralize(comment.reply_count, 'reply', 'replies')})" if comment.reply_count else ""
    return (
        f"{index}. {comment.author_display_name or ANONYMOUS}{replies}\n"
        f"   {truncate(comment.content, COMMENT_LIMIT)}\n"
        f"   {format_datetime(comment.created_on_utc)}\n"
        f"   ID: {comment.id}"
    )


def render_community_comments(page: Optional[Page[Comment]]) -> str:
    comments = (page.items if page else None) or []
    if not comments:
        return "No community comments found."
    entries = [render_comment_entry(index, comment) for index, comment in enumerate(comments, start=1)]
    total = page.total_count or len(comments)
    return f"Community Comments ({total} total):\n\n{join_blocks(entries)}"


def render_comment_thread(thread: Optional[CommentThread]) -> str:
    if thread is None:
        return "Comment thread not found."

    replies = "  No replies"
    if thread.replies:
        replies = join_blocks(
            f"  {index}. {reply.author_display_name or ANONYMOUS}: {reply.content or ''}\n"
            f"     {format_datetime(reply.created_on_utc)}"
            for index, reply in enumerate(thread.replies, start=1)
        )

    return "\n".join([
        f"{thread.author_display_name or ANONYMOUS}: {thread.content or ''}",
        f"Posted: {format_datetime(thread.created_on_utc)}",
        f"\nReplies:\n{replies}",
    ])


def get_community_comments(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    """Browse community comments (page/pageSize pagination)."""
    request = validate_request(GetCommunityCommentsRequest, args)
    params = {"page": str(request.page), "pageSize": str(request.limit)}

    with open_client(client) as api:
        payload = api.get("/api/comment/community", params=params)

    return render_community_comments(validate_response(Envelope[Page[Comment]], payload).data)


def get_comment_thread(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(CommentIdRequest, args)

    with open_client(client) as api:
        payload = api.get(f"/api/comment/{request.comment_id}/thread")

    return render_comment_thread(validate_response(Envelope[CommentThread], payload).data)


def create_comment(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(CreateCommentRequest, args)
    body = {"content": request.content}
    if request.parent_id:
        body["parentId"] = request.parent_id

    with open_client(client) as api:
        payload = api.post("/api/comment", json_body=body)

    envelope = validate_response(Envelope[CreatedResource], payload)
    error = envelope.domain_error()
    if error:
        return f"Failed to post comment: {error}"
    comment_id = f"\nComment ID: {envelope.data.id}" if envelope.data and envelope.data.id else ""
    return f"Comment posted successfully.{comment_id}"


def update_comment(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(UpdateCommentRequest, args)

    with open_client(client) as api:
        api.put(f"/api/comment/{request.comment_id}", json_body={"content": request.content})

    return "Comment updated successfully."


def delete_comment(args: Dict[str, Any], client: Optional[BackendClient] = None) -> str:
    request = validate_request(CommentIdRequest, args)

    with open_client(client) as api:
        api.delete(f"/api/comment/{request.comment_id}")

    return "Comment deleted successfully."
