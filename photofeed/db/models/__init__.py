from photofeed.db.models.user import User
from photofeed.db.models.comment import Comment
from photofeed.db.models.like import Like
from photofeed.db.models.post import Post

__all__ = ["User", "Post", "Like", "Comment"]
