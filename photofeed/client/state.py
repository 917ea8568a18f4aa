"""Screen-level client state: the feed, a post's comment thread and the profile.

Every network call is synchronous and applied to local state once it
returns. The only speculative change is the feed's like toggle, which is
rolled back by re-fetching the whole feed when the request fails.
"""

import logging
from typing import List, Optional
import httpx
from photofeed.client.api import ApiClient

logger = logging.getLogger(__name__)

FETCH_POSTS_ALERT = "Could not fetch posts."
LIKE_ALERT = "Could not update like."


def has_liked(post: dict, user_id: Optional[int]) -> bool:
    return any(like["user_id"] == user_id for like in post["likes"])


def with_like_flipped(post: dict, user_id: Optional[int]) -> dict:
    """Return a copy of ``post`` with ``user_id``'s like membership inverted."""
    if has_liked(post, user_id):
        likes = [like for like in post["likes"] if like["user_id"] != user_id]
    else:
        likes = post["likes"] + [{"user_id": user_id}]
    return {**post, "likes": likes, "likes_count": len(likes)}


class FeedState:
    """All posts, newest first, with optimistic likes."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.posts: List[dict] = []
        self.loading = False
        self.alert: Optional[str] = None

    def refresh(self) -> List[dict]:
        self.loading = True
        try:
            self.posts = self.api.list_posts()
        except httpx.HTTPError as e:
            logger.error(f"Fetching posts failed: {e}")
            self.alert = FETCH_POSTS_ALERT
        finally:
            self.loading = False
        return self.posts

    def find(self, post_id: int) -> Optional[dict]:
        return next((p for p in self.posts if p["id"] == post_id), None)

    def is_liked(self, post: dict) -> bool:
        return has_liked(post, self.api.user_id)

    def like(self, post_id: int) -> bool:
        """Flip the like locally, then tell the server.

        Returns False when the request failed; the feed has then been
        re-fetched so the speculative flip is gone.
        """
        self.posts = [
            with_like_flipped(p, self.api.user_id) if p["id"] == post_id else p
            for p in self.posts
        ]
        try:
            self.api.toggle_like(post_id)
        except httpx.HTTPError as e:
            logger.warning(f"Like on post {post_id} failed, re-fetching feed: {e}")
            self.alert = LIKE_ALERT
            self.refresh()
            return False
        return True

    def remove(self, post_id: int) -> bool:
        """Delete one of the user's posts on the server, then re-fetch the feed."""
        try:
            self.api.delete_post(post_id)
        except httpx.HTTPError as e:
            logger.error(f"Error deleting post {post_id}: {e}")
            return False
        self.refresh()
        return True

    def dismiss_alert(self):
        self.alert = None


class CommentThread:
    """Comment section under a single post card."""

    def __init__(self, api: ApiClient, post: dict):
        self.api = api
        self.post = post
        self.visible = False
        self.loading = False
        self.comments: List[dict] = []
        self.draft = ""
        self.comments_count = post["comments_count"]

    def fetch(self) -> List[dict]:
        self.loading = True
        try:
            self.comments = self.api.list_comments(self.post["id"])
        except httpx.HTTPError as e:
            logger.error(f"Fetching comments for post {self.post['id']} failed: {e}")
        finally:
            self.loading = False
        return self.comments

    def toggle(self) -> bool:
        self.visible = not self.visible
        if self.visible and not self.comments:
            self.fetch()
        return self.visible

    def submit(self, text: Optional[str] = None) -> Optional[dict]:
        text = self.draft if text is None else text
        if not text.strip():
            return None
        try:
            comment = self.api.create_comment(self.post["id"], text)
        except httpx.HTTPError as e:
            logger.error(f"Posting comment on post {self.post['id']} failed: {e}")
            return None
        self.comments = self.comments + [comment]
        self.comments_count += 1
        self.draft = ""
        return comment


class ProfileState:
    """The logged-in user's header and their own posts.

    Posts are filtered from the full feed on the client. Likes here are
    not optimistic: every toggle is followed by a reload.
    """

    def __init__(self, api: ApiClient):
        self.api = api
        self.user: Optional[dict] = None
        self.posts: List[dict] = []
        self.loading = False
        self.uploading_avatar = False

    @property
    def username(self) -> str:
        return self.user["username"] if self.user else "User"

    @property
    def avatar_url(self) -> Optional[str]:
        return self.user["avatar_url"] if self.user else None

    def load(self) -> List[dict]:
        if self.api.user_id is None:
            self.user = None
            self.posts = []
            return self.posts
        self.loading = True
        try:
            self.user = self.api.me()
            self.posts = [p for p in self.api.list_posts() if p["author"]["id"] == self.api.user_id]
        except httpx.HTTPError as e:
            logger.error(f"Loading profile failed: {e}")
        finally:
            self.loading = False
        return self.posts

    def like(self, post_id: int):
        try:
            self.api.toggle_like(post_id)
        except httpx.HTTPError as e:
            logger.error(f"Like on post {post_id} failed: {e}")
        finally:
            self.load()

    def change_avatar(self, image: bytes, filename: str = "avatar.jpg", content_type: str = "image/jpeg") -> bool:
        self.uploading_avatar = True
        try:
            self.api.update_avatar(image, filename=filename, content_type=content_type)
        except httpx.HTTPError as e:
            logger.error(f"Avatar upload failed: {e}")
            return False
        finally:
            self.uploading_avatar = False
        self.load()
        return True
