from photofeed.client.api import ApiClient
from photofeed.client.state import CommentThread, FeedState, ProfileState

__all__ = ["ApiClient", "FeedState", "CommentThread", "ProfileState"]
