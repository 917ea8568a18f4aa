from typing import Optional
import httpx
from photofeed.core import config


class ApiClient:
    """Thin HTTP wrapper around the photofeed REST API.

    Holds the bearer token of the logged-in user. Any non-2xx response
    raises ``httpx.HTTPStatusError``; transport failures raise the matching
    ``httpx.HTTPError`` subclass.
    """

    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None):
        if http is None:
            http = httpx.Client(base_url=base_url or config.API_URL, timeout=config.API_TIMEOUT)
        self.http = http
        self.token: Optional[str] = None
        self.user_id: Optional[int] = None
        self.username: Optional[str] = None

    def _request(self, method: str, path: str, **kwargs):
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = self.http.request(method, path, headers=headers, **kwargs)
        response.raise_for_status()
        return response.json()

    # Auth

    def register(self, username: str, email: str, password: str) -> dict:
        return self._request("POST", "/auth/register", json={
            "username": username,
            "email": email,
            "password": password,
        })

    def login(self, username: str, password: str) -> dict:
        token = self._request("POST", "/auth/login", data={"username": username, "password": password})
        self.token = token["access_token"]
        self.user_id = token["user_id"]
        self.username = token["username"]
        return token

    def logout(self):
        self.token = None
        self.user_id = None
        self.username = None

    # Posts

    def list_posts(self) -> list:
        return self._request("GET", "/posts")

    def get_post(self, post_id: int) -> dict:
        return self._request("GET", f"/posts/{post_id}")

    def create_post(
        self,
        image: bytes,
        description: Optional[str] = None,
        filename: str = "photo.jpg",
        content_type: str = "image/jpeg",
    ) -> dict:
        data = {"description": description} if description else {}
        return self._request("POST", "/posts", data=data, files={"image": (filename, image, content_type)})

    def delete_post(self, post_id: int) -> dict:
        return self._request("DELETE", f"/posts/{post_id}")

    def toggle_like(self, post_id: int) -> dict:
        return self._request("POST", f"/posts/{post_id}/like")

    # Comments

    def list_comments(self, post_id: int) -> list:
        return self._request("GET", f"/posts/{post_id}/comments")

    def create_comment(self, post_id: int, content: str) -> dict:
        return self._request("POST", f"/posts/{post_id}/comments", json={"content": content})

    # Users

    def me(self) -> dict:
        return self._request("GET", "/users/me")

    def update_avatar(self, image: bytes, filename: str = "avatar.jpg", content_type: str = "image/jpeg") -> dict:
        return self._request("PUT", "/users/avatar", files={"avatar": (filename, image, content_type)})
