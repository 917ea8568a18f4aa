"""Avatar upload."""

from conftest import PNG_BYTES


def test_update_avatar_sets_url_and_shows_on_posts(client, make_user, create_post, fake_uploader):
    user_id, headers = make_user("alice")
    create_post(headers)

    res = client.put(
        "/users/avatar",
        files={"avatar": ("avatar.png", PNG_BYTES, "image/png")},
        headers=headers,
    )

    assert res.status_code == 200
    avatar_url = res.json()["avatar_url"]
    assert avatar_url.startswith("https://res.cloudinary.com/")
    assert "profile_pics/" in avatar_url
    assert client.get("/posts").json()[0]["author"]["avatar_url"] == avatar_url
    assert client.get("/users/me", headers=headers).json()["avatar_url"] == avatar_url


def test_replacing_avatar_destroys_previous_image(client, make_user, fake_uploader):
    _, headers = make_user("alice")
    files = {"avatar": ("avatar.png", PNG_BYTES, "image/png")}

    client.put("/users/avatar", files=files, headers=headers)
    first_public_id = fake_uploader.uploaded[-1]
    client.put("/users/avatar", files=files, headers=headers)

    assert fake_uploader.destroyed == [first_public_id]


def test_update_avatar_requires_file(client, make_user):
    _, headers = make_user("alice")
    assert client.put("/users/avatar", headers=headers).status_code == 400


def test_update_avatar_rejects_non_image(client, make_user):
    _, headers = make_user("alice")
    res = client.put(
        "/users/avatar",
        files={"avatar": ("a.gif", b"GIF89a", "image/gif")},
        headers=headers,
    )
    assert res.status_code == 400


def test_update_avatar_requires_auth(client):
    res = client.put("/users/avatar", files={"avatar": ("avatar.png", PNG_BYTES, "image/png")})
    assert res.status_code == 401
