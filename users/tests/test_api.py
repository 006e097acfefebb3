import pytest

from users.models import User


@pytest.mark.django_db
class TestUserAPI:
    def test_create_user(self, session_client):
        res = session_client("s1").post("/api/users/")
        assert res.status_code == 201
        assert User.objects.filter(session_id="s1").exists()

    def test_create_user_without_session_header(self, api_client):
        res = api_client.post("/api/users/")
        assert res.status_code == 400
        assert User.objects.count() == 0

    def test_create_user_twice_conflicts(self, session_client):
        client = session_client("s1")
        client.post("/api/users/")
        res = client.post("/api/users/")
        assert res.status_code == 409

    def test_get_me_without_user(self, session_client):
        res = session_client("nobody").get("/api/users/me/")
        assert res.status_code == 200
        assert res.data == {"user": None, "room": None}

    def test_get_me_with_user(self, session_client, make_user):
        user = make_user("s1")
        res = session_client("s1").get("/api/users/me/")
        assert res.status_code == 200
        assert res.data["user"]["id"] == str(user.id)
        assert res.data["user"]["voted_yes"] is False
        assert res.data["room"] is None

    def test_change_name(self, session_client, make_user):
        make_user("s1")
        res = session_client("s1").patch("/api/users/me/", {"name": "  Ada  "}, format="json")
        assert res.status_code == 204
        assert User.objects.get(session_id="s1").name == "Ada"

    @pytest.mark.parametrize("name", ["", "A", " B "])
    def test_change_name_too_short(self, session_client, make_user, name):
        user = make_user("s1")
        res = session_client("s1").patch("/api/users/me/", {"name": name}, format="json")
        assert res.status_code == 400
        assert User.objects.get(pk=user.pk).name == user.name

    def test_change_name_unknown_user(self, session_client):
        res = session_client("nobody").patch("/api/users/me/", {"name": "Ada"}, format="json")
        assert res.status_code == 404

    def test_delete_me(self, session_client, make_user):
        make_user("s1")
        res = session_client("s1").delete("/api/users/me/")
        assert res.status_code == 204
        assert not User.objects.filter(session_id="s1").exists()

    def test_delete_unknown_user(self, session_client):
        res = session_client("nobody").delete("/api/users/me/")
        assert res.status_code == 404
