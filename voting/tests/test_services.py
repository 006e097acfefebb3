from datetime import timedelta

import pytest
from django.utils import timezone

from rooms.services import room_info
from users.exceptions import UserNotFound
from users.models import User
from voting.services import vote


@pytest.mark.django_db
class TestVote:
    def test_vote_sets_flag_and_refreshes_last_updated(self, make_user):
        user = make_user("s1")
        User.objects.filter(pk=user.pk).update(last_updated=timezone.now() - timedelta(hours=2))

        vote("s1", True)

        user.refresh_from_db()
        assert user.voted_yes is True
        assert user.last_updated > timezone.now() - timedelta(minutes=1)

    def test_vote_is_a_plain_set(self, make_user):
        user = make_user("s1")
        vote("s1", True)
        vote("s1", True)
        user.refresh_from_db()
        assert user.voted_yes is True

        vote("s1", False)
        user.refresh_from_db()
        assert user.voted_yes is False

    def test_vote_outside_room_is_allowed(self, make_user):
        user = make_user("s1")
        vote("s1", True)
        user.refresh_from_db()
        assert user.room_id is None
        assert user.voted_yes is True

    def test_unknown_user(self):
        with pytest.raises(UserNotFound):
            vote("nobody", True)

    def test_room_counts_only_its_members(self, room_with_members, make_user):
        _, (host, guest, other) = room_with_members("guest", "other")
        make_user("outsider")
        vote("outsider", True)
        vote("guest", True)

        info = room_info(host.room_id)
        assert info["votes"] == 1
        assert info["votes_required"] == 2
        assert info["has_majority"] is False

        vote("other", True)
        assert room_info(host.room_id)["has_majority"] is True


@pytest.mark.django_db
class TestVoteAPI:
    def test_vote(self, session_client, make_user):
        make_user("s1")
        res = session_client("s1").post("/api/vote/", {"voted_yes": True}, format="json")
        assert res.status_code == 204
        assert User.objects.get(session_id="s1").voted_yes is True

    def test_vote_requires_flag(self, session_client, make_user):
        make_user("s1")
        res = session_client("s1").post("/api/vote/", {}, format="json")
        assert res.status_code == 400

    def test_vote_unknown_user(self, session_client):
        res = session_client("nobody").post("/api/vote/", {"voted_yes": True}, format="json")
        assert res.status_code == 404
