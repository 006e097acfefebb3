import math


def votes_required(member_count: int) -> int:
    """
    Yes votes needed for a majority: half the room, rounded up.

    For an even room exactly half is enough (4 members -> 2 votes).
    """
    return math.ceil(member_count / 2)


def has_majority(votes: int, member_count: int) -> bool:
    return member_count > 0 and votes >= votes_required(member_count)
