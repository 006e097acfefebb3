import secrets

from .models import Room

# I, O, 1 and 0 are left out so codes can be read aloud without confusion.
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH = 6


def generate_room_code(length: int = ROOM_CODE_LENGTH) -> str:
    return "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(length))


def code_in_use(code: str) -> bool:
    return Room.objects.filter(code=code).exists()


def unique_room_code() -> str:
    """
    Draw codes until one is not held by any existing room.

    There is no retry cap: with 32**6 possible codes a collision is rare,
    and the unique constraint on Room.code still guards the final write.
    """
    code = generate_room_code()
    while code_in_use(code):
        code = generate_room_code()
    return code
