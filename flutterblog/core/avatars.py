from enum import Enum


class Avatar(str, Enum):
    """
    Единый список аватаров. Его используют и проверка новых постов,
    и фронтенд (через GET /flutter/avatars).
    """
    BEAR = "bear"
    BIRD = "bird"
    BUTTERFLY = "butterfly"
    CAT = "cat"
    DOLPHIN = "dolphin"
    ELEPHANT = "elephant"
    FROG = "frog"
    HORSE = "horse"
    KANGAROO = "kangaroo"
    KOALA = "koala"
    MONKEY = "monkey"
    RABBIT = "rabbit"
    SLOTH = "sloth"

    @property
    def image(self) -> str:
        return f"/img/{self.value}.png"


AVATAR_NAMES = frozenset(avatar.value for avatar in Avatar)


def is_known_avatar(name: str) -> bool:
    return name in AVATAR_NAMES
