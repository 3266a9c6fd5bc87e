from fastapi import APIRouter
from flutterblog.core.avatars import Avatar
from flutterblog.schemas.avatar import AvatarResponse, AvatarsResponse

router = APIRouter()


@router.get("/avatars", response_model=AvatarsResponse)
def get_avatars():
    """Список доступных аватаров и путей к их картинкам."""
    return AvatarsResponse(avatars=[AvatarResponse(name=a.value, image=a.image) for a in Avatar])
