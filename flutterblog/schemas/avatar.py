from typing import List
from pydantic import BaseModel

class AvatarResponse(BaseModel):
    name: str
    image: str

class AvatarsResponse(BaseModel):
    avatars: List[AvatarResponse]
