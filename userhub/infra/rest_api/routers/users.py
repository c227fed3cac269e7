from uuid import uuid4

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool

from ..dependencies import get_register_user_usecase
from ..rate_limiter import limiter
from ..schemas import UserRegisterRequest, UserRegisterResponse
from ...config import get_settings
from ...password_hashing import get_password_hash
from ....port.dto.user_dto import CreateUserDTO
from ....usecase.user_management.register_user import RegisterUserUseCase

router = APIRouter(
    prefix="/api/v1/users",
    tags=["users"]
)

@router.post("", response_model=UserRegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(get_settings().register_rate_limit)
async def register_user(
    request: Request,
    req: UserRegisterRequest,
    usecase: RegisterUserUseCase = Depends(get_register_user_usecase)
):
    """
    新規ユーザー登録

    重複・入力不正・ストア障害はエラーハンドラーで統一レスポンスに変換される。
    """
    # bcrypt は CPU を占有するためスレッドプールで実行
    hashed_password = await run_in_threadpool(get_password_hash, req.password)
    dto = CreateUserDTO(
        uuid=req.uuid or str(uuid4()),
        name=req.name,
        email=req.email,
        password=hashed_password,
        tag_name=req.tag_name,
        bio=req.bio,
        profile_image=req.profile_image,
        number_of_publications=req.number_of_publications,
        publications=req.publications,
    )
    user = await usecase.execute(dto)
    return UserRegisterResponse(
        uuid=user.uuid.value,
        name=user.name.value,
        email=user.email.value,
        tag_name=user.tag_name.value,
        bio=user.bio.value,
        profile_image=user.profile_image.value,
        number_of_publications=user.number_of_publications,
        publications=list(user.publications),
    )
