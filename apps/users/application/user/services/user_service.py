"""User Service.

회원가입/로그인/토큰 재발급과 자산 연결을 담당하는 유스케이스 구현체입니다.

Architecture:
    - Input Ports: SignUpUseCase, SignInUseCase, ReissueUseCase, LogoutUseCase,
      IsAvailableTofinIdUseCase, IsAvailableContactUseCase, ConnectAssetUseCase,
      SetPublicOptionUseCase
    - Output Ports: CreateUserOutputPort, ReadUserOutputPort, ReadNormalUserOutputPort,
      SaveUserDetailOutputPort, GetAssetsOutputPort, RefreshTokenOutputPort,
      TokenIssuer, UserInfoEncoder, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps._shared.security import TokenableUser
from apps.users.application.asset.dto import ConnectAssetInfoResponse
from apps.users.application.common.exceptions import (
    BadRequestError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    UnauthorizedError,
)
from apps.users.application.user.dto import (
    AvailableContactServiceResponse,
    AvailableTofinIdServiceResponse,
    TokenInfoServiceResponse,
)
from apps.users.application.user.usecases import (
    ConnectAssetUseCase,
    IsAvailableContactUseCase,
    IsAvailableTofinIdUseCase,
    LogoutUseCase,
    ReissueUseCase,
    SetPublicOptionUseCase,
    SignInUseCase,
    SignUpUseCase,
)
from apps.users.domain.entities.user import NormalUser, User
from apps.users.domain.enums import Job, UserRole
from apps.users.domain.exceptions import AssetNotConnectedError, InvalidValueError
from apps.users.domain.value_objects import (
    Birth,
    Contact,
    ImageUrl,
    Nickname,
    TofinId,
    UserId,
)

if TYPE_CHECKING:
    from apps.users.application.asset.dto import AssetInfoResponse
    from apps.users.application.asset.ports import GetAssetsOutputPort
    from apps.users.application.common.ports import TransactionManager
    from apps.users.application.token.ports import (
        RefreshTokenOutputPort,
        TokenInfo,
        TokenIssuer,
    )
    from apps.users.application.user.dto import (
        ConnectAssetsServiceRequest,
        SetPublicOptionServiceRequest,
        SignInServiceRequest,
        SignUpServiceRequest,
    )
    from apps.users.application.user.ports import (
        CreateUserOutputPort,
        ReadNormalUserOutputPort,
        ReadUserOutputPort,
        SaveUserDetailOutputPort,
        UserInfoEncoder,
    )

logger = logging.getLogger(__name__)

DUPLICATE_TOFIN_ID = "해당 아이디는 이미 존재합니다."
SIGN_IN_FAILED = "아이디 혹은 비밀번호가 틀렸습니다."
MISSING_REFRESH_TOKEN = "리프레쉬 토큰 이상"
UNUSABLE_REFRESH_TOKEN = "해당 리프레쉬 토큰은 사용할 수 없음"
USER_NOT_FOUND = "해당 유저가 존재하지 않습니다."
USER_DETAIL_NOT_FOUND = "해당 유저의 세부 정보가 존재하지 않습니다."
DUPLICATE_CONTACT = "해당 전화번호는 이미 사용 중 입니다."

TOFIN_ID_AVAILABLE = "사용 가능한 아이디 입니다"
TOFIN_ID_TAKEN = "이미 사용중인 아이디 입니다"
TOFIN_ID_MALFORMED = "아이디는 8~30글자 사이, 영문+숫자 형식이어야 합니다."
CONTACT_AVAILABLE = "사용가능한 전화번호 입니다."
CONTACT_TAKEN = "이미 사용 중인 전화번호 입니다."
CONTACT_MALFORMED = "전화 번호 형식이 아닙니다."


class UserService(
    SignUpUseCase,
    SignInUseCase,
    ReissueUseCase,
    LogoutUseCase,
    IsAvailableTofinIdUseCase,
    IsAvailableContactUseCase,
    ConnectAssetUseCase,
    SetPublicOptionUseCase,
):
    """사용자 유스케이스 구현체.

    리프레시 토큰은 사용자당 하나만 유효하며, 재발급 시 1회만 소비됩니다.
    """

    def __init__(
        self,
        *,
        create_user: "CreateUserOutputPort",
        read_user: "ReadUserOutputPort",
        read_normal_user: "ReadNormalUserOutputPort",
        save_user_detail: "SaveUserDetailOutputPort",
        get_assets: "GetAssetsOutputPort",
        refresh_tokens: "RefreshTokenOutputPort",
        token_issuer: "TokenIssuer",
        user_info_encoder: "UserInfoEncoder",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._create_user = create_user
        self._read_user = read_user
        self._read_normal_user = read_normal_user
        self._save_user_detail = save_user_detail
        self._get_assets = get_assets
        self._refresh_tokens = refresh_tokens
        self._token_issuer = token_issuer
        self._user_info_encoder = user_info_encoder
        self._tx = transaction_manager

    # ------------------------------------------------------------------
    # Sign up / Sign in / Token
    # ------------------------------------------------------------------

    async def sign_up(self, request: "SignUpServiceRequest") -> TokenInfoServiceResponse:
        """회원가입 후 토큰 쌍을 발급합니다.

        Raises:
            BadRequestError: 필드 형식 오류, 알 수 없는 직업
            ConflictError: 이미 존재하는 아이디
        """
        try:
            tofin_id = TofinId.of(request.tofin_id)
            birth = Birth.of(request.birth)
            nickname = Nickname.of(request.nickname)
            profile_image = ImageUrl.of(request.profile_image)
        except InvalidValueError as e:
            raise BadRequestError(e.message) from e
        job = self._to_job(request.job)

        if await self._is_duplicate_tofin_id(tofin_id):
            raise ConflictError(DUPLICATE_TOFIN_ID)

        user = await self._create_user.create(
            NormalUser(
                tofin_id=tofin_id,
                user_info=self._user_info_encoder.hashed(request.user_info),
                birth=birth,
                job=job,
                profile_image=profile_image,
                nickname=nickname,
                role=UserRole.NORMAL,
            )
        )
        # 토큰 저장에 실패하면 가입도 남기지 않음
        try:
            token_info = await self._generate_token_and_save_refresh(user)
        except Exception:
            await self._tx.rollback()
            raise
        await self._tx.commit()

        logger.info("User signed up", extra={"user_id": str(user.id)})
        return self._to_token_info_response(token_info)

    async def sign_in(self, request: "SignInServiceRequest") -> TokenInfoServiceResponse:
        """로그인 후 토큰 쌍을 발급합니다.

        없는 아이디와 틀린 비밀번호는 같은 메시지로 실패합니다.

        Raises:
            UnauthorizedError: 아이디 혹은 비밀번호 불일치
        """
        try:
            tofin_id = TofinId.of(request.tofin_id)
        except InvalidValueError:
            raise UnauthorizedError(SIGN_IN_FAILED) from None

        user = await self._read_user.find_by_tofin_id(tofin_id)
        if user is None:
            raise UnauthorizedError(SIGN_IN_FAILED)

        if not self._user_info_encoder.matches(request.user_info, user.user_info):
            raise UnauthorizedError(SIGN_IN_FAILED)

        logger.info("User signed in", extra={"user_id": str(user.id)})
        return self._to_token_info_response(await self._generate_token_and_save_refresh(user))

    async def reissue(self, refresh_token: str | None) -> TokenInfoServiceResponse:
        """리프레시 토큰을 소비하고 새 토큰 쌍을 발급합니다.

        Raises:
            UnauthorizedError: 토큰 누락, 이미 사용되었거나 알 수 없는 토큰
        """
        if not refresh_token or not refresh_token.strip():
            raise UnauthorizedError(MISSING_REFRESH_TOKEN)

        user_id = await self._refresh_tokens.delete_by_refresh_token(refresh_token.strip())
        if user_id is None:
            raise UnauthorizedError(UNUSABLE_REFRESH_TOKEN)

        user = await self._read_user.find_by_user_id(user_id)
        if user is None:
            raise UnauthorizedError(UNUSABLE_REFRESH_TOKEN)

        logger.info("Token reissued", extra={"user_id": str(user_id)})
        return self._to_token_info_response(await self._generate_token_and_save_refresh(user))

    async def logout(self, refresh_token: str | None) -> None:
        """리프레시 토큰을 폐기합니다. 알 수 없는 토큰이면 아무 일도 하지 않습니다."""
        if not refresh_token or not refresh_token.strip():
            raise UnauthorizedError(MISSING_REFRESH_TOKEN)

        user_id = await self._refresh_tokens.delete_by_refresh_token(refresh_token.strip())
        if user_id is not None:
            logger.info("User logged out", extra={"user_id": str(user_id)})

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    async def is_available_tofin_id(self, tofin_id: str) -> AvailableTofinIdServiceResponse:
        """아이디 사용 가능 여부를 확인합니다. 형식 오류도 응답으로 돌려줍니다."""
        try:
            value = TofinId.of(tofin_id)
        except InvalidValueError:
            return AvailableTofinIdServiceResponse(
                tofin_id=tofin_id,
                available=False,
                reason=TOFIN_ID_MALFORMED,
            )

        available = not await self._is_duplicate_tofin_id(value)
        return AvailableTofinIdServiceResponse(
            tofin_id=tofin_id,
            available=available,
            reason=TOFIN_ID_AVAILABLE if available else TOFIN_ID_TAKEN,
        )

    async def is_available_contact(self, contact: str) -> AvailableContactServiceResponse:
        """전화번호 사용 가능 여부를 확인합니다."""
        available = True
        reason = CONTACT_AVAILABLE

        if not Contact.is_valid(contact):
            available = False
            reason = CONTACT_MALFORMED
        elif await self._read_normal_user.exists_by_contact(Contact.of(contact)):
            available = False
            reason = CONTACT_TAKEN

        return AvailableContactServiceResponse(contact=contact, available=available, reason=reason)

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------

    async def connect_assets(
        self, request: "ConnectAssetsServiceRequest"
    ) -> list[ConnectAssetInfoResponse]:
        """외부 자산 제공자와 연결하고 계좌/카드 목록을 반환합니다.

        자산 조회까지 성공해야 연결 정보가 커밋됩니다.

        Raises:
            NotFoundError: 사용자 없음
            BadRequestError: 전화번호 형식 오류, 다른 사용자가 사용 중인 전화번호
            ExternalServiceError: 자산 제공자 호출 실패
        """
        user_id = UserId.of(request.user_id)
        found = await self._read_user.find_by_user_id(user_id)
        if found is None:
            raise NotFoundError(USER_NOT_FOUND)
        user = NormalUser.from_user(found)

        try:
            contact = Contact.of(request.contact)
        except InvalidValueError as e:
            raise BadRequestError(e.message) from e

        if await self._read_normal_user.exists_by_contact(contact, exclude_user_id=user_id):
            raise BadRequestError(DUPLICATE_CONTACT)

        user.connect_assets(
            contact=contact,
            back_social_id=request.back_social_id,
            social_name=request.social_name,
        )
        user = await self._save_user_detail.save(user)

        try:
            asset_info = await self._get_assets.get_assets(user)
        except ExternalServiceError:
            await self._tx.rollback()
            raise
        await self._tx.commit()

        logger.info(
            "Assets connected",
            extra={
                "user_id": str(user_id),
                "accounts": len(asset_info.accounts),
                "cards": len(asset_info.cards),
            },
        )
        return self._to_connect_asset_info_list(asset_info)

    async def set_public_option(self, request: "SetPublicOptionServiceRequest") -> None:
        """자산 공개 옵션을 변경합니다.

        Raises:
            NotFoundError: 세부 정보 없음
            BadRequestError: 자산 연결 전
        """
        user = await self._read_normal_user.find_by_user_id(UserId.of(request.user_id))
        if user is None:
            raise NotFoundError(USER_DETAIL_NOT_FOUND)

        try:
            user.set_public_option(
                public_amount=request.public_amount,
                public_percent=request.public_percent,
            )
        except AssetNotConnectedError as e:
            raise BadRequestError(e.message) from e

        await self._save_user_detail.save(user)
        await self._tx.commit()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _is_duplicate_tofin_id(self, tofin_id: TofinId) -> bool:
        return await self._read_user.is_exists_by_tofin_id(tofin_id)

    async def _generate_token_and_save_refresh(self, user: User) -> "TokenInfo":
        token_info = self._token_issuer.generate_token(
            TokenableUser(
                id=user.id.to_int(),
                role=user.role.value,
                job=user.job.value if user.job else None,
                nickname=str(user.nickname),
                profile_image=user.profile_image.value,
                birth=user.birth.to_date(),
            )
        )
        await self._refresh_tokens.save_only_one_user(
            user.id,
            token_info.refresh_token,
            token_info.refresh_expires_at,
        )
        return token_info

    @staticmethod
    def _to_job(job: str | None) -> Job | None:
        if not job:
            return None
        try:
            return Job.of(job)
        except ValueError:
            raise BadRequestError(f"{job}(은)는 올바르지 않은 직업입니다.") from None

    @staticmethod
    def _to_token_info_response(token_info: "TokenInfo") -> TokenInfoServiceResponse:
        return TokenInfoServiceResponse(
            access_token=token_info.access_token,
            refresh_token=token_info.refresh_token,
            grant_type=token_info.grant_type,
        )

    @staticmethod
    def _to_connect_asset_info_list(
        asset_info: "AssetInfoResponse",
    ) -> list[ConnectAssetInfoResponse]:
        # 계좌 먼저, 카드는 그 뒤에
        connect_asset_infos = [
            ConnectAssetInfoResponse.from_account(account) for account in asset_info.accounts
        ]
        connect_asset_infos.extend(
            ConnectAssetInfoResponse.from_card(card) for card in asset_info.cards
        )
        return connect_asset_infos
