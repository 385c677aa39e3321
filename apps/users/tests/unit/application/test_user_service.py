"""UserService 단위 테스트."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest

from apps.users.application.asset.dto import (
    AccountResponse,
    AssetInfoResponse,
    CardResponse,
)
from apps.users.application.common.exceptions import (
    BadRequestError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    UnauthorizedError,
)
from apps.users.application.user.dto import (
    ConnectAssetsServiceRequest,
    SetPublicOptionServiceRequest,
    SignInServiceRequest,
    SignUpServiceRequest,
)
from apps.users.application.user.services import UserService
from apps.users.domain.entities.user import NormalUser
from apps.users.domain.value_objects import Contact, TofinId, UserId
from apps.users.tests.unit.factories import create_normal_user, create_user


@pytest.fixture
def service(
    mock_user_gateway: MagicMock,
    mock_normal_user_gateway: MagicMock,
    mock_asset_gateway: MagicMock,
    mock_refresh_token_store: MagicMock,
    mock_token_issuer: MagicMock,
    mock_user_info_encoder: MagicMock,
    mock_transaction_manager: MagicMock,
) -> UserService:
    return UserService(
        create_user=mock_user_gateway,
        read_user=mock_user_gateway,
        read_normal_user=mock_normal_user_gateway,
        save_user_detail=mock_normal_user_gateway,
        get_assets=mock_asset_gateway,
        refresh_tokens=mock_refresh_token_store,
        token_issuer=mock_token_issuer,
        user_info_encoder=mock_user_info_encoder,
        transaction_manager=mock_transaction_manager,
    )


def _sign_up_request(**overrides) -> SignUpServiceRequest:
    values = dict(
        tofin_id="tofinuser01",
        user_info="password123",
        birth=date(1998, 3, 14),
        nickname="토핀",
        job="STUDENT",
        profile_image=None,
    )
    values.update(overrides)
    return SignUpServiceRequest(**values)


class TestSignUp:
    """회원가입 테스트."""

    @pytest.mark.asyncio
    async def test_sign_up_success(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_refresh_token_store: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        mock_user_gateway.create.side_effect = lambda user: _with_id(user, 10)

        response = await service.sign_up(_sign_up_request())

        assert response.access_token == "access-token"
        assert response.refresh_token == "refresh-token"
        assert response.grant_type == "Bearer"

        created = mock_user_gateway.create.call_args.args[0]
        assert isinstance(created, NormalUser)
        assert created.user_info == "hashed:password123"
        assert created.tofin_id == TofinId("tofinuser01")
        mock_transaction_manager.commit.assert_awaited_once()
        mock_refresh_token_store.save_only_one_user.assert_awaited_once_with(
            UserId(10), "refresh-token", 1_900_100_000
        )
        mock_transaction_manager.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_token_store_failure_rolls_back(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_refresh_token_store: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        """토큰 저장 실패 시 가입한 사용자도 남지 않습니다."""
        mock_user_gateway.create.side_effect = lambda user: _with_id(user, 10)
        mock_refresh_token_store.save_only_one_user.side_effect = ConnectionError("redis down")

        with pytest.raises(ConnectionError):
            await service.sign_up(_sign_up_request())

        mock_user_gateway.create.assert_awaited_once()
        mock_transaction_manager.rollback.assert_awaited_once()
        mock_transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_tofin_id_conflict(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_transaction_manager: MagicMock,
        mock_token_issuer: MagicMock,
    ) -> None:
        """이미 존재하는 아이디면 생성/커밋 없이 실패."""
        mock_user_gateway.is_exists_by_tofin_id.return_value = True

        with pytest.raises(ConflictError) as exc_info:
            await service.sign_up(_sign_up_request())

        assert exc_info.value.message == "해당 아이디는 이미 존재합니다."
        mock_user_gateway.create.assert_not_awaited()
        mock_transaction_manager.commit.assert_not_awaited()
        mock_token_issuer.generate_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_tofin_id(self, service: UserService) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            await service.sign_up(_sign_up_request(tofin_id="short"))
        assert exc_info.value.message == "아이디는 8~30글자 사이, 영문+숫자 형식이어야 합니다."

    @pytest.mark.asyncio
    async def test_unknown_job(self, service: UserService, mock_user_gateway: MagicMock) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            await service.sign_up(_sign_up_request(job="ASTRONAUT"))

        assert exc_info.value.message == "ASTRONAUT(은)는 올바르지 않은 직업입니다."
        mock_user_gateway.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_job_is_optional(self, service: UserService, mock_user_gateway: MagicMock) -> None:
        mock_user_gateway.create.side_effect = lambda user: _with_id(user, 3)

        await service.sign_up(_sign_up_request(job=None))

        assert mock_user_gateway.create.call_args.args[0].job is None


class TestSignIn:
    """로그인 테스트."""

    @pytest.mark.asyncio
    async def test_sign_in_success(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_refresh_token_store: MagicMock,
    ) -> None:
        mock_user_gateway.find_by_tofin_id.return_value = create_user(user_id=5)

        response = await service.sign_in(
            SignInServiceRequest(tofin_id="tofinuser01", user_info="password123")
        )

        assert response.access_token == "access-token"
        mock_refresh_token_store.save_only_one_user.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_password_same_message_as_unknown_user(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
    ) -> None:
        mock_user_gateway.find_by_tofin_id.return_value = create_user()
        with pytest.raises(UnauthorizedError) as wrong_password:
            await service.sign_in(SignInServiceRequest(tofin_id="tofinuser01", user_info="nope"))

        mock_user_gateway.find_by_tofin_id.return_value = None
        with pytest.raises(UnauthorizedError) as unknown_user:
            await service.sign_in(
                SignInServiceRequest(tofin_id="unknownuser", user_info="password123")
            )

        assert wrong_password.value.message == "아이디 혹은 비밀번호가 틀렸습니다."
        assert wrong_password.value.message == unknown_user.value.message

    @pytest.mark.asyncio
    async def test_malformed_tofin_id_is_unauthorized(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
    ) -> None:
        with pytest.raises(UnauthorizedError):
            await service.sign_in(SignInServiceRequest(tofin_id="x", user_info="password123"))
        mock_user_gateway.find_by_tofin_id.assert_not_awaited()


class TestReissue:
    """토큰 재발급 테스트."""

    @pytest.mark.asyncio
    async def test_reissue_success(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_refresh_token_store: MagicMock,
    ) -> None:
        mock_refresh_token_store.delete_by_refresh_token.return_value = UserId(5)
        mock_user_gateway.find_by_user_id.return_value = create_user(user_id=5)

        response = await service.reissue("old-refresh-token")

        assert response.refresh_token == "refresh-token"
        mock_refresh_token_store.delete_by_refresh_token.assert_awaited_once_with(
            "old-refresh-token"
        )
        mock_refresh_token_store.save_only_one_user.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reissue_succeeds_at_most_once(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_refresh_token_store: MagicMock,
    ) -> None:
        """같은 리프레시 토큰의 두 번째 사용은 실패."""
        mock_refresh_token_store.delete_by_refresh_token.side_effect = [UserId(5), None]
        mock_user_gateway.find_by_user_id.return_value = create_user(user_id=5)

        await service.reissue("refresh-token-1")
        with pytest.raises(UnauthorizedError) as exc_info:
            await service.reissue("refresh-token-1")

        assert exc_info.value.message == "해당 리프레쉬 토큰은 사용할 수 없음"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "   "])
    async def test_missing_token(self, service: UserService, token: str | None) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            await service.reissue(token)
        assert exc_info.value.message == "리프레쉬 토큰 이상"

    @pytest.mark.asyncio
    async def test_deleted_user(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_refresh_token_store: MagicMock,
    ) -> None:
        mock_refresh_token_store.delete_by_refresh_token.return_value = UserId(5)
        mock_user_gateway.find_by_user_id.return_value = None

        with pytest.raises(UnauthorizedError):
            await service.reissue("refresh-token")
        mock_refresh_token_store.save_only_one_user.assert_not_awaited()


class TestLogout:
    """로그아웃 테스트."""

    @pytest.mark.asyncio
    async def test_logout_consumes_token(
        self,
        service: UserService,
        mock_refresh_token_store: MagicMock,
    ) -> None:
        mock_refresh_token_store.delete_by_refresh_token.return_value = UserId(5)

        await service.logout("refresh-token")

        mock_refresh_token_store.delete_by_refresh_token.assert_awaited_once_with("refresh-token")

    @pytest.mark.asyncio
    async def test_logout_unknown_token_is_noop(
        self,
        service: UserService,
        mock_refresh_token_store: MagicMock,
    ) -> None:
        mock_refresh_token_store.delete_by_refresh_token.return_value = None
        await service.logout("unknown")

    @pytest.mark.asyncio
    async def test_logout_missing_token(self, service: UserService) -> None:
        with pytest.raises(UnauthorizedError):
            await service.logout(None)


class TestAvailability:
    """아이디/전화번호 사용 가능 여부 테스트."""

    @pytest.mark.asyncio
    async def test_tofin_id_available(self, service: UserService) -> None:
        response = await service.is_available_tofin_id("tofinuser01")
        assert response.available is True
        assert response.reason == "사용 가능한 아이디 입니다"

    @pytest.mark.asyncio
    async def test_tofin_id_taken(self, service: UserService, mock_user_gateway: MagicMock) -> None:
        mock_user_gateway.is_exists_by_tofin_id.return_value = True

        response = await service.is_available_tofin_id("tofinuser01")

        assert response.available is False
        assert response.reason == "이미 사용중인 아이디 입니다"

    @pytest.mark.asyncio
    async def test_tofin_id_malformed(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
    ) -> None:
        response = await service.is_available_tofin_id("bad")

        assert response.tofin_id == "bad"
        assert response.available is False
        assert response.reason == "아이디는 8~30글자 사이, 영문+숫자 형식이어야 합니다."
        mock_user_gateway.is_exists_by_tofin_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_contact_available(self, service: UserService) -> None:
        response = await service.is_available_contact("01012345678")
        assert response.available is True
        assert response.reason == "사용가능한 전화번호 입니다."

    @pytest.mark.asyncio
    async def test_contact_taken(
        self,
        service: UserService,
        mock_normal_user_gateway: MagicMock,
    ) -> None:
        mock_normal_user_gateway.exists_by_contact.return_value = True

        response = await service.is_available_contact("01012345678")

        assert response.available is False
        assert response.reason == "이미 사용 중인 전화번호 입니다."

    @pytest.mark.asyncio
    async def test_contact_malformed(self, service: UserService) -> None:
        response = await service.is_available_contact("010-1234-5678")
        assert response.available is False
        assert response.reason == "전화 번호 형식이 아닙니다."


class TestConnectAssets:
    """자산 연결 테스트."""

    @staticmethod
    def _request(contact: str = "01012345678") -> ConnectAssetsServiceRequest:
        return ConnectAssetsServiceRequest(
            user_id=1,
            contact=contact,
            back_social_id="1234567",
            social_name="홍길동",
        )

    @pytest.mark.asyncio
    async def test_connect_assets_returns_accounts_then_cards(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_normal_user_gateway: MagicMock,
        mock_asset_gateway: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        mock_user_gateway.find_by_user_id.return_value = create_user(user_id=1)
        mock_asset_gateway.get_assets.return_value = AssetInfoResponse(
            accounts=[
                AccountResponse(
                    account_number="110-123",
                    account_type="SAVINGS",
                    name="입출금통장",
                    cash=15000,
                    logo="https://cdn.example.com/bank.png",
                ),
            ],
            cards=[CardResponse(card_number="9410-1234", name="체크카드", image=None)],
        )

        assets = await service.connect_assets(self._request())

        assert [a.product_type for a in assets] == ["SAVINGS", "CARD"]
        assert assets[0].cash == 15000
        assert assets[0].image == "https://cdn.example.com/bank.png"
        assert assets[1].cash is None
        assert assets[1].number == "9410-1234"

        saved = mock_normal_user_gateway.save.call_args.args[0]
        assert saved.contact == Contact("01012345678")
        assert saved.is_asset_connected is True
        mock_normal_user_gateway.exists_by_contact.assert_awaited_once_with(
            Contact("01012345678"), exclude_user_id=UserId(1)
        )
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_contact_used_by_other_user(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_normal_user_gateway: MagicMock,
        mock_asset_gateway: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        """다른 사용자의 전화번호면 연결 정보가 바뀌지 않습니다."""
        user = create_normal_user(user_id=1)
        mock_user_gateway.find_by_user_id.return_value = user
        mock_normal_user_gateway.exists_by_contact.return_value = True

        with pytest.raises(BadRequestError) as exc_info:
            await service.connect_assets(self._request())

        assert exc_info.value.message == "해당 전화번호는 이미 사용 중 입니다."
        assert user.is_asset_connected is False
        assert user.contact is None
        mock_normal_user_gateway.save.assert_not_awaited()
        mock_asset_gateway.get_assets.assert_not_awaited()
        mock_transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_not_found(self, service: UserService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await service.connect_assets(self._request())
        assert exc_info.value.message == "해당 유저가 존재하지 않습니다."

    @pytest.mark.asyncio
    async def test_malformed_contact(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
    ) -> None:
        mock_user_gateway.find_by_user_id.return_value = create_user(user_id=1)

        with pytest.raises(BadRequestError) as exc_info:
            await service.connect_assets(self._request(contact="0101234"))
        assert exc_info.value.message == "전화 번호 형식이 아닙니다."

    @pytest.mark.asyncio
    async def test_provider_failure_is_rolled_back(
        self,
        service: UserService,
        mock_user_gateway: MagicMock,
        mock_asset_gateway: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        mock_user_gateway.find_by_user_id.return_value = create_user(user_id=1)
        mock_asset_gateway.get_assets.side_effect = ExternalServiceError("자산 정보를 가져올 수 없습니다.")

        with pytest.raises(ExternalServiceError):
            await service.connect_assets(self._request())

        mock_transaction_manager.commit.assert_not_awaited()
        mock_transaction_manager.rollback.assert_awaited_once()


class TestSetPublicOption:
    """자산 공개 옵션 테스트."""

    @pytest.mark.asyncio
    async def test_before_connect_assets(
        self,
        service: UserService,
        mock_normal_user_gateway: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        mock_normal_user_gateway.find_by_user_id.return_value = create_normal_user(user_id=1)

        with pytest.raises(BadRequestError) as exc_info:
            await service.set_public_option(
                SetPublicOptionServiceRequest(user_id=1, public_amount=True, public_percent=True)
            )

        assert exc_info.value.message == "자산 연결부터 하세요"
        mock_normal_user_gateway.save.assert_not_awaited()
        mock_transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_after_connect_assets(
        self,
        service: UserService,
        mock_normal_user_gateway: MagicMock,
        mock_transaction_manager: MagicMock,
    ) -> None:
        user = create_normal_user(user_id=1, contact="01012345678")
        mock_normal_user_gateway.find_by_user_id.return_value = user

        await service.set_public_option(
            SetPublicOptionServiceRequest(user_id=1, public_amount=True, public_percent=False)
        )

        assert user.public_amount is True
        assert user.public_percent is False
        mock_normal_user_gateway.save.assert_awaited_once_with(user)
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_detail_not_found(self, service: UserService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await service.set_public_option(
                SetPublicOptionServiceRequest(user_id=1, public_amount=True, public_percent=True)
            )
        assert exc_info.value.message == "해당 유저의 세부 정보가 존재하지 않습니다."


def _with_id(user, user_id: int):
    user.id = UserId(user_id)
    return user
