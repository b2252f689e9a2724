"""Application layer DI providers."""

from dishka import Scope, provide

from threadify.application.usecase.auth import (
    AuthenticateUseCase,
    ChangePasswordUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpUseCase,
    UpdateProfileUseCase,
)
from threadify.application.usecase.comment import (
    AddCommentUseCase,
    RemoveCommentUseCase,
)
from threadify.application.usecase.like import ToggleLikeUseCase
from threadify.application.usecase.photo import (
    DeletePhotoUseCase,
    GetPhotoUseCase,
    UploadPhotoUseCase,
)
from threadify.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    UpdateThreadUseCase,
)
from threadify.domain.service import (
    LikeService,
    PhotoService,
    ThreadService,
    TokenService,
    UserService,
)
from threadify.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_authenticate_use_case(
        self, token_service: TokenService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(token_service=token_service)

    @provide
    def get_sign_up_use_case(self, user_service: UserService) -> SignUpUseCase:
        """Provide sign-up use case."""
        return SignUpUseCase(user_service=user_service)

    @provide
    def get_sign_in_use_case(
        self, user_service: UserService, token_service: TokenService
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(user_service=user_service, token_service=token_service)

    @provide
    def get_change_password_use_case(
        self, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service)

    @provide
    def get_sign_out_use_case(self, token_service: TokenService) -> SignOutUseCase:
        """Provide sign-out use case."""
        return SignOutUseCase(token_service=token_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    # Thread use cases
    @provide
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide
    def get_list_threads_use_case(
        self, thread_service: ThreadService
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service)

    @provide
    def get_update_thread_use_case(
        self, thread_service: ThreadService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(thread_service=thread_service)

    @provide
    def get_delete_thread_use_case(
        self, thread_service: ThreadService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(thread_service=thread_service)

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, thread_service: ThreadService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(thread_service=thread_service)

    @provide
    def get_remove_comment_use_case(
        self, thread_service: ThreadService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(thread_service=thread_service)

    # Like use cases
    @provide
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    # Profile photo use cases
    @provide
    def get_upload_photo_use_case(
        self, photo_service: PhotoService
    ) -> UploadPhotoUseCase:
        """Provide upload photo use case."""
        return UploadPhotoUseCase(photo_service=photo_service)

    @provide
    def get_get_photo_use_case(self, photo_service: PhotoService) -> GetPhotoUseCase:
        """Provide get photo use case."""
        return GetPhotoUseCase(photo_service=photo_service)

    @provide
    def get_delete_photo_use_case(
        self, photo_service: PhotoService
    ) -> DeletePhotoUseCase:
        """Provide delete photo use case."""
        return DeletePhotoUseCase(photo_service=photo_service)
