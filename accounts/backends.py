# accounts/backends.py
import logging
from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.core.exceptions import PermissionDenied

logger = logging.getLogger(__name__)
UserModel = get_user_model()


class EmailBackend(ModelBackend):
    """
    Login by email or username (case-insensitive). Users whose console
    profile is inactive are refused.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        if password is None:
            return None

        identifier = username or kwargs.get("email")
        if not identifier:
            return None

        identifier = str(identifier).strip()

        user = UserModel.objects.filter(email__iexact=identifier).first()
        if user is None:
            username_field = getattr(UserModel, "USERNAME_FIELD", "username")
            user = UserModel.objects.filter(
                **{f"{username_field}__iexact": identifier}
            ).first()

        if user is None:
            logger.debug("Auth backend: no user found for identifier=%s", identifier)
            # run the hasher anyway to even out response timing
            UserModel().set_password(password)
            return None

        if not user.check_password(password):
            logger.debug("Auth backend: password mismatch pk=%s", user.pk)
            return None

        if not self.user_can_authenticate(user):
            # no later backend may accept this user
            logger.info("Auth backend: refused inactive user pk=%s", user.pk)
            raise PermissionDenied

        return user

    def user_can_authenticate(self, user):
        if not super().user_can_authenticate(user):
            return False

        profile = getattr(user, "profile", None)
        if profile is not None and not profile.is_active:
            return False

        return True
