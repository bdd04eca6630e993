"""OAuth Commands."""

from apps.oauth_login.application.oauth.commands.authorize import OAuthAuthorizeInteractor
from apps.oauth_login.application.oauth.commands.callback import OAuthCallbackInteractor

__all__ = ["OAuthAuthorizeInteractor", "OAuthCallbackInteractor"]
