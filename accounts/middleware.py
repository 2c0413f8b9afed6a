import logging

from django.contrib.auth import logout

from accounts.session import ConsoleSession

logger = logging.getLogger(__name__)


class ConsoleSessionMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.console_session = None

        if request.user.is_authenticated:
            session = ConsoleSession.load(request)

            if session is None or session.user_id != request.user.pk:
                # logged in through another door (e.g. Django admin)
                session = ConsoleSession.start(request, request.user)

            elif session.is_expired():
                logger.info("Console session for %s expired", session.email)
                ConsoleSession.end(request)
                logout(request)
                session = None

            request.console_session = session

        return self.get_response(request)
