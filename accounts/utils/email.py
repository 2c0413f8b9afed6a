from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.conf import settings


def send_invite_email(*, name, email, password, user_type):
    """
    Sends the branded welcome email with the temporary password.
    """
    user_type_display = user_type.replace("_", " ").title()
    subject = f"Welcome to {settings.SITE_NAME} - {user_type_display} Access"

    context = {
        "name": name,
        "email": email,
        "password": password,
        "user_type": user_type_display,
        "site_name": settings.SITE_NAME,
    }

    html_content = render_to_string("accounts/emails/invite.html", context)
    text_content = render_to_string("accounts/emails/invite.txt", context)

    message = EmailMultiAlternatives(
        subject=subject,
        body=text_content,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[email],
    )
    message.attach_alternative(html_content, "text/html")
    message.send(fail_silently=False)
