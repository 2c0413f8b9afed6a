# core/exceptions.py
"""
Error taxonomy shared by every console service.

Services raise these; the API layer turns them into user-facing
messages (see core.api.exception_handler). Nothing here is retried.
"""


class ConsoleError(Exception):
    status_code = 400
    code = "error"
    default_message = "Something went wrong."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ConsoleError):
    status_code = 400
    code = "invalid"
    default_message = "Invalid input."


class NotFound(ConsoleError):
    status_code = 404
    code = "not_found"
    default_message = "Record not found."


class DuplicateRecord(ConsoleError):
    status_code = 409
    code = "duplicate"
    default_message = "A record with these details already exists."


class BusinessRuleViolation(ConsoleError):
    status_code = 409
    code = "rule_violation"
    default_message = "This action is not allowed."


class DuplicateEmail(DuplicateRecord):
    code = "duplicate_email"

    def __init__(self, email):
        self.email = email
        super().__init__(f"A record with email {email} already exists.")
