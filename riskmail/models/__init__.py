from riskmail.models.email import Email, EmailBuilder, EmailPayload

__all__ = ["Email", "EmailBuilder", "EmailPayload"]
