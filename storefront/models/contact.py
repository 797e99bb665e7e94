"""Contact form models"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class ContactMessage(BaseModel):
    """Message submitted through the contact form"""
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)

    @field_validator("name", "subject", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    def template_params(self) -> dict[str, str]:
        """Form field values as sent to the email template"""
        return self.model_dump()
