"""Chat-completion data models.

Contains Pydantic models for the chat wire format:
- Role: Message role tag
- ChatMessage: A single role-tagged message
- ChatRequest: The request body sent to the provider
- Choice / ChatResponse: The subset of the response body that is consumed
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """Roles a chat message can carry."""

    SYSTEM = "system"
    USER = "user"


class ChatMessage(BaseModel):
    """A role-tagged message in a chat-completion request."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Body of a chat-completion request.

    Attributes:
        model: The model identifier to run the completion with.
        messages: Ordered messages; the system message always comes first.
    """

    model: str
    messages: list[ChatMessage]

    @classmethod
    def for_exchange(cls, model: str, system_prompt: str, user_content: str) -> "ChatRequest":
        """Build the two-message request used for a single exchange.

        Args:
            model: The model identifier.
            system_prompt: Instruction text sent with the system role.
            user_content: Content to act on (usually a diff), sent verbatim.

        Returns:
            A ChatRequest holding exactly [system, user].
        """
        return cls(
            model=model,
            messages=[
                ChatMessage(role=Role.SYSTEM, content=system_prompt),
                ChatMessage(role=Role.USER, content=user_content),
            ],
        )

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the provider."""
        return self.model_dump(mode="json")


class ChoiceMessage(BaseModel):
    """Message part of a completion choice."""

    content: str


class Choice(BaseModel):
    """A single completion choice."""

    message: ChoiceMessage


class ChatResponse(BaseModel):
    """Body of a successful chat-completion response."""

    choices: list[Choice]

    def first_content(self) -> str | None:
        """Return the first choice's content, or None if there are no choices."""
        if not self.choices:
            return None
        return self.choices[0].message.content
