import logging

import openai

from domain.aopenai import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from domain.exceptions import UpstreamError
from domain.models import PromptMessages


logger = logging.getLogger(__name__)


class LLMService:
    """Talks to the generation service. Build one and share it."""

    def __init__(
        self,
        openai_client: openai.AsyncClient,
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self.openai_client = openai_client
        self.model = model
        self.temperature = temperature

    async def close(self) -> None:
        await self.openai_client.close()

    async def generate(self, messages: PromptMessages) -> str:
        """Request a single JSON completion for the messages.

        Raises:
            UpstreamError: The call failed or the response was not a completion.
        """
        logger.debug("Requesting completion from %s", self.model)
        try:
            resp = await self.openai_client.chat.completions.create(
                model=self.model,
                messages=messages.to_list(),
                response_format={"type": "json_object"},
                temperature=self.temperature,
                n=1,
            )
        except openai.APIStatusError as e:
            raise UpstreamError(e.message, status_code=e.status_code) from e
        except openai.OpenAIError as e:
            raise UpstreamError(str(e) or type(e).__name__) from e
        except ValueError as e:
            # A 200 with a body that is not JSON.
            raise UpstreamError(f"Unreadable completion response: {e}") from e

        try:
            choices = resp.choices
            content = choices[0].message.content if choices else None
        except AttributeError as e:
            # The SDK hands back the raw text when the body is not JSON.
            raise UpstreamError(
                f"Unexpected completion response: {type(resp).__name__}"
            ) from e

        if not choices:
            raise UpstreamError("Completion response had no choices.")

        return content or ""
