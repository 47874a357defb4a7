import httpx
import openai


TIMEOUT = 60 * 2
DEFAULT_MODEL = "gpt-3.5-turbo-1106"
DEFAULT_TEMPERATURE = 0.5


def openai_client_factory(token: str | None) -> openai.AsyncClient:
    """One long-lived client. Retries are off, a failed call fails the request."""
    return openai.AsyncClient(
        api_key=token,
        max_retries=0,
        http_client=httpx.AsyncClient(timeout=TIMEOUT),
    )
