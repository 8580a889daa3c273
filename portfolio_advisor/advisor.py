import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import openai
from openai.types.chat import (
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)

from .prompts import SYSTEM_PROMPT
from .settings import Settings

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    INVALID_RESPONSE = "invalid_response"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class AdvisorySuccess:
    advisory: Any


@dataclass(frozen=True)
class AdvisoryFailure:
    kind: FailureKind
    detail: str


AdvisoryResult = Union[AdvisorySuccess, AdvisoryFailure]


def _failure(kind: FailureKind, error: Exception) -> AdvisoryFailure:
    logger.exception("AI Error (%s): %s", kind.value, error)
    return AdvisoryFailure(kind=kind, detail=str(error))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Completion contains non-JSON constant {name}")


async def request_advisory(prompt: str, settings: Settings) -> AdvisoryResult:
    """Run a single completion round trip and parse the reply as JSON."""

    openai_messages: list[ChatCompletionMessageParam] = [
        ChatCompletionSystemMessageParam(role="system", content=SYSTEM_PROMPT),
        ChatCompletionUserMessageParam(role="user", content=prompt),
    ]

    try:
        client = openai.AsyncOpenAI(api_key=settings.openai_api_key)
    except openai.OpenAIError as e:
        return _failure(FailureKind.CONFIGURATION, e)

    logger.info(
        "Requesting advisory from %s (prompt: %d chars)",
        settings.openai_model,
        len(prompt),
    )
    try:
        async with client:
            completion = await client.chat.completions.create(
                model=settings.openai_model,
                messages=openai_messages,
                response_format={"type": "json_object"},
            )
    except openai.APIError as e:
        return _failure(FailureKind.UPSTREAM, e)
    except Exception as e:
        return _failure(FailureKind.UNEXPECTED, e)

    try:
        content = completion.choices[0].message.content
        if not content:
            raise ValueError("Completion returned no content")
        # NaN and Infinity are not JSON and cannot be sent back to the caller.
        advisory = json.loads(content, parse_constant=_reject_constant)
        return AdvisorySuccess(advisory=advisory)
    except (ValueError, IndexError) as e:
        # json.JSONDecodeError is a ValueError
        return _failure(FailureKind.INVALID_RESPONSE, e)
    except Exception as e:
        return _failure(FailureKind.UNEXPECTED, e)
