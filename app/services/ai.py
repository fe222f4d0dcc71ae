# app/services/ai.py

import os
import logging
from typing import Optional

import openai
from openai import OpenAI
from dotenv import load_dotenv

from app.exceptions import InvalidInput, GenerationFailure

# 로거 설정
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"OPENAI_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"OPENAI_TIMEOUT must be positive, got {raw!r}")
    return timeout


# 환경 변수 로드 (잘못된 값이면 import 시점에 실패)
load_dotenv()
DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
DEFAULT_TIMEOUT = parse_timeout(os.getenv("OPENAI_TIMEOUT"))


def build_openai_client() -> OpenAI:
    # SDK 기본 재시도(2회)를 끄고 요청당 한 번만 호출
    return OpenAI(max_retries=0)


class ChatClient:
    """
    OpenAI 호환 chat completion 엔드포인트에 prompt 를 보내고
    응답 텍스트를 그대로 돌려줍니다. 재시도나 스트리밍은 하지 않습니다.
    """

    def __init__(self, llm_client=None, model: Optional[str] = None, timeout: Optional[float] = None):
        self.model = model or DEFAULT_MODEL
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.client = llm_client if llm_client is not None else build_openai_client()

    def chat(self, prompt: str) -> str:
        if prompt is None or not prompt.strip():
            raise InvalidInput("prompt must not be empty")

        logger.debug("[LLM PROMPT] model=%s\n%s", self.model, prompt)
        kwargs = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except openai.OpenAIError as e:
            logger.error("[LLM ERROR] chat completion failed", exc_info=True)
            raise GenerationFailure(f"chat backend call failed: {e}") from e

        # 응답 구조 검증
        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error("[LLM ERROR] malformed response: %r", resp)
            raise GenerationFailure("chat backend returned a malformed response") from e

        if not isinstance(content, str) or not content.strip():
            logger.error("[LLM ERROR] empty response content: %r", content)
            raise GenerationFailure("chat backend returned an empty response")

        logger.debug("[LLM RAW RESPONSE]\n%r", content)
        return content
