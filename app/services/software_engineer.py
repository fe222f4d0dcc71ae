# app/services/software_engineer.py

import logging
from typing import Optional, Tuple

from app.exceptions import InvalidInput, NotFound
from app.schemas import SoftwareEngineer
from .ai import ChatClient
from .profile_store import ProfileStore

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Based on the profile of the programmer with stack {tech_stack} and name {name}, "
    "respond with what study path and recommendations this person should follow."
)


def build_prompt(record: SoftwareEngineer) -> str:
    return PROMPT_TEMPLATE.format(tech_stack=record.techStack, name=record.name)


class SoftwareEngineerService:
    def __init__(self, store: ProfileStore, chat_client: ChatClient):
        if store is None:
            raise InvalidInput("store must not be None")
        if chat_client is None:
            raise InvalidInput("chat_client must not be None")
        self.store = store
        self.chat_client = chat_client

    def get_all(self) -> Tuple[SoftwareEngineer, ...]:
        return tuple(self.store.find_all())

    def insert(self, record: Optional[SoftwareEngineer]) -> SoftwareEngineer:
        """
        LLM 으로 학습 경로 추천을 만든 뒤 저장합니다.
        추천 생성이 실패하면 (GenerationFailure) 아무것도 저장하지 않습니다.
        """
        if record is None:
            raise InvalidInput("software engineer must not be None")

        prompt = build_prompt(record)
        recommendation = self.chat_client.chat(prompt)
        logger.debug("Recommendation for %r: %r", record.name, recommendation)

        enriched = record.model_copy(update={"learningPathRecommendation": recommendation})
        saved = self.store.save(enriched)
        logger.info("Saved software engineer id=%s", saved.id)
        return saved

    def get_by_id(self, engineer_id: Optional[int]) -> SoftwareEngineer:
        if engineer_id is None:
            raise InvalidInput("id must not be None")
        record = self.store.find_by_id(engineer_id)
        if record is None:
            raise NotFound(f"software engineer with id {engineer_id} not found")
        return record

    def delete_by_id(self, engineer_id: Optional[int]) -> None:
        if engineer_id is None:
            raise InvalidInput("id must not be None")
        # 존재하지 않는 id 는 조용히 무시
        self.store.delete_by_id(engineer_id)
        logger.info("Deleted software engineer id=%s", engineer_id)

    def update(self, engineer_id: Optional[int], new_values: Optional[SoftwareEngineer]) -> None:
        if engineer_id is None:
            raise InvalidInput("id must not be None")
        if new_values is None:
            raise InvalidInput("software engineer must not be None")

        existing = self.get_by_id(engineer_id)
        # name, techStack 만 갱신 (id, 추천은 유지)
        merged = existing.model_copy(update={"name": new_values.name, "techStack": new_values.techStack})
        self.store.save(merged)
        logger.info("Updated software engineer id=%s", engineer_id)
