from pydantic import BaseModel, Field
from typing import Optional

class SoftwareEngineerInput(BaseModel):
    name: str = Field(..., examples=["Ana López"])
    techStack: str = Field(..., examples=["Java, Spring"], description="쉼표로 구분한 기술 스택")

    class Config:
        extra = 'ignore'    # id, learningPathRecommendation 등은 무시
        json_schema_extra = {
            "example": {
                "name": "María González",
                "techStack": "JavaScript, React"
            }
        }

class SoftwareEngineer(BaseModel):
    id: Optional[int] = Field(None, description="저장 시 자동 생성되는 식별자")
    name: str
    techStack: str
    learningPathRecommendation: Optional[str] = Field(None, description="LLM 이 생성한 학습 경로 추천")
