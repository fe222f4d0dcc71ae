# app/deps.py
from functools import lru_cache
from fastapi import Depends
from app.services.ai import ChatClient, build_openai_client
from app.services.profile_store import PostgresProfileStore
from app.services.software_engineer import SoftwareEngineerService

@lru_cache()
def get_openai_client():
    return build_openai_client()

@lru_cache()
def get_profile_store():
    return PostgresProfileStore()

def get_chat_client(openai_client=Depends(get_openai_client)):
    return ChatClient(llm_client=openai_client)

def get_software_engineer_service(
    store=Depends(get_profile_store),
    chat_client=Depends(get_chat_client),
):
    return SoftwareEngineerService(store=store, chat_client=chat_client)
