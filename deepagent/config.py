"""Configuration management for deepagent."""
import os
from dotenv import load_dotenv
from dataclasses import dataclass

load_dotenv()

@dataclass
class LLMConfig:
    provider: str = os.getenv("LLM_PROVIDER", "openai")
    model: str = os.getenv("LLM_MODEL", "qwen/qwen3-4b-2507")
    base_url: str = os.getenv("LLM_BASE_URL", "http://127.0.0.1:1234/v1")
    api_key: str = os.getenv("LLM_API_KEY", "")
    temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.0"))
    max_tokens: int = int(os.getenv("LLM_MAX_TOKENS", "4096"))

@dataclass
class AgentConfig:
    # Step ceiling for every graph run, nested sub-agent runs included
    recursion_limit: int = int(os.getenv("AGENT_RECURSION_LIMIT", "50"))
    history_file: str = os.getenv("AGENT_HISTORY_FILE", "~/.deep_agent_history")

# Singleton instances
llm_config = LLMConfig()
agent_config = AgentConfig()
