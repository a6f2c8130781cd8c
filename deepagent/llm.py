"""LLM factory for creating configured language models."""
from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI
from .config import llm_config

def get_llm(**overrides) -> BaseChatModel:
    """Get a configured chat model.

    The ``openai`` provider (the default, which also covers OpenAI-compatible
    local servers) is built directly; any other provider name is handed to
    ``init_chat_model``, which loads that provider's integration package.

    Args:
        **overrides: Override any config values (provider, model, temperature, etc.)
    """
    provider = overrides.get("provider", llm_config.provider)
    model = overrides.get("model", llm_config.model)
    temperature = overrides.get("temperature", llm_config.temperature)
    max_tokens = overrides.get("max_tokens", llm_config.max_tokens)
    api_key = overrides.get("api_key", llm_config.api_key)

    if provider == "openai":
        return ChatOpenAI(
            model=model,
            base_url=overrides.get("base_url", llm_config.base_url),
            api_key=api_key,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    kwargs = {"temperature": temperature, "max_tokens": max_tokens}
    if api_key:
        kwargs["api_key"] = api_key
    return init_chat_model(model, model_provider=provider, **kwargs)
