import logging
from openai import AsyncAzureOpenAI, OpenAIError

from ..config import settings

logger = logging.getLogger(__name__)


class TranslationError(Exception):
    """Raised when the translation backend cannot produce a translation"""


class TranslationService:
    def __init__(self):
        try:
            self.client = AsyncAzureOpenAI(
                api_key=settings.azure_openai.api_key,
                api_version=settings.azure_openai.api_version,
                azure_endpoint=settings.azure_openai.endpoint
            )
            logger.info("AsyncAzureOpenAI client initialized successfully")
        except OpenAIError as e:
            logger.error(f"Failed to initialize OpenAI client: {e}")
            self.client = None
        self.deployment_name = settings.azure_openai.deployment

    @property
    def available(self) -> bool:
        return self.client is not None

    async def translate(self, text: str, target_lang: str) -> str:
        """Translate text into the language with ISO code target_lang.

        Raises TranslationError if the backend is unavailable, fails, or
        answers with no content.
        """
        if not text.strip():
            logger.info("Empty text provided, returning as-is")
            return text

        if self.client is None:
            raise TranslationError("Azure OpenAI client not available")

        logger.info(f"Translating {len(text)} characters to {target_lang} with deployment {self.deployment_name}")

        try:
            response = await self.client.chat.completions.create(
                model=self.deployment_name,
                messages=[
                    {"role": "system", "content": "You are a professional translator. Translate the given text accurately and naturally. Keep Slack formatting such as *bold*, links and mentions intact. Only return the translation, no explanations."},
                    {"role": "user", "content": f"Translate the following text to the language with ISO code '{target_lang}':\n\n{text}"}
                ],
                max_tokens=1000,
                temperature=0.1
            )
        except OpenAIError as e:
            raise TranslationError(f"Azure OpenAI translation error ({type(e).__name__}): {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if content is None:
            raise TranslationError("Azure OpenAI returned an empty response")

        translated_text = content.strip()
        logger.info(f"Translation completed - Original: '{text[:50]}...' -> Translated: '{translated_text[:50]}...'")
        return translated_text


# Global instance
translation_service = TranslationService()
