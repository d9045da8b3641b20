"""
Prompt builder for LLM requests.

Responsible for:
- Loading and rendering Jinja2 templates (classification + detailed answer)
- Normalising the visitor's question before it reaches the model
- Constructing complete LLMGenerationRequest objects
"""

from pathlib import Path
from typing import Optional
from jinja2 import Environment, FileSystemLoader
import structlog

from legal_assistant.models.enums import LegalCategory
from legal_assistant.models.llm_models import LLMGenerationRequest


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"
FILTER_TEMPLATE = "filter_question_prompt.txt"
DETAILED_TEMPLATE = "detailed_response_prompt.txt"

MAX_QUESTION_CHARS = 2000


def normalize_question(question: str, max_chars: int = MAX_QUESTION_CHARS) -> str:
    """Collapse whitespace and cap the length of a visitor question."""
    collapsed = " ".join(question.split())
    return collapsed[:max_chars]


class PromptBuilder:
    """
    Build LLM requests for question filtering and detailed answers.

    Templates are loaded once at construction time.
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        firm_name: str = "Bárbara & Abogados",
        default_model: str = "gemini-2.5-flash-lite",
        default_temperature: float = 0.3,
        default_max_tokens: int = 500,
        detailed_temperature: float = 0.5,
        detailed_max_tokens: int = 800,
        detailed_max_words: int = 300,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing prompt templates (bundled prompts/ by default)
            firm_name: Firm name shown in the assistant persona
            default_model: Default model name
            default_temperature: Temperature for classification
            default_max_tokens: Max tokens for classification
            detailed_temperature: Temperature for detailed answers
            detailed_max_tokens: Max tokens for detailed answers
            detailed_max_words: Word limit asked of the model for detailed answers
        """
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.firm_name = firm_name
        self.default_model = default_model
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens
        self.detailed_temperature = detailed_temperature
        self.detailed_max_tokens = detailed_max_tokens
        self.detailed_max_words = detailed_max_words

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False  # We're generating prompts, not HTML
        )

        try:
            self.filter_template = self.jinja_env.get_template(FILTER_TEMPLATE)
            self.detailed_template = self.jinja_env.get_template(DETAILED_TEMPLATE)
            logger.info("Loaded prompt templates", templates_dir=str(self.templates_dir))
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e))
            raise

    def build_filter_prompt(self, question: str) -> str:
        """Render the classification prompt for one question."""
        return self.filter_template.render(
            firm_name=self.firm_name,
            categories=[category.value for category in LegalCategory],
            question=normalize_question(question),
        ).strip()

    def build_detailed_prompt(self, question: str, category: LegalCategory | str) -> str:
        """Render the lawyer prompt used for a detailed answer."""
        category_value = category.value if isinstance(category, LegalCategory) else category
        return self.detailed_template.render(
            category=category_value,
            max_words=self.detailed_max_words,
            question=normalize_question(question),
        ).strip()

    def build_filter_request(self, question: str, model: Optional[str] = None) -> LLMGenerationRequest:
        """Complete classification request (JSON output)."""
        prompt = self.build_filter_prompt(question)
        logger.debug("Filter prompt built", prompt_length=len(prompt))
        return LLMGenerationRequest(
            prompt=prompt,
            model=model or self.default_model,
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
            response_mime_type="application/json",
        )

    def build_detailed_request(
        self,
        question: str,
        category: LegalCategory | str,
        model: Optional[str] = None,
    ) -> LLMGenerationRequest:
        """Complete detailed-answer request (free text output)."""
        prompt = self.build_detailed_prompt(question, category)
        logger.debug("Detailed prompt built", prompt_length=len(prompt), category=str(category))
        return LLMGenerationRequest(
            prompt=prompt,
            model=model or self.default_model,
            temperature=self.detailed_temperature,
            max_tokens=self.detailed_max_tokens,
        )
