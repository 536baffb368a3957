"""
Contract analyzer: section segmentation, LLM extraction and reply validation.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Optional

import dotenv
import yaml
from openai import OpenAI

from .assembler import assemble
from .dates import normalize
from .models import ExtractionRecord
from .sanitizer import sanitize
from .segmenter import segment

dotenv.load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

# (system_prompt, user_prompt) -> raw reply text
ExtractFn = Callable[[str, str], str]


class ContractAnalyzer:
    """Extracts structured facts from real-estate contract text"""

    def __init__(
        self,
        prompts_file: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        extract_fn: Optional[ExtractFn] = None
    ):
        """
        Initialize the analyzer.

        Args:
            prompts_file: Path to prompts YAML file (default: config/prompts.yaml)
            api_key: OpenAI API key (or set OPENAI_API_KEY env var)
            model: OpenAI model name (or set OPENAI_MODEL env var)
            extract_fn: Replacement for the OpenAI call, taking the system and
                user prompts and returning the raw reply
        """
        project_root = Path(__file__).parent.parent.parent

        if prompts_file is None:
            prompts_file = str(project_root / "config" / "prompts.yaml")

        self.prompts = self._load_prompts(prompts_file)
        self.model = model or os.getenv('OPENAI_MODEL', DEFAULT_MODEL)

        if extract_fn is not None:
            self.client = None
            self._extract_fn = extract_fn
            return

        api_key = api_key or os.getenv('OPENAI_API_KEY')
        if not api_key:
            raise ValueError("OpenAI API key not set. Set OPENAI_API_KEY or pass api_key.")

        self.client = OpenAI(api_key=api_key)
        self._extract_fn = self._call_openai

    def _load_prompts(self, prompts_file: str) -> Dict[str, Dict[str, str]]:
        """Load prompts from YAML file"""
        try:
            with open(prompts_file, 'r', encoding='utf-8') as f:
                prompts_data = yaml.safe_load(f)
            return prompts_data.get('prompts', {})
        except FileNotFoundError:
            raise FileNotFoundError(f"Prompts file '{prompts_file}' not found!")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing prompts YAML file: {e}")

    def _get_prompt(self, prompt_category: str, prompt_type: str, **kwargs) -> str:
        """
        Get a prompt template and format it with provided variables.

        Args:
            prompt_category: Category of prompt (e.g., 'extraction')
            prompt_type: Type of prompt ('system' or 'user_template')
            **kwargs: Variables to format into the template

        Returns:
            Formatted prompt string
        """
        if prompt_category not in self.prompts:
            raise ValueError(f"Prompt category '{prompt_category}' not found in prompts file")

        if prompt_type not in self.prompts[prompt_category]:
            raise ValueError(f"Prompt type '{prompt_type}' not found in category '{prompt_category}'")

        template = self.prompts[prompt_category][prompt_type]

        try:
            return template.format(**kwargs)
        except KeyError as e:
            raise ValueError(f"Missing required variable '{e}' for prompt template")

    def _call_openai(self, system_prompt: str, user_prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt}
            ],
            temperature=0.1,
            max_tokens=1000
        )
        return response.choices[0].message.content or ""

    def build_context(self, contract_text: str) -> str:
        """Segment contract text and render the relevant sections."""
        context = assemble(segment(contract_text))
        logger.info(f"Processed text length: {len(context)} (from {len(contract_text or '')})")
        return context

    def extract_with_llm(self, context: str) -> str:
        """
        Send the assembled context to the extraction model.

        Args:
            context: Output of build_context

        Returns:
            Raw reply text, not yet cleaned or validated
        """
        system_prompt = self._get_prompt("extraction", "system")
        user_prompt = self._get_prompt("extraction", "user_template", context=context)
        return self._extract_fn(system_prompt, user_prompt)

    def analyze(self, contract_text: str) -> ExtractionRecord:
        """
        Run the full pipeline on plain contract text.

        Args:
            contract_text: Text already extracted from the contract document

        Returns:
            ExtractionRecord with every deadline in YYYY-MM-DD form or None

        Raises:
            MalformedReplyError: If the model reply is not parseable JSON
            SchemaViolationError: If the model reply is missing required fields
        """
        context = self.build_context(contract_text)
        raw_reply = self.extract_with_llm(context)

        record = sanitize(raw_reply)
        normalize(record.deadlines)
        return record
