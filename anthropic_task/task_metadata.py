"""Declarative metadata for the ``ChatCompletion`` task.

Plain data consumed by hosts that build documentation or plugin catalogs, and
by ``python -m anthropic_task.cli examples``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from .base.metrics import COUNTER_TYPE, TOKEN_UNIT
from .config.defaults import INPUT_TOKENS_METRIC, OUTPUT_TOKENS_METRIC

TASK_TYPE = "anthropic_task.ChatCompletion"

TITLE = "Send chat messages with Claude"

DESCRIPTION = (
    "Calls the Anthropic Messages API with rendered inputs, optional system prompt, "
    "and sampling controls; defaults to maxTokens 1024 and temperature 1.0 while "
    "emitting token usage counters. Create an API key in the Anthropic Console "
    "(https://console.anthropic.com/settings/keys); see "
    "https://docs.anthropic.com/claude/reference/messages_post for the API reference."
)


@dataclass(frozen=True)
class MetricDescriptor:
    name: str
    type: str
    unit: str
    description: str


@dataclass(frozen=True)
class TaskExample:
    title: str
    code: str
    full: bool = True


METRICS: List[MetricDescriptor] = [
    MetricDescriptor(
        name=INPUT_TOKENS_METRIC,
        type=COUNTER_TYPE,
        unit=TOKEN_UNIT,
        description="Number of input tokens processed by the model.",
    ),
    MetricDescriptor(
        name=OUTPUT_TOKENS_METRIC,
        type=COUNTER_TYPE,
        unit=TOKEN_UNIT,
        description="Number of output tokens generated by the model.",
    ),
]

EXAMPLES: List[TaskExample] = [
    TaskExample(
        title="Chat completion using Claude.",
        code=f"""\
id: anthropic_chat_completion
namespace: company.team

tasks:
  - id: chat_completion
    type: {TASK_TYPE}
    apiKey: "{{{{ secret('ANTHROPIC_API_KEY') }}}}"
    model: "claude-3-5-sonnet-20241022"
    maxTokens: 1024
    messages:
      - type: USER
        content: "What is the capital of Japan? Answer with a unique word and without any punctuation."
""",
    ),
    TaskExample(
        title="Code generation using Claude.",
        code=f"""\
id: anthropic_code_generation
namespace: company.team

tasks:
  - id: code_generation
    type: {TASK_TYPE}
    apiKey: "{{{{ secret('ANTHROPIC_API_KEY') }}}}"
    model: "claude-3-5-sonnet-20241022"
    maxTokens: 1500
    temperature: 0.3
    messages:
      - type: USER
        content: |
          Write a Python function that:
          1. Takes a list of numbers as input
          2. Filters out negative numbers
          3. Calculates the average of remaining positive numbers
          4. Returns the result rounded to 2 decimal places
          5. Include error handling for empty lists
          Also provide 3 test cases with expected outputs.
""",
    ),
    TaskExample(
        title="Conversation with follow-up context.",
        code=f"""\
id: anthropic_context_conversation
namespace: company.team

tasks:
  - id: code_generation
    type: {TASK_TYPE}
    apiKey: "{{{{ secret('ANTHROPIC_API_KEY') }}}}"
    model: "claude-3-5-sonnet-20241022"
    maxTokens: 800
    temperature: 0.5
    messages:
      - type: USER
        content: "Explain quantum computing in simple terms."
      - type: ASSISTANT
        content: "Quantum computing uses quantum mechanical phenomena like superposition and entanglement to process information differently than classical computers. Instead of bits that are either 0 or 1, quantum computers use quantum bits (qubits) that can exist in multiple states simultaneously."
      - type: USER
        content: "That is helpful! Can you give me a practical example of how this could be used in everyday life in the next 10 years?"
""",
    ),
    TaskExample(
        title="Structured output using tool use.",
        code=f"""\
id: anthropic_structured_output
namespace: company.team

tasks:
  - id: extract_data
    type: {TASK_TYPE}
    apiKey: "{{{{ secret('ANTHROPIC_API_KEY') }}}}"
    model: "claude-3-5-sonnet-20241022"
    maxTokens: 1024
    messages:
      - type: USER
        content: |
          Extract the following information from this text:
          "John Doe is 30 years old and works as a Software Engineer in San Francisco."
    tools:
      - name: extract_person_info
        description: "Extract structured information about a person"
        input_schema:
          type: object
          properties:
            name:
              type: string
              description: "The person's full name"
            age:
              type: integer
              description: "The person's age"
            occupation:
              type: string
              description: "The person's job title"
            location:
              type: string
              description: "The person's location"
          required:
            - name
            - age
""",
    ),
]


def describe() -> Dict[str, Any]:
    """Return the full metadata document as plain JSON-compatible data."""
    return {
        "type": TASK_TYPE,
        "title": TITLE,
        "description": DESCRIPTION,
        "examples": [asdict(e) for e in EXAMPLES],
        "metrics": [asdict(m) for m in METRICS],
    }


__all__ = [
    "TASK_TYPE",
    "TITLE",
    "DESCRIPTION",
    "MetricDescriptor",
    "TaskExample",
    "METRICS",
    "EXAMPLES",
    "describe",
]
