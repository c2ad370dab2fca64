"""Prompt text and output schema for deduction suggestions."""

import json

DEDUCTION_SUGGESTIONS_SCHEMA: dict = {
    "type": "object",
    "required": ["suggestedDeductions", "summary"],
    "properties": {
        "suggestedDeductions": {
            "type": "array",
            "items": {"type": "string"},
        },
        "summary": {"type": "string", "minLength": 1},
    },
}

_EXAMPLE_OUTPUT = {
    "suggestedDeductions": [
        "Example Deduction 1: e.g., Home office expenses if criteria are met.",
        "Example Deduction 2: e.g., Portion of medical bills exceeding AGI threshold.",
    ],
    "summary": (
        "This is a sample summary. Based on the provided information, these are "
        "potential areas for tax deductions. Further review by a tax professional "
        "is recommended."
    ),
}


def render_prompt(financial_summary: str, document_count: int) -> str:
    documents = (
        "\n".join(f"- Document {i} (attached)" for i in range(1, document_count + 1))
        or "- None"
    )
    return (
        "You are an expert tax advisor. Analyze the following financial data and "
        "uploaded documents to suggest potential tax deductions the user might be "
        "eligible for.\n\n"
        f"Financial Data: {financial_summary}\n\n"
        f"Uploaded Documents:\n{documents}\n\n"
        "Based on this information, provide a list of potential tax deductions and a "
        "summary of your analysis.\n\n"
        "Format your response as a JSON object. Here is an example of the expected "
        f"structure:\n{json.dumps(_EXAMPLE_OUTPUT, indent=2)}"
    )
