"""
inference_engine/services/prompts.py
====================================
Prompt templates for the LLM-backed strategy.
"""

from __future__ import annotations

from .schemas import Disease, PredictionInput

SYSTEM_PROMPT = (
    "You are a medical AI assistant. Always respond with valid JSON format "
    "as requested. Be precise and medically accurate."
)

USER_PROMPT_TEMPLATE = """You are a medical AI assistant specializing in symptom analysis and differential diagnosis.

PATIENT INFORMATION:
- Age: {age} years
- Gender: {gender}
- Symptoms: {symptoms}
- Duration: {duration}
- Severity: {severity}
- Additional Notes: {notes}

AVAILABLE DISEASES IN DATABASE:
{diseases}

TASK:
Analyze the patient's symptoms and provide a differential diagnosis with the following requirements:

1. **Top 3-5 most likely conditions** from the available diseases
2. **Confidence scores** (0.0 to 1.0) for each condition
3. **Medical reasoning** for each prediction
4. **Risk factors** based on patient demographics and symptoms
5. **Specific recommendations** for each condition
6. **Overall AI explanation** of the analysis

RESPONSE FORMAT (JSON):
{{
  "predictions": [
    {{
      "diseaseName": "Exact disease name from database",
      "confidence": 0.85,
      "reasoning": ["Reason 1", "Reason 2"],
      "riskFactors": ["Risk factor 1", "Risk factor 2"],
      "recommendations": ["Recommendation 1", "Recommendation 2"]
    }}
  ],
  "aiExplanation": "Overall explanation of the analysis and approach"
}}

IMPORTANT GUIDELINES:
- Only suggest diseases that exist in the provided database
- Use exact disease names as they appear in the database
- Provide realistic confidence scores based on symptom match
- Include age and gender considerations in reasoning
- Consider symptom severity and duration
- Provide actionable medical recommendations
- Always emphasize that this is for informational purposes only
- Recommend professional medical consultation for proper diagnosis
- Respond with the JSON object only, without markdown code fences

MEDICAL DISCLAIMER:
This analysis is for informational purposes only and should not replace professional medical advice, diagnosis, or treatment. Always consult with a qualified healthcare provider."""


def render_disease_context(diseases: list[Disease]) -> str:
    """One bullet per catalog entry: ``- name (code): description``."""
    return "\n".join(
        f"- {d.name} ({d.icd_code or 'N/A'}): {d.description or 'No description'}"
        for d in diseases
    )


def build_messages(prediction_input: PredictionInput, diseases: list[Disease]) -> list[dict[str, str]]:
    """Build the system + user chat messages for one prediction request."""
    user_prompt = USER_PROMPT_TEMPLATE.format(
        age=prediction_input.age,
        gender=prediction_input.gender,
        symptoms=", ".join(prediction_input.symptoms),
        duration=prediction_input.duration,
        severity=prediction_input.severity,
        notes=prediction_input.additional_notes or "None",
        diseases=render_disease_context(diseases),
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]
