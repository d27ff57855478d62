"""
Rule-based health advice used when the hosted model is unavailable.

Pure and deterministic: the same input always yields the same text.
"""

from typing import Optional, Sequence, Tuple

DISCLAIMER = (
    "⚠️ This information is for educational purposes only and is not a medical "
    "diagnosis. Always consult a healthcare professional for proper medical advice."
)

# Ordered: the first category whose keywords appear in the input wins.
_CATEGORIES: Sequence[Tuple[str, Tuple[str, ...], Tuple[str, ...]]] = (
    (
        "abdominal",
        ("stomach", "abdominal"),
        (
            "Stomach pain can have many causes including indigestion, gas, or mild food sensitivity",
            "Drink plenty of water and avoid spicy or heavy foods",
            "If pain is severe, persistent, or accompanied by fever/vomiting, see a doctor immediately",
        ),
    ),
    (
        "headache",
        ("headache",),
        (
            "Headaches can be caused by stress, dehydration, or tension",
            "Rest in a quiet room and stay hydrated",
            "If headache is severe, sudden, or different from usual, seek medical attention",
        ),
    ),
    (
        "fever",
        ("fever",),
        (
            "Fever is often a sign of infection",
            "Rest and stay hydrated",
            "If fever is high (over 103°F/39.4°C) or lasts more than 3 days, see a doctor",
        ),
    ),
)

_GENERIC_ADVICE = (
    "Monitor your symptoms and rest",
    "Stay hydrated and avoid strenuous activity",
    "If symptoms worsen or concern you, consult a healthcare professional",
)


def classify(symptoms: Optional[str]) -> str:
    """Return the name of the matching category, or ``"generic"``."""
    lowered = (symptoms or "").lower()
    for name, keywords, _ in _CATEGORIES:
        if any(k in lowered for k in keywords):
            return name
    return "generic"


def _advice_for(category: str) -> Sequence[str]:
    for name, _, advice in _CATEGORIES:
        if name == category:
            return advice
    return _GENERIC_ADVICE


def analyze(symptoms: Optional[str]) -> str:
    """
    Build the canned advisory text for ``symptoms``.

    Args:
        symptoms (str | None): Raw user input. ``None`` is treated as empty.

    Returns:
        str: Multi-line advice ending with :data:`DISCLAIMER`.
    """
    text = symptoms or ""
    bullets = "".join(f"• {line}\n" for line in _advice_for(classify(text)))
    return (
        f'Based on your symptoms "{text}", here\'s some general information:\n\n'
        f"{bullets}"
        f"\n{DISCLAIMER}"
    )
