"""Terminology corrections applied to Russian output."""

import re
from types import MappingProxyType

# English term -> preferred Russian rendering. Case variants are listed
# explicitly because matching is case-sensitive.
RUSSIAN_GLOSSARY = MappingProxyType({
    # Apps and services
    "WhatsApp": "Ватсап",
    "whatsapp": "ватсап",
    "Whatsapp": "Ватсап",
    "Telegram": "Телеграм",
    "telegram": "телеграм",
    "CEO": "генеральный директор",
    "ceo": "генеральный директор",
    # Meals
    "breakfast": "завтрак",
    "Breakfast": "Завтрак",
    "lunch": "обед",
    "Lunch": "Обед",
    "dinner": "ужин",
    "Dinner": "Ужин",
    "brunch": "поздний завтрак",
    "Brunch": "Поздний завтрак",
    "supper": "ужин",
    "Supper": "Ужин",
    # Snacks and breaks
    "snack": "перекус",
    "Snack": "Перекус",
    "tea time": "чаепитие",
    "Tea time": "Чаепитие",
    "coffee break": "кофе-брейк",
    "Coffee break": "Кофе-брейк",
    "midnight snack": "ночной перекус",
    "Midnight snack": "Ночной перекус",
    # Meal-time expressions
    "morning meal": "утренний прием пищи",
    "Morning meal": "Утренний прием пищи",
    "evening meal": "вечерний прием пищи",
    "Evening meal": "Вечерний прием пищи",
    "midday meal": "дневной прием пищи",
    "Midday meal": "Дневной прием пищи",
})


class TerminologyCorrector:
    """
    Rewrites glossary terms left untranslated by the model.

    Matching is whole-word, case-sensitive and global. Word boundaries are
    ASCII-based so a Latin term glued to Cyrillic text still matches.
    Longer terms are tried first, so "midnight snack" is replaced as a
    whole rather than leaving "midnight перекус".
    """

    def __init__(self, glossary=RUSSIAN_GLOSSARY):
        self._glossary = dict(glossary)
        terms = sorted(self._glossary, key=len, reverse=True)
        alternation = "|".join(re.escape(term) for term in terms)
        self._pattern = re.compile(rf"\b(?:{alternation})\b", re.ASCII)

    def apply_corrections(self, text: str, is_target_gendered_language: bool) -> str:
        """
        Replace glossary terms when translating into Russian.

        Args:
            text: Normalized translation.
            is_target_gendered_language: True if the target is Russian.

        Returns:
            Corrected text, or the input unchanged when the flag is False.
        """
        if not is_target_gendered_language or not self._glossary:
            return text
        return self._pattern.sub(lambda match: self._glossary[match.group(0)], text)
