"""User-facing sentences built from scores, profiles and learning history."""

from __future__ import annotations

from weatherfit.profile.comfort_model import ComfortModel
from weatherfit.profile.comfort_profile import ComfortProfile, Priority
from weatherfit.scoring.weighting import ScoreResult, WeatherGrade

TRAIT_PHRASES = {
    Priority.HEAT: "You dislike the heat.",
    Priority.COLD: "You feel the cold easily.",
    Priority.HUMIDITY: "You especially dislike humidity.",
    Priority.WIND: "You are sensitive to wind.",
    Priority.UV: "You are sensitive to UV.",
    Priority.POLLUTION: "You are sensitive to air quality.",
}

# (lowest score, highest score, conclusion), both ends inclusive.
SCORE_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (90, 100, "Today is close to perfect!"),
    (75, 89, "Pleasant overall."),
    (55, 74, "A fairly ordinary day."),
    (35, 54, "A bit disappointing, so dress with care."),
    (0, 34, "Take care when heading out."),
)
UNKNOWN_SCORE_MESSAGE = "Weather data could not be checked."

GRADE_TIPS = {
    WeatherGrade.PERFECT: "Perfect weather! Enjoy whatever you have planned.",
    WeatherGrade.GOOD: "Nice weather! You can head out comfortably.",
    WeatherGrade.FAIR: "Decent weather, but dress for your own sensitivities.",
    WeatherGrade.POOR: "Prepare well before going out.",
    WeatherGrade.TERRIBLE: "Better keep time outdoors to a minimum today.",
}
TRAIT_TIP_SCORE_LIMIT = 70.0
COLD_TIP = "You usually feel the cold, so focus on staying warm."
HEAT_TIP = "You tend to overheat, so keep things cool."
HUMIDITY_TIP = "You are sensitive to humidity, so pick clothes that breathe."

TREND_THRESHOLD = 0.3
HOT_TREND_MESSAGE = "You have been feeling hot lately, so recommendations are learning to run cooler."
COLD_TREND_MESSAGE = "You have been feeling cold lately, so recommendations are learning to run warmer."
STABLE_TREND_MESSAGE = "Recommendations are settling in nicely for you!"


def score_conclusion(score: int) -> str:
    for low, high, conclusion in SCORE_BUCKETS:
        if low <= score <= high:
            return conclusion
    return UNKNOWN_SCORE_MESSAGE


def personalized_message(result: ScoreResult, profile: ComfortProfile) -> str:
    """One-line summary: grade, score, the strongest trait and a conclusion."""

    score = int(result.total_score)
    parts = [f"{result.grade.symbol} {score} points · {result.grade.description}."]
    if profile.first_priority is not None:
        parts.append(TRAIT_PHRASES[profile.first_priority])
    parts.append(score_conclusion(score))
    return " ".join(parts)


def personal_tip(result: ScoreResult, model: ComfortModel) -> str:
    """Grade-based tip, replaced by a trait tip when the main trait is hit."""

    traits = model.personality_traits()
    if traits:
        primary = traits[0]
        scores = result.element_scores
        if primary is Priority.COLD and scores.temperature < TRAIT_TIP_SCORE_LIMIT:
            return COLD_TIP
        if primary is Priority.HEAT and scores.temperature < TRAIT_TIP_SCORE_LIMIT:
            return HEAT_TIP
        if primary is Priority.HUMIDITY and scores.humidity < TRAIT_TIP_SCORE_LIMIT:
            return HUMIDITY_TIP
    return GRADE_TIPS[result.grade]


def learning_trend_message(average_adjustment: float) -> str:
    if average_adjustment >= TREND_THRESHOLD:
        return HOT_TREND_MESSAGE
    if average_adjustment <= -TREND_THRESHOLD:
        return COLD_TREND_MESSAGE
    return STABLE_TREND_MESSAGE
