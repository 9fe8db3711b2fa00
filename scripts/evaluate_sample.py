"""Print the comfort score, outfit and learning outcome for sample inputs."""

from __future__ import annotations

import argparse
from typing import Sequence

from weatherfit.feedback.events import FeedbackEvent, FeedbackType
from weatherfit.feedback.learner import LearningUpdate
from weatherfit.monitoring.logging import configure_logging
from weatherfit.profile.comfort_profile import ComfortProfile
from weatherfit.services.comfort import ComfortReport, ComfortService
from weatherfit.weather.observation import WeatherObservation


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--temperature", type=float, default=18.0)
    parser.add_argument("--humidity", type=float, default=55.0)
    parser.add_argument("--wind", type=float, default=2.5)
    parser.add_argument("--uv", type=float, default=3.0)
    parser.add_argument("--pm25", type=float, default=10.0)
    parser.add_argument("--pm10", type=float, default=20.0)
    parser.add_argument("--rain", type=float, default=0.0)
    parser.add_argument("--comfort", type=int, default=20, help="comfort temperature in °C")
    parser.add_argument("--priority", action="append", default=[], help="heat, cold, humidity, wind, uv or pollution")
    parser.add_argument("--feedback", choices=[item.value for item in FeedbackType])
    return parser.parse_args(argv)


def _format_report(report: ComfortReport) -> list[str]:
    selection = report.selection
    outer = selection.outer_category.value if selection.outer_category else "-"
    return [
        report.message,
        f"tip: {report.tip}",
        f"feels like {selection.feels_like_temperature:.1f}°C (adjusted {selection.adjusted_temperature:.1f}°C)",
        f"top: {selection.top_category.value} {selection.top_items}",
        f"bottom: {selection.bottom_category.value} {selection.bottom_items}",
        f"outer: {outer} {selection.outer_items}",
        f"accessories: {selection.accessories}",
        f"confidence: {selection.confidence_score}",
    ]


def _format_update(update: LearningUpdate) -> str:
    status = "applied" if update.applied else "no change"
    return (
        f"learning {status}: reliability={update.reliability:.2f} rate={update.learning_rate:.3f} "
        f"comfort {update.previous.comfort_temperature} -> {update.profile.comfort_temperature}"
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    configure_logging()

    observation = WeatherObservation(
        temperature=args.temperature,
        humidity=args.humidity,
        wind_speed=args.wind,
        uv_index=args.uv,
        pm25=args.pm25,
        pm10=args.pm10,
        rain_1h=args.rain,
    )
    profile = ComfortProfile.create_from_setup(comfort_temperature=args.comfort, priorities=args.priority)
    service = ComfortService()

    report = service.evaluate(observation, profile)
    for line in _format_report(report):
        print(line)

    if args.feedback:
        event = FeedbackEvent(
            feedback_type=FeedbackType(args.feedback),
            feels_like_temperature=report.selection.feels_like_temperature,
            actual_temperature=observation.temperature,
            weather_score=int(report.score.total_score),
        )
        print(_format_update(service.submit_feedback(event, profile)))


if __name__ == "__main__":
    main()
