"""
Explanation generator.

Builds the human-readable message list returned with every swim score:
1) sub-score commentary,
2) hazard/context messages driven by the raw inputs (every applicable one, in order),
3) exactly one summary banner, always at index 0.

Messages are fixed strings; some embed the integer sub-scores.
"""

from __future__ import annotations

from swimscore.domain.models import SwimInputs
from swimscore.scoring.composite import CAUTION_MIN_TOTAL, IDEAL_MIN_TOTAL
from swimscore.scoring.rules import is_thunderstorm

BANNER_IDEAL = "🏊 Ideal conditions for a swim!"
BANNER_CAUTION = "🤔 Moderate conditions; swim with caution."
BANNER_NOT_RECOMMENDED = "🚫 Conditions not recommended for swimming."
BANNERS = (BANNER_IDEAL, BANNER_CAUTION, BANNER_NOT_RECOMMENDED)

MSG_THUNDERSTORM = "⚡ DANGER: Thunderstorm activity detected - do not enter water"
MSG_STRONG_WIND = "🌬️ Strong winds reduce safety for swimmers"
MSG_COLD_WATER = "❄️ Water too cold (<15 °C) - risk of hypothermia"
MSG_HEAVY_PRECIP = "🌧️ Heavy precipitation may reduce visibility and safety"
MSG_LOW_VISIBILITY = "⚠️ Low visibility (<1 km) is unsafe for water activities"
MSG_POOR_AIR = "😷 Poor air quality (AQI ≥ 150) - consider wearing a mask"
MSG_HOT_AIR = "🔥 Very hot air temperature (> 38 °C) may be uncomfortable"
MSG_CHILLY_AIR = "🥶 Chilly air temperature (< 18 °C) may be uncomfortable"
MSG_EXTREME_UV = "🧴 Extreme UV levels (UV ≥ 11) - apply SPF 30+ sunscreen"
MSG_HIGH_UV = "☀️ High UV (UV ≥ 9) - apply sunscreen and limit exposure"
MSG_WIND_CHILL = "🌬️ Wind chill may make you feel colder when wet"
MSG_CLEAR_SKY_UV = "😎 Clear skies + UV ≥ 6 - bring shade and protective gear"


def banner_for(total: int) -> str:
    if total >= IDEAL_MIN_TOTAL:
        return BANNER_IDEAL
    if total >= CAUTION_MIN_TOTAL:
        return BANNER_CAUTION
    return BANNER_NOT_RECOMMENDED


def _score_messages(safety: int, comfort: int, performance: int) -> list[str]:
    messages: list[str] = []
    if safety < 20:
        messages.append(f"⚠️ Safety score is critically low ({safety}/100)")
    elif safety < 40:
        messages.append(f"⚠️ Safety concerns present (score: {safety}/100)")

    if comfort < 20:
        messages.append(f"😣 Comfort conditions are poor (score: {comfort}/100)")
    elif comfort > 80:
        messages.append(f"😊 Excellent comfort conditions (score: {comfort}/100)")

    if performance < 20:
        messages.append(f"🏃 Performance conditions are challenging (score: {performance}/100)")
    return messages


def _condition_messages(inputs: SwimInputs) -> list[str]:
    messages: list[str] = []

    # Hazards first.
    if is_thunderstorm(inputs):
        messages.append(MSG_THUNDERSTORM)
    if inputs.wind_speed >= 40:
        messages.append(MSG_STRONG_WIND)
    if inputs.sst < 15:
        messages.append(MSG_COLD_WATER)
    if inputs.precip_amount >= 10 or inputs.precip_last_24h >= 30:
        messages.append(MSG_HEAVY_PRECIP)
    if inputs.visibility < 1000:
        messages.append(MSG_LOW_VISIBILITY)
    if inputs.air_quality_index >= 150:
        messages.append(MSG_POOR_AIR)

    # Comfort.
    if inputs.apparent_temp > 38:
        messages.append(MSG_HOT_AIR)
    elif inputs.apparent_temp < 18:
        messages.append(MSG_CHILLY_AIR)
    if inputs.uv_index >= 11:
        messages.append(MSG_EXTREME_UV)
    elif inputs.uv_index >= 9:
        messages.append(MSG_HIGH_UV)

    # Performance.
    if inputs.wind_speed > 20 and inputs.apparent_temp < 26:
        messages.append(MSG_WIND_CHILL)
    if inputs.cloud_cover < 20 and inputs.uv_index >= 6:
        messages.append(MSG_CLEAR_SKY_UV)
    return messages


def build_explanation(
    *, safety: int, comfort: int, performance: int, inputs: SwimInputs, total: int
) -> list[str]:
    """Return the ordered explanation list; never empty, banner first."""
    messages = _score_messages(safety, comfort, performance)
    messages.extend(_condition_messages(inputs))
    messages.insert(0, banner_for(total))
    return messages
