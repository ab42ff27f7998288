# =============================================================================
# core/weather.py  -  Current Weather from wttr.in
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fetches current conditions for a location from the wttr.in JSON API and
#   reformats them as a short text block the agent can read back to a user.
#
# WHY WTTR.IN?
#   - Free, no API key
#   - Accepts free-text locations ("New York", "Orlando") - no geocoding step
#   - "?format=j1" returns structured JSON
#
# THE SEPARATION OF "FETCH", "PARSE" AND "FORMAT":
#   - get_weather() does the HTTP round trip and decides Success vs Failure
#   - parse_current_condition() pulls the fields we care about from the JSON
#   - format_weather() turns a WeatherSnapshot into text
#   Parsing and formatting are testable without any network.
#
# WHAT THIS MODULE DOES NOT DO:
#   No retries, no caching, no timeout.  Each call is one blocking GET; a
#   hung connection blocks that tool call until the OS gives up.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request

from core.config import WEATHER_URL
from core.models import Failure, Result, Success, WeatherSnapshot

logger = logging.getLogger(__name__)

# encodeURIComponent() keeps these on top of quote()'s own unreserved set.
_URI_COMPONENT_SAFE = "!~*'()"


def weather_url(location: str, base_url: str = WEATHER_URL) -> str:
    """Build the wttr.in JSON URL for a free-text location."""
    encoded = urllib.parse.quote(location, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}/{encoded}?format=j1"


def parse_current_condition(location: str, payload: dict) -> WeatherSnapshot:
    """Pick the first current_condition record out of a wttr.in response.

    Raises KeyError / IndexError / TypeError if the payload is not shaped
    like a j1 response.
    """
    current = payload["current_condition"][0]
    return WeatherSnapshot(
        location=location,
        temp_f=current["temp_F"],
        temp_c=current["temp_C"],
        condition=current["weatherDesc"][0]["value"],
        humidity=current["humidity"],
        wind_mph=current["windspeedMiles"],
        wind_dir=current["winddir16Point"],
    )


def format_weather(snapshot: WeatherSnapshot) -> str:
    return "\n".join([
        f"Weather for {snapshot.location}:",
        f"  Temperature: {snapshot.temp_f}°F ({snapshot.temp_c}°C)",
        f"  Condition:   {snapshot.condition}",
        f"  Humidity:    {snapshot.humidity}%",
        f"  Wind:        {snapshot.wind_mph} mph {snapshot.wind_dir}",
    ])


def get_weather(location: str, base_url: str = WEATHER_URL) -> Result:
    """Fetch and format current weather for `location`.

    Returns:
        Success with the formatted block, or Failure when wttr.in answers
        with a non-2xx status or with JSON we cannot read.  Network errors
        below HTTP (DNS, refused connection) are raised as URLError.
    """
    url = weather_url(location, base_url)
    logger.debug("GET %s", url)

    req = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(req) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        logger.debug("wttr.in returned HTTP %s for %r", exc.code, location)
        return Failure(f'Failed to fetch weather for "{location}".')

    # json.loads() decodes the bytes itself; bad UTF-8 is a ValueError too.
    try:
        snapshot = parse_current_condition(location, json.loads(body))
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        logger.warning("Unexpected wttr.in payload for %r: %s", location, exc)
        return Failure(f'Unexpected weather response for "{location}".')

    return Success(format_weather(snapshot))
