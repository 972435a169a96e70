"""Static lookup tables: user-facing error messages, condition names, unit symbols."""

DEFAULT_ERROR_MESSAGES: dict[str, str] = {
    "api_key_missing": "API key is missing. Please check your configuration.",
    "invalid_input": "Please enter a valid city name.",
    "not_found": "City not found. Please check the spelling and try again.",
    "unauthorized": "Invalid API key. Please check your configuration.",
    "rate_limited": "Too many requests. Please wait a moment and try again.",
    "server_unavailable": (
        "Weather service is temporarily unavailable. Please try again later."
    ),
    "upstream_error": "Weather service error ({status_code}). Please try again.",
    "timeout": "Request timed out. Please try again.",
    "network_unavailable": "Network error. Please check your internet connection.",
    "malformed_response": "Received invalid weather data. Please try again later.",
    "generic": "An unexpected error occurred. Please try again.",
}

# OpenWeatherMap condition codes -> friendlier descriptions
WEATHER_CONDITIONS: dict[int, str] = {
    200: "Thunderstorm with light rain",
    201: "Thunderstorm with rain",
    202: "Thunderstorm with heavy rain",
    210: "Light thunderstorm",
    211: "Thunderstorm",
    212: "Heavy thunderstorm",
    221: "Ragged thunderstorm",
    230: "Thunderstorm with light drizzle",
    231: "Thunderstorm with drizzle",
    232: "Thunderstorm with heavy drizzle",
    300: "Light intensity drizzle",
    301: "Drizzle",
    302: "Heavy intensity drizzle",
    310: "Light intensity drizzle rain",
    311: "Drizzle rain",
    312: "Heavy intensity drizzle rain",
    313: "Shower rain and drizzle",
    314: "Heavy shower rain and drizzle",
    321: "Shower drizzle",
    500: "Light rain",
    501: "Moderate rain",
    502: "Heavy intensity rain",
    503: "Very heavy rain",
    504: "Extreme rain",
    511: "Freezing rain",
    520: "Light intensity shower rain",
    521: "Shower rain",
    522: "Heavy intensity shower rain",
    531: "Ragged shower rain",
    600: "Light snow",
    601: "Snow",
    602: "Heavy snow",
    611: "Sleet",
    612: "Light shower sleet",
    613: "Shower sleet",
    615: "Light rain and snow",
    616: "Rain and snow",
    620: "Light shower snow",
    621: "Shower snow",
    622: "Heavy shower snow",
    701: "Mist",
    711: "Smoke",
    721: "Haze",
    731: "Sand/dust whirls",
    741: "Fog",
    751: "Sand",
    761: "Dust",
    762: "Volcanic ash",
    771: "Squalls",
    781: "Tornado",
    800: "Clear sky",
    801: "Few clouds",
    802: "Scattered clouds",
    803: "Broken clouds",
    804: "Overcast clouds",
}

TEMPERATURE_SYMBOLS: dict[str, str] = {
    "metric": "°C",
    "imperial": "°F",
    "standard": "K",
}

SPEED_SYMBOLS: dict[str, str] = {
    "metric": "m/s",
    "imperial": "mph",
    "standard": "m/s",
    "kmh": "km/h",
}

PRESSURE_SYMBOLS: dict[str, str] = {
    "hpa": "hPa",
    "inhg": "inHg",
    "mmhg": "mmHg",
}
