"""天气预报的字段名和过滤器名"""


class WeatherForecastConstants:
    UID = "uid"
    DATE = "date"
    TEMPERATURE_C = "temperature_c"
    SUMMARY = "summary"

    BY_SUMMARY = "BySummary"
    BY_TEMPERATURE = "ByTemperature"
    TEMPERATURE_LESS_THAN = "TemperatureLessThan"

    REPORT_FILTERED_BY_SUMMARY = "WeatherForecastsFilteredBySummary"


SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)
